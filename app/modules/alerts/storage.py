"""Storage collaborators for the alerts module.

Concrete implementations of the OverrideStore and PolicyStorage protocols:
in-memory variants for sessions and tests, and a YAML file-backed policy
storage for deployments that keep the governance document on disk.
"""

import asyncio
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from infrastructure.logging import get_module_logger
from modules.alerts.domain.errors import PolicyStorageError

logger = get_module_logger()


class InMemoryOverrideStore:
    """Dict-backed override store scoped to one viewer session."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class InMemoryPolicyStorage:
    """Policy storage holding the document in memory."""

    def __init__(self, document: Optional[Mapping[str, Any]] = None):
        self._document: Optional[Dict[str, Any]] = (
            dict(document) if document is not None else None
        )

    async def load_policy(self) -> Optional[Dict[str, Any]]:
        return dict(self._document) if self._document is not None else None

    async def save_policy(self, document: Mapping[str, Any]) -> None:
        self._document = dict(document)


class YAMLPolicyStorage:
    """Policy storage backed by a YAML document on disk.

    A missing file loads as an empty document, which normalizes to the
    default policy. File I/O runs in a worker thread so the event loop is
    never blocked.

    Attributes:
        path: Location of the YAML policy document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    async def load_policy(self) -> Optional[Dict[str, Any]]:
        """Read the policy document.

        Returns:
            Parsed document, or None when the file does not exist.

        Raises:
            ValueError: If the file is not valid YAML.
        """
        return await asyncio.to_thread(self._read)

    async def save_policy(self, document: Mapping[str, Any]) -> None:
        """Write the policy document.

        Raises:
            PolicyStorageError: If the file cannot be written.
        """
        await asyncio.to_thread(self._write, dict(document))

    def _read(self) -> Optional[Dict[str, Any]]:
        if not self.path.exists():
            logger.info("policy_file_missing", path=str(self.path))
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(self.path), error=str(e))
            raise ValueError(f"Failed to parse {self.path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(self.path), expected="dict")
            return None
        return data

    def _write(self, document: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(document, f, sort_keys=False, allow_unicode=True)
        except OSError as e:
            logger.error("policy_write_failed", file=str(self.path), error=str(e))
            raise PolicyStorageError(f"Failed to write {self.path}: {e}", cause=e) from e
        logger.info("policy_file_written", path=str(self.path))
