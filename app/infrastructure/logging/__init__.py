"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize structlog for the process
    - get_logger(): Logger bound with an explicit or detected name
    - get_module_logger(): Logger bound with the calling module's path
    - bind_session_context(): Tag every event of a viewer or author session

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("policy_loaded", version=1)
"""

from infrastructure.logging.context import (
    bind_session_context,
    get_session_id,
    new_session_id,
)
from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_session_context",
    "get_session_id",
    "new_session_id",
]
