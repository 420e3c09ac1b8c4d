"""Session context binding for structured logging.

A viewer or author session is the unit of work here: one preference
resolution, one policy snapshot. Binding the session id to structlog's
context variables tags every event logged inside the block, including
events from the resolver and policy adapter.

Usage:
    from infrastructure.logging import bind_session_context

    with bind_session_context(session_id, tenant="contoso"):
        visible = await service.alerts_for_viewer(variants)
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


def new_session_id() -> str:
    """Generate a session id for log correlation."""
    return str(uuid.uuid4())


@contextmanager
def bind_session_context(
    session_id: Optional[str] = None,
    tenant: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind session-scoped context to all logs within the block.

    Args:
        session_id: Session identifier. Generated when omitted.
        tenant: Tenant name, if known.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The bound session id.
    """
    context: dict[str, Any] = {"session_id": session_id or new_session_id()}
    if tenant is not None:
        context["tenant"] = tenant
    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["session_id"]
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_session_id() -> Optional[str]:
    """Session id bound to the current logging context, if any."""
    return structlog.contextvars.get_contextvars().get("session_id")
