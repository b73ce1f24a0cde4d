"""
Send context management using contextvars for automatic propagation.

The client sets the tenant (phone_number_id) and the recipient once per send
call; every logger obtained through get_logger picks them up without manual
parameter passing. Concurrent sends each run in their own context.
"""

from contextvars import ContextVar, Token

_tenant_context: ContextVar[str | None] = ContextVar("tenant_id", default=None)
_user_context: ContextVar[str | None] = ContextVar("user_id", default=None)


def set_request_context(
    tenant_id: str | None = None,
    user_id: str | None = None,
) -> tuple[Token | None, Token | None]:
    """
    Set the send context for the current async context.

    Args:
        tenant_id: Business phone number ID sending the message
        user_id: Recipient identifier

    Returns:
        Tokens that restore the previous values via reset_request_context
    """
    tenant_token = _tenant_context.set(tenant_id) if tenant_id is not None else None
    user_token = _user_context.set(user_id) if user_id is not None else None
    return tenant_token, user_token


def reset_request_context(tokens: tuple[Token | None, Token | None]) -> None:
    """Restore the context captured by set_request_context."""
    tenant_token, user_token = tokens
    if tenant_token is not None:
        _tenant_context.reset(tenant_token)
    if user_token is not None:
        _user_context.reset(user_token)


def get_current_tenant_context() -> str | None:
    """
    Get the current tenant ID from context variables.

    Returns:
        Current tenant ID (phone_number_id), or None if not set
    """
    return _tenant_context.get()


def get_current_user_context() -> str | None:
    """
    Get the current recipient from context variables.

    Returns:
        Current recipient, or None if not set
    """
    return _user_context.get()


def clear_request_context() -> None:
    """
    Clear the send context.

    Mostly useful for testing.
    """
    _tenant_context.set(None)
    _user_context.set(None)


def get_context_info() -> dict[str, str | None]:
    """Get current context information for debugging."""
    return {
        "tenant_id": get_current_tenant_context(),
        "user_id": get_current_user_context(),
    }
