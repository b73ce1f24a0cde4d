"""
WhatsApp error handling utilities.

Provides centralized classification and logging for failed send operations,
including authentication and throughput error detection.
"""

from wacloud.core.logging.logger import ContextLogger
from wacloud.messaging.whatsapp.utils.errors import RequestError, WhatsAppClientError

# Graph API error codes
ERROR_CODE_ACCESS_TOKEN = 190
RATE_LIMIT_ERROR_CODES = frozenset({4, 80007, 130429, 131048, 131056})


def is_authentication_error(error: Exception) -> bool:
    """Check if an exception indicates an authentication failure.

    Args:
        error: The exception to check

    Returns:
        True for HTTP 401 responses or Graph error code 190 (invalid/expired token)
    """
    if isinstance(error, RequestError):
        return error.status == 401 or error.code == ERROR_CODE_ACCESS_TOKEN
    return False


def is_rate_limit_error(error: Exception) -> bool:
    """Check if an exception indicates a throughput or pair rate limit."""
    if isinstance(error, RequestError):
        return error.status == 429 or error.code in RATE_LIMIT_ERROR_CODES
    return False


def log_request_error(
    error: WhatsAppClientError,
    operation: str,
    recipient: str,
    tenant_id: str,
    logger: ContextLogger,
) -> None:
    """Log a failed send with consistent emphasis.

    Args:
        error: The client error that occurred
        operation: Description of the operation that failed (e.g., "send template")
        recipient: The recipient identifier
        tenant_id: The phone_number_id for logging context
        logger: Logger instance for error logging
    """
    if is_authentication_error(error):
        logger.error("🚨" * 10)
        logger.error("🚨 CRITICAL: WHATSAPP ACCESS TOKEN EXPIRED OR INVALID! 🚨")
        logger.error(f"🚨 Tenant {tenant_id} authentication FAILED - cannot {operation}")
        logger.error("🚨 ACTION REQUIRED: Update the WhatsApp access token!")
        logger.error("🚨" * 10)
    elif is_rate_limit_error(error):
        logger.warning(
            f"Rate limit hit for tenant {tenant_id} while trying to {operation} "
            f"to {recipient}"
        )

    logger.error(f"Failed to {operation} to {recipient}: {error!r}")
