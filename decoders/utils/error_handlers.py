"""
Error handling helpers for decoding.
"""
from typing import Any
from .logging_config import get_logger
from .exceptions import DecodeError


logger = get_logger(__name__)


def safe_decode(
    validator: Any,
    value: Any,
    default: Any = None,
    log_errors: bool = True
) -> Any:
    """
    Decode a value and return a default when decoding fails.

    Only decoding failures (``ValidationError`` and ``TypeMismatchError``)
    are turned into ``default``; any other exception propagates.

    Args:
        validator: Validator to decode with
        value: Untyped input value
        default: Value to return when decoding fails
        log_errors: Whether to log the failure

    Returns:
        Decoded value or default value
    """
    try:
        return validator.decode(value)
    except DecodeError as e:
        if log_errors:
            logger.debug(
                f"Decoding with {validator!r} failed: {e.message or e.error_code}",
                extra={'extra_fields': {'error_details': e.to_dict()}}
            )
        return default
