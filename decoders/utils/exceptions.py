"""
Exception hierarchy for decoders.
"""
from typing import Any, Dict, Optional


class DecoderError(Exception):
    """Base exception for all decoders errors."""

    def __init__(
        self,
        message: str = "",
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class DecodeError(DecoderError):
    """Base exception for failures while decoding a value."""
    pass


class ValidationError(DecodeError):
    """
    Raised when a value has the right shape but is semantically invalid.

    This is the only error combinators recover from.
    """
    pass


class TypeMismatchError(DecodeError, TypeError):
    """Raised when a value's runtime shape does not match a validator."""
    pass


class ConfigurationError(DecoderError):
    """Raised when validators or library settings are misconfigured."""
    pass
