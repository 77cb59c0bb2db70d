"""
Utility modules for decoders.
"""
from .logging_config import get_logger, LoggerFactory, StructuredFormatter
from .exceptions import (
    DecoderError,
    DecodeError,
    ValidationError,
    TypeMismatchError,
    ConfigurationError
)
from .error_handlers import safe_decode

__all__ = [
    'get_logger',
    'LoggerFactory',
    'StructuredFormatter',
    'DecoderError',
    'DecodeError',
    'ValidationError',
    'TypeMismatchError',
    'ConfigurationError',
    'safe_decode',
]
