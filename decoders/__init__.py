"""
Composable validators for decoding untyped data.
"""
from .core import (
    UNDEFINED,
    Validator,
    create
)
from .primitives import (
    any,
    string,
    number,
    boolean,
    null,
    undefined
)
from .literal import literal
from .union import union, optional
from .objects import ObjectValidator, object, merge
from decoders.utils.exceptions import (
    DecoderError,
    DecodeError,
    ValidationError,
    TypeMismatchError,
    ConfigurationError
)
from decoders.utils.error_handlers import safe_decode

__all__ = [
    'UNDEFINED',
    'Validator',
    'ObjectValidator',
    'create',
    'any',
    'string',
    'number',
    'boolean',
    'null',
    'undefined',
    'literal',
    'union',
    'optional',
    'object',
    'merge',
    'DecoderError',
    'DecodeError',
    'ValidationError',
    'TypeMismatchError',
    'ConfigurationError',
    'safe_decode',
]
