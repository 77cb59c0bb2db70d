"""
Validator for a fixed set of literal values.
"""
import math
from typing import Any, Hashable, Tuple, Union
from decoders.utils.exceptions import ConfigurationError, ValidationError
from .core import Validator, create
from .primitives import is_boolean, is_number, is_string

Literal = Union[str, int, float, bool]


def _is_literal_type(value: Any) -> bool:
    return is_string(value) or is_number(value) or is_boolean(value)


def _literal_kind(value: Any) -> str:
    if is_boolean(value):
        return 'boolean'
    if is_number(value):
        return 'number'
    return 'string'


def _literal_key(value: Any) -> Tuple[str, Hashable]:
    """Hashable key keeping True apart from 1 while 1 == 1.0 and nan == nan."""
    kind = _literal_kind(value)
    if kind == 'boolean':
        return (kind, bool(value))
    if kind == 'number' and math.isnan(value):
        return (kind, 'nan')
    return (kind, value)


def literal(*values: Literal) -> Validator:
    """
    Build a validator accepting exactly the given strings, numbers or booleans.

    Shape matching is narrower than "any string, number or boolean": only
    values of the primitive kinds present among the allowed values match.
    So ``literal('a').decode(1)`` raises ``TypeMismatchError`` (also inside
    a union, where a number never reaches this branch's ``validate``),
    while ``literal('a').decode('b')`` fails validation with
    ``ValidationError``.
    """
    if not values:
        raise ConfigurationError("literal() requires at least one value")
    for value in values:
        if not _is_literal_type(value):
            raise ConfigurationError(
                f"Literal values must be strings, numbers or booleans, got {type(value).__name__}",
                details={'value': repr(value)}
            )

    kinds = frozenset(_literal_kind(value) for value in values)
    allowed = frozenset(_literal_key(value) for value in values)

    def matches_kind(value: Any) -> bool:
        return _is_literal_type(value) and _literal_kind(value) in kinds

    def validate_literal(value: Literal) -> Literal:
        if _literal_key(value) in allowed:
            return value
        raise ValidationError(
            "invalid literal",
            error_code='INVALID_LITERAL',
            details={'value': repr(value), 'allowed': [repr(v) for v in values]}
        )

    name = f"literal({', '.join(repr(value) for value in values)})"
    return create(matches_kind, validate_literal, name=name)
