"""
Union and optional combinators.
"""
from typing import Any
from decoders.utils.exceptions import ConfigurationError, ValidationError
from decoders.utils.logging_config import get_logger
from .core import Validator, create
from .primitives import undefined

logger = get_logger(__name__)


def union(*validators: Validator) -> Validator:
    """
    Combine validators into one that accepts what any of them accepts.

    Branches are tried in argument order. A branch whose ``validate`` raises
    ``ValidationError`` is skipped in favour of the next matching branch;
    any other exception aborts the union.
    """
    if not validators:
        raise ConfigurationError("union() requires at least one validator")
    for validator in validators:
        if not isinstance(validator, Validator):
            raise ConfigurationError(
                f"union() arguments must be validators, got {type(validator).__name__}"
            )

    name = f"union({', '.join(validator.name for validator in validators)})"

    def matches_any(value: Any) -> bool:
        return any(validator.matches(value) for validator in validators)

    def validate_first(value: Any) -> Any:
        for index, validator in enumerate(validators):
            if not validator.matches(value):
                continue
            try:
                return validator.validate(value)
            except ValidationError as e:
                logger.debug(f"{name}: branch {index} ({validator.name}) rejected value: {e.message}")
        logger.debug(f"{name}: no branch accepted value")
        raise ValidationError(
            "no matching branch",
            error_code='NO_MATCHING_BRANCH'
        )

    return create(matches_any, validate_first, name=name)


def optional(validator: Validator) -> Validator:
    """Accept what ``validator`` accepts, or ``UNDEFINED``."""
    return union(validator, undefined)
