"""
Closed-schema object validator and merging of object validators.
"""
from collections.abc import Mapping as MappingABC
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping
from decoders.utils.exceptions import ConfigurationError, ValidationError
from decoders.utils.logging_config import get_logger
from .core import UNDEFINED, Validator

logger = get_logger(__name__)


def is_mapping(value: Any) -> bool:
    return isinstance(value, MappingABC)


class ObjectValidator(Validator):
    """
    Validator for mappings with a fixed set of keys.

    A field is optional when its validator accepts ``UNDEFINED`` and
    required otherwise. Keys not declared as fields are rejected.
    """

    __slots__ = ('_input', '_required_keys', '_optional_keys')

    def __init__(self, fields: Mapping[str, Validator]):
        for key, validator in fields.items():
            if not isinstance(key, str):
                raise ConfigurationError(
                    f"Field names must be strings, got {type(key).__name__}",
                    details={'key': repr(key)}
                )
            if not isinstance(validator, Validator):
                raise ConfigurationError(
                    f"Field '{key}' must be a validator, got {type(validator).__name__}",
                    details={'key': key}
                )

        field_map = MappingProxyType(dict(fields))
        required = frozenset(
            key for key, validator in field_map.items() if not validator.matches(UNDEFINED)
        )

        super().__init__(
            is_mapping,
            self._validate_mapping,
            name=f"object({', '.join(field_map)})"
        )
        self._init_attr('_input', field_map)
        self._init_attr('_required_keys', required)
        self._init_attr('_optional_keys', frozenset(field_map) - required)

    @property
    def required_keys(self) -> FrozenSet[str]:
        return self._required_keys

    @property
    def optional_keys(self) -> FrozenSet[str]:
        return self._optional_keys

    def _validate_mapping(self, value: Mapping) -> Dict[str, Any]:
        present = set(value.keys())

        for key in self._input:
            if key in self._required_keys and key not in present:
                logger.debug(f"{self.name}: required key missing: {key!r}")
                raise ValidationError(
                    "required key missing",
                    error_code='REQUIRED_KEY_MISSING',
                    details={'key': key}
                )

        for key in value.keys():
            if key not in self._input:
                logger.debug(f"{self.name}: extra key: {key!r}")
                raise ValidationError(
                    "extra key",
                    error_code='EXTRA_KEY',
                    details={'key': repr(key)}
                )

        result = {}
        for key, validator in self._input.items():
            raw = value[key] if key in present else UNDEFINED
            result[key] = validator.decode(raw)
        return result


def object(fields: Mapping[str, Validator]) -> ObjectValidator:
    """Build a closed-schema validator from a mapping of field validators."""
    return ObjectValidator(fields)


def merge(*validators: ObjectValidator) -> ObjectValidator:
    """
    Combine two or three object validators into one covering all their fields.

    Field sets are expected to be disjoint. On a shared key the later
    validator's field wins.
    """
    if not 2 <= len(validators) <= 3:
        raise ConfigurationError(
            f"merge() takes two or three object validators, got {len(validators)}"
        )
    for validator in validators:
        if not isinstance(validator, ObjectValidator):
            raise ConfigurationError(
                f"merge() arguments must be object validators, got {type(validator).__name__}"
            )

    fields: Dict[str, Validator] = {}
    for validator in validators:
        shared = fields.keys() & validator._input.keys()
        if shared:
            logger.warning(f"merge(): overriding shared field(s) {sorted(shared)}")
        fields.update(validator._input)
    return ObjectValidator(fields)
