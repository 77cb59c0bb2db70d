"""
Core validator abstraction.

A validator pairs a predicate (``matches``) that recognizes the shape of an
untyped value with a transform (``validate``) that turns the recognized
value into the decoded output.
"""
from typing import Any, Callable, Generic, Optional, TypeVar
from decoders.utils.exceptions import TypeMismatchError

Output = TypeVar('Output')
Input = TypeVar('Input')


class _Undefined:
    """Type of the ``UNDEFINED`` sentinel: a value that is not there."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


def _identity(value: Any) -> Any:
    return value


class Validator(Generic[Output, Input]):
    """
    Immutable predicate/transform pair.

    Validators are built once and can be shared freely between threads:
    ``decode`` keeps no state on the validator.
    """

    __slots__ = ('_matches', '_validate', '_name')

    def __init__(
        self,
        matches: Callable[[Any], bool],
        validate: Callable[[Input], Output],
        name: Optional[str] = None
    ):
        self._init_attr('_matches', matches)
        self._init_attr('_validate', validate)
        self._init_attr('_name', name or getattr(matches, '__name__', 'validator'))

    def __setattr__(self, key: str, value: Any):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def _init_attr(self, key: str, value: Any):
        """Set an attribute during construction."""
        object.__setattr__(self, key, value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    @property
    def name(self) -> str:
        return self._name

    def matches(self, value: Any) -> bool:
        """Return True if the value has the shape this validator accepts."""
        return self._matches(value)

    def validate(self, value: Input) -> Output:
        """Transform a value that already passed ``matches``."""
        return self._validate(value)

    def decode(self, value: Any) -> Output:
        """
        Check the shape of an untyped value and transform it.

        Raises:
            TypeMismatchError: If the value does not match this validator
            ValidationError: If the value matches but is invalid
        """
        if self._matches(value):
            return self._validate(value)
        raise TypeMismatchError(
            f"Expected {self._name}, got {type(value).__name__}",
            details={'expected': self._name, 'actual': type(value).__name__}
        )

    def __call__(self, value: Any) -> Output:
        """Allow validator to be called as a function."""
        return self.decode(value)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._name}>"


def create(
    matches: Callable[[Any], bool],
    validate: Optional[Callable[[Any], Any]] = None,
    name: Optional[str] = None
) -> Validator:
    """
    Build a validator from a predicate and an optional transform.

    Args:
        matches: Predicate recognizing the accepted input shape
        validate: Transform applied to matching values (identity if omitted)
        name: Name used in repr and error messages (defaults to the
            predicate's ``__name__``)
    """
    return Validator(matches, validate or _identity, name)
