"""
Leaf validators for primitive values.
"""
from typing import Any
import numpy as np
from .core import UNDEFINED, create


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool subclasses int but is not a number here
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_null(value: Any) -> bool:
    return value is None


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


any = create(lambda value: True, name='any')
string = create(is_string, name='string')
number = create(is_number, name='number')
boolean = create(is_boolean, name='boolean')
null = create(is_null, name='null')
undefined = create(is_undefined, name='undefined')
