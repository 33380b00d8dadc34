"""Runtime values for Arith.

A runtime value is either a number, held as a Python `float`, or a function,
held as the `FunctionDef` node that defined it. These helpers name, format
and check values for the interpreter and the command line.
"""

from __future__ import annotations

from typing import Union

from .ast import FunctionDef
from .errors import TypeMismatchError


Value = Union[float, FunctionDef]


def is_number(value: object) -> bool:
    return isinstance(value, float)


def is_function(value: object) -> bool:
    return isinstance(value, FunctionDef)


def type_name(value: object) -> str:
    if is_number(value):
        return 'Number'
    if is_function(value):
        return 'Function'
    return type(value).__name__


def to_string(value: Value) -> str:
    """Format a value for output; numbers use Python's float repr."""
    if is_function(value):
        return repr(value)
    return repr(float(value))


def expect_number(value: Value, context: str) -> float:
    if not is_number(value):
        raise TypeMismatchError(f"{context} expects a Number, got {type_name(value)} {to_string(value)}")
    return value
