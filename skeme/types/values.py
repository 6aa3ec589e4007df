"""Runtime value variants and structural equality.

A value is one of:

- Symbol     -> skeme.types.symbol.Symbol
- Integer    -> int (never bool)
- Boolean    -> True / False
- String     -> str
- List       -> list of values; [] doubles as the null result
- Procedure  -> NativeProcedure or Lambda
"""

from __future__ import annotations

from typing import Any

from skeme import LispValue
from skeme.types.lambda_fn import Lambda
from skeme.types.native_fn import NativeProcedure
from skeme.types.symbol import Symbol

PROCEDURE_TYPES = (NativeProcedure, Lambda)


def is_integer(value: Any) -> bool:
    # bool is a subclass of int in Python
    return isinstance(value, int) and not isinstance(value, bool)


def is_procedure(value: Any) -> bool:
    return isinstance(value, PROCEDURE_TYPES)


def is_false(value: Any) -> bool:
    """Only the Boolean false is falsy; 0, "" and () are all true."""
    return value is False


def type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if is_integer(value):
        return "integer"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, list):
        return "list"
    if is_procedure(value):
        return "procedure"
    return type(value).__name__


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality over values. Procedures are equal only to themselves."""
    if a is b:
        return True
    if type_name(a) != type_name(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if is_procedure(a):
        return False
    return a == b
