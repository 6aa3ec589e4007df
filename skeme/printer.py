"""Canonical textual form of values.

`to_string` is the top-level form used in error messages and results: symbols
and lists carry a leading quote. Nested list elements use `to_raw_string`, the
unprefixed form.
"""

from skeme import LispValue
from skeme.types.symbol import Symbol
from skeme.types.values import is_procedure


def to_string(value: LispValue) -> str:
    if isinstance(value, (Symbol, list)):
        return f"'{to_raw_string(value)}"
    return to_raw_string(value)


def to_raw_string(value: LispValue) -> str:
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return f"({' '.join(to_raw_string(v) for v in value)})"
    if is_procedure(value):
        return "#<procedure>"
    return repr(value)


def format_nodes(nodes: list) -> str:
    """Render a run of syntax nodes, e.g. the arguments of a failing call."""
    return to_raw_string(list(nodes))
