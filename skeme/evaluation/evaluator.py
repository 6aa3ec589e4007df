"""Core evaluator for skeme.

Reduces syntax nodes to values. Every non-empty list is an application: the
head is evaluated to a procedure and applied to the unevaluated tail, so
special forms need no separate dispatch path.
"""

from __future__ import annotations

from skeme import SyntaxNode, LispValue, EvaluatorFn
from skeme.errors import SkemeNotAProcedure, SkemeSyntaxError
from skeme.printer import format_nodes, to_string
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol
from skeme.types.values import is_procedure
from skeme.evaluation.apply import apply


def evaluate(node: SyntaxNode, env: Environment) -> LispValue:
    """Evaluate a single node in `env`."""
    match node:
        case Symbol():
            return env.lookup(node)
        case bool() | int() | str():
            return node
        case []:
            return []
        case list():
            return evaluate_expression(node, env)
    raise SkemeSyntaxError(f"Unexpected node: {node!r}")


def evaluate_sequence(
    nodes: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn = evaluate
) -> LispValue:
    """Evaluate nodes in order and return the last value, or [] if there are none."""
    result: LispValue = []
    for node in nodes:
        result = evaluate_fn(node, env)
    return result


def evaluate_expression(nodes: list[SyntaxNode], env: Environment) -> LispValue:
    if not nodes:
        raise SkemeSyntaxError(f"Can't evaluate an empty expression: {format_nodes(nodes)}")
    head, *tail = nodes
    fn = evaluate(head, env)
    if not is_procedure(fn):
        raise SkemeNotAProcedure(
            f"First element in an expression must be a procedure: {to_string(fn)}"
        )
    return apply(fn, tail, env, evaluate)
