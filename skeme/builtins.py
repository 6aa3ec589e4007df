from __future__ import annotations
from types import MappingProxyType
from skeme import SyntaxNode, LispValue, EvaluatorFn
from skeme.errors import SkemeBuiltinArityError, SkemeTypeError
from skeme.evaluation.special_forms import SPECIAL_FORMS
from skeme.printer import format_nodes, to_raw_string
from skeme.types.environment import Environment
from skeme.types.native_fn import NativeProcedure
from skeme.types.values import is_integer

# -------------------------------
# Arithmetic
# -------------------------------
def _integer_arg(name: str, node: SyntaxNode, env: Environment, evaluate_fn: EvaluatorFn) -> int:
    value = evaluate_fn(node, env)
    if not is_integer(value):
        raise SkemeTypeError(f"Unexpected node during {name}: {to_raw_string(node)}")
    return value

def add(args: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(args) < 2:
        raise SkemeBuiltinArityError(f"Must supply at least two arguments to +: {format_nodes(args)}")
    return sum(_integer_arg("+", n, env, evaluate_fn) for n in args)

def sub(args: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(args) != 2:
        raise SkemeBuiltinArityError(f"Must supply exactly two arguments to -: {format_nodes(args)}")
    left = _integer_arg("-", args[0], env, evaluate_fn)
    right = _integer_arg("-", args[1], env, evaluate_fn)
    return left - right

# -------------------------------
# Lists
# -------------------------------
def make_list(args: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return [evaluate_fn(n, env) for n in args]

# -------------------------------
# Registration
# -------------------------------
BUILTINS = MappingProxyType({
    **SPECIAL_FORMS,
    "+": add,
    "-": sub,
    "list": make_list,
})

def register(env: Environment) -> None:
    """Install every builtin into `env` as a NativeProcedure."""
    for name, fn in BUILTINS.items():
        env.define(name, NativeProcedure(name, fn))
