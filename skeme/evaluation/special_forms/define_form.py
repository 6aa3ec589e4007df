import logging

from skeme import EvaluatorFn
from skeme import SyntaxNode, LispValue
from skeme.errors import SkemeBuiltinArityError, SkemeDuplicateDefine, SkemeSyntaxError
from skeme.printer import format_nodes
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SyntaxNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; redefining a local name is an error.
    """
    if len(tail) != 2:
        raise SkemeBuiltinArityError(
            f"Must supply exactly two arguments to define: {format_nodes(tail)}"
        )

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SkemeSyntaxError(f"Unexpected node for name in define: {format_nodes(tail)}")
    if env.contains(name):
        raise SkemeDuplicateDefine(f"Duplicate define: {name}")

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("Defined %s", name)
    return []
