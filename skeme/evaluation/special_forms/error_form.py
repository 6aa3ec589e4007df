from skeme import SyntaxNode, LispValue, EvaluatorFn
from skeme.errors import SkemeBuiltinArityError, SkemeUserError
from skeme.printer import format_nodes, to_string
from skeme.types.environment import Environment


def error_form(tail: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(error value) raises with the rendered value as its message."""
    if len(tail) != 1:
        raise SkemeBuiltinArityError(
            f"Must supply exactly one argument to error: {format_nodes(tail)}"
        )
    raise SkemeUserError(to_string(evaluate_fn(tail[0], env)))
