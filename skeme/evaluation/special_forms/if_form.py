from skeme import EvaluatorFn
from skeme import SyntaxNode, LispValue
from skeme.errors import SkemeBuiltinArityError
from skeme.printer import format_nodes
from skeme.types.environment import Environment
from skeme.types.values import is_false


def if_form(
    tail: list[SyntaxNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise SkemeBuiltinArityError(
            f"Must supply exactly three arguments to if: {format_nodes(tail)}"
        )

    cond = evaluate_fn(tail[0], env)
    # Only #f is false; the branch not taken is never evaluated
    if is_false(cond):
        return evaluate_fn(tail[2], env)
    return evaluate_fn(tail[1], env)
