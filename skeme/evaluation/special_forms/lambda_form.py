from skeme import EvaluatorFn
from skeme import SyntaxNode, LispValue
from skeme.errors import SkemeBuiltinArityError, SkemeSyntaxError
from skeme.printer import format_nodes, to_raw_string
from skeme.types.environment import Environment
from skeme.types.lambda_fn import Lambda
from skeme.types.symbol import Symbol


def lambda_form(
    tail: list[SyntaxNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) needs at least one body form.
    # Multiple body forms are evaluated in order, the last one giving the result.
    if len(tail) < 2:
        raise SkemeBuiltinArityError(
            f"Must supply at least two arguments to lambda: {format_nodes(tail)}"
        )

    params = tail[0]
    if not isinstance(params, list):
        raise SkemeSyntaxError(f"Unexpected node for arguments in lambda: {format_nodes(tail)}")

    formals: list[Symbol] = []
    for item in params:
        if not isinstance(item, Symbol):
            raise SkemeSyntaxError(
                f"Unexpected argument in lambda arguments: {to_raw_string(item)}"
            )
        formals.append(item)

    return Lambda(formals, list(tail[1:]), env)
