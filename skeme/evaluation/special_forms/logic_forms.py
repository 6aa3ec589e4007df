from skeme import SyntaxNode, LispValue, EvaluatorFn
from skeme.types.environment import Environment
from skeme.types.values import is_false


def and_form(tail: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If no operand is #f, returns the value of
    the last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_false(val):
            return False
        result = val
    return result


def or_form(tail: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If every operand is #f, or there are none, returns #f.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if not is_false(val):
            return val
    return False
