from skeme import EvaluatorFn
from skeme import SyntaxNode, LispValue
from skeme.errors import SkemeBuiltinArityError, SkemeSyntaxError, SkemeUnboundSymbol
from skeme.printer import format_nodes
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol


def set_form(
    tail: list[SyntaxNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise SkemeBuiltinArityError(
            f"Must supply exactly two arguments to set!: {format_nodes(tail)}"
        )
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SkemeSyntaxError(f"Unexpected node for name in set!: {format_nodes(tail)}")
    # Checked before evaluating so an unbound target never runs the value expression
    if env.find(var_sym) is None:
        raise SkemeUnboundSymbol(f"Can't set! an undefined variable: {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return []
