from skeme import SyntaxNode, LispValue, EvaluatorFn
from skeme.errors import SkemeBuiltinArityError, SkemeSyntaxError, SkemeUnquoteArityError
from skeme.printer import format_nodes
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol

UNQUOTE = Symbol("unquote")


def quote_node(
    node: SyntaxNode,
    quasi: bool,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Turn a syntax node into a literal value without evaluating it.

    Identifiers become Symbols and lists are rebuilt element by element. In
    quasi mode, `(unquote x)` escapes back to evaluation of `x` in `env`.
    Nesting depth is not tracked: an inner quasiquote stays a literal list and
    every unquote escapes, however deeply it is nested.
    """
    if isinstance(node, Symbol):
        return Symbol(node.id)
    if isinstance(node, (bool, int, str)):
        return node
    if not isinstance(node, list):
        raise SkemeSyntaxError(f"Unexpected node: {node!r}")

    if quasi and node and node[0] == UNQUOTE:
        if len(node) != 2:
            raise SkemeUnquoteArityError(
                f"Must supply exactly one argument to unquote: {format_nodes(node)}"
            )
        return evaluate_fn(node[1], env)
    return [quote_node(item, quasi, env, evaluate_fn) for item in node]


def quote_form(
    tail: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SkemeBuiltinArityError(
            f"Must supply exactly one argument to quote: {format_nodes(tail)}"
        )
    return quote_node(tail[0], False, env, evaluate_fn)


def quasiquote_form(
    tail: list[SyntaxNode], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SkemeBuiltinArityError(
            f"Must supply exactly one argument to quasiquote: {format_nodes(tail)}"
        )
    return quote_node(tail[0], True, env, evaluate_fn)
