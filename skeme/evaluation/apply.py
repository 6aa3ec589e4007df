"""Application engine for skeme.

Procedures come in exactly two kinds:
- NativeProcedure: receives the raw argument nodes and evaluates what it needs.
- Lambda: arguments are evaluated in the caller's environment and bound in one
  fresh frame; the body runs there as a sequence.
"""

import logging

from skeme import SyntaxNode, LispValue, EvaluatorFn
from skeme.errors import SkemeArityError, SkemeNotAProcedure
from skeme.printer import format_nodes, to_string
from skeme.types.environment import Environment
from skeme.types.lambda_fn import Lambda
from skeme.types.native_fn import NativeProcedure

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    args: list[SyntaxNode],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a user procedure to unevaluated argument nodes.

    Parameters:
    - fn: The Lambda being applied.
    - args: The argument nodes, not yet evaluated.
    - caller_env: The environment of the call site. Arguments are always
      evaluated here; under dynamic scoping it is also the parent of the new frame.
    - evaluate_fn: Evaluator used for the arguments and the body.

    Raises SkemeArityError unless exactly `fn.arity` arguments are supplied.
    """
    if len(args) != fn.arity:
        raise SkemeArityError(
            f"Must supply exactly {fn.arity} arguments to function: {format_nodes(args)}"
        )
    values = [evaluate_fn(arg, caller_env) for arg in args]
    frame = fn.extend_env(values, caller_env)

    # Lazy import: the evaluator module depends on this one
    from skeme.evaluation.evaluator import evaluate_sequence
    return evaluate_sequence(fn.body, frame, evaluate_fn)


def apply(
    head: NativeProcedure | Lambda,
    args: list[SyntaxNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a native procedure."""
    if isinstance(head, Lambda):
        logger.debug("Applying %r to %d argument(s)", head, len(args))
        return apply_lambda(head, args, env, evaluate_fn)
    elif isinstance(head, NativeProcedure):
        logger.debug("Applying native %s to %d argument(s)", head.name, len(args))
        return head(args, env, evaluate_fn)
    else:
        raise SkemeNotAProcedure(f"Cannot apply non-procedure {to_string(head)}")
