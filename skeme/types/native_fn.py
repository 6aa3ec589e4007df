from __future__ import annotations

from typing import Callable

from skeme import SyntaxNode, LispValue, EvaluatorFn

# Signature of every native procedure: raw argument nodes, the calling
# environment, and the evaluator to use on the nodes it needs.
NativeFn = Callable[[list[SyntaxNode], "Environment", EvaluatorFn], LispValue]


class NativeProcedure:
    """A builtin implemented in Python that receives unevaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[SyntaxNode], env, evaluate_fn: EvaluatorFn) -> LispValue:
        return self.fn(args, env, evaluate_fn)

    def __repr__(self) -> str:
        return f"<native {self.name}>"
