from __future__ import annotations

import logging
from typing import Iterable

from skeme import SyntaxNode, LispValue
from skeme.config import Scoping
from skeme.evaluation.evaluator import evaluate_sequence
from skeme.reader.parser import read
from skeme.types.environment import Environment

logger = logging.getLogger(__name__)


def interpret(nodes: Iterable[SyntaxNode], scoping: Scoping | str | None = None) -> LispValue:
    """Evaluate `nodes` in a fresh root environment and return the last value.

    Any SkemeRuntimeError aborts the whole run and propagates to the caller.
    """
    nodes = list(nodes)
    env = Environment.root(scoping)
    logger.debug("Interpreting %d top-level node(s)", len(nodes))
    return evaluate_sequence(nodes, env)


class Interpreter:
    """
    Keeps one root environment across calls, so definitions made by one call
    are visible to the next.
    """

    def __init__(self, scoping: Scoping | str | None = None):
        self.env: Environment = Environment.root(scoping)

    @property
    def scoping(self) -> Scoping:
        return self.env.scoping

    def eval_nodes(self, nodes: Iterable[SyntaxNode]) -> LispValue:
        """Evaluate already-parsed syntax nodes."""
        return evaluate_sequence(list(nodes), self.env)

    def eval(self, code: str) -> LispValue:
        """Read `code` and evaluate every top-level form, returning the last value."""
        return self.eval_nodes(read(code))
