"""User-defined procedure representation for skeme."""

from __future__ import annotations

from io import StringIO

from skeme import SyntaxNode, LispValue
from skeme.config import Scoping
from skeme.types.environment import Environment
from skeme.types.symbol import Symbol


class Lambda:
    """A first-class procedure with formal parameters, a body and its defining env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: list[SyntaxNode], env: Environment):
        self.formals: list[Symbol] = formals
        self.body: list[SyntaxNode] = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        from skeme.printer import to_raw_string

        with StringIO() as buffer:
            buffer.write("(λ (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")")
            for form in self.body:
                buffer.write(" ")
                buffer.write(to_raw_string(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda{self}"

    def extend_env(self, args: list[LispValue], caller_env: Environment) -> Environment:
        """
        Bind already-evaluated arguments to the formals in a fresh frame.

        Under dynamic scoping the frame is a child of `caller_env`; under
        lexical scoping it is a child of the environment captured at creation.
        """
        outer = self.env if caller_env.scoping is Scoping.LEXICAL else caller_env
        frame = Environment(outer=outer)
        # A repeated formal is bound once; the later argument wins
        for name, value in zip(self.formals, args):
            frame.vars[name.id] = value
        return frame
