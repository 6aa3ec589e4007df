"""Runtime environment for skeme.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Frames form a tree: many procedures may
share a frame, but each frame has exactly one parent.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from skeme import LispValue
from skeme.config import Scoping, get_scoping
from skeme.errors import (
    SkemeDuplicateDefine,
    SkemeSyntaxError,
    SkemeUnboundSymbol,
)
from skeme.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _key(name: Symbol | str) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise SkemeSyntaxError(f"Cannot bind {name!r}: not an identifier")


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer", "scoping")

    def __init__(self, outer: Optional[Environment] = None, scoping: Scoping | None = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer
        # Children inherit the mode of the root they hang off
        if scoping is None:
            scoping = outer.scoping if outer is not None else get_scoping()
        self.scoping: Scoping = scoping

    @classmethod
    def root(cls, scoping: Scoping | str | None = None) -> Environment:
        """Create a parentless frame with every builtin installed."""
        # Lazy import: builtins depend on this module
        from skeme.builtins import register

        env = cls(scoping=get_scoping(scoping))
        register(env)
        logger.debug("Created root environment (%s scoping)", env.scoping.value)
        return env

    def child(self) -> Environment:
        return Environment(outer=self)

    def contains(self, name: Symbol | str) -> bool:
        """True if `name` is bound in this frame, ignoring parents."""
        return _key(name) in self.vars

    def define(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises SkemeDuplicateDefine if this frame already binds `name`.
        """
        key = _key(name)
        if key in self.vars:
            raise SkemeDuplicateDefine(f"Duplicate define: {key}")
        self.vars[key] = value

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol | str, value: LispValue) -> None:
        """Overwrite `name`, which must be bound somewhere in the chain.

        The new binding is written into this frame, not the frame where the
        name was found. Assigning to an outer name from a nested frame
        therefore shadows it locally.

        Raises SkemeUnboundSymbol if the name is not found.
        """
        key = _key(name)
        if self.find(key) is None:
            raise SkemeUnboundSymbol(f"Can't set! an undefined variable: {key}")
        self.vars[key] = value

    def get(self, name: Symbol | str, default: LispValue = None) -> LispValue:
        env = self.find(name)
        if env is None:
            return default
        return env.vars[_key(name)]

    def lookup(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`, walking outward through parents.

        Raises SkemeUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise SkemeUnboundSymbol(f"Identifier not found: {name}")
        return env.vars[_key(name)]

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
