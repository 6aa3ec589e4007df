"""
  Reader: lexer and parser for skeme source text.

The evaluator never sees text; this module turns it into syntax nodes made of
plain Python values:

    - identifiers -> Symbol
    - integers -> int
    - #t / #f -> True / False
    - strings -> str
    - lists -> Python list
    - 'x, `x, ,x -> [quote x], [quasiquote x], [unquote x]
"""

from __future__ import annotations

import re
from typing import Iterator, Iterable, Optional

from skeme import SyntaxNode
from skeme.errors import SkemeParseError
from skeme.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>[\'`])"  # ' and `
    r"|(?P<unquote>,)"  # ,
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<boolean>#[tf](?![^\s()\'`,\";]))"  # #t / #f
    r'|(?P<symbol>[^\s()\'`,";]+)'  # fallback: identifiers and integers
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+")

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
}

QUOTE_NAMES: dict[str, str] = {
    "'": "quoted",
    "`": "quasiquoted",
    ",": "unquoted",
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def _unescape(body: str) -> str:
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise SkemeParseError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "unquote", "lparen", "rparen", "string", "boolean", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self, depth: int = 0) -> Optional[SyntaxNode]:
        """Parse one node. Returns None at end of input or at a closing paren
        inside a list; the caller decides whether that is an error."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            if depth > 0:
                raise SkemeParseError(f"Unexpected end of input, depth: {depth}")
            return None

        if tok_type == "rparen":
            if depth == 0:
                raise SkemeParseError(f"Unexpected close paren, depth: {depth}")
            return None

        self.advance()

        if tok_type == "lparen":
            items = []
            while True:
                item = self.parse_expr(depth + 1)
                if item is None:
                    self.advance()  # consume ')'
                    return items
                items.append(item)

        # Quote forms
        if tok_type in ("quote", "unquote"):
            inner = self.parse_expr(depth)
            if inner is None:
                raise SkemeParseError(f"Missing {QUOTE_NAMES[tok_val]} value, depth: {depth}")
            return [QUOTE_FORMS[tok_val], inner]

        if tok_type == "boolean":
            return tok_val == "#t"

        if tok_type == "string":
            return _unescape(tok_val[1:-1])

        if tok_type == "symbol":
            if INTEGER_RE.fullmatch(tok_val):
                return int(tok_val)
            return Symbol(tok_val)

        raise SkemeParseError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SyntaxNode]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def read(source: str) -> list[SyntaxNode]:
    """Parse a whole program into a list of top-level nodes."""
    return list(TokenStream(lex(source)).parse_all())
