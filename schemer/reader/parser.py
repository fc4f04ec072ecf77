"""
  Schemer Reader, Lexer and Parser

- Streaming, lazy lexing into (kind, text, pos) tokens
- Emits Value-model objects, so the parse tree is also runtime list data:

    - integers -> Number
    - #t / #f -> Bool
    - symbols -> Atom
    - "..." -> String (escapes \\n \\r \\\\ \\" reversed)
    - #\\a, #\\space, #\\newline -> Character
    - (a b c) -> List
    - (a b . c) -> DottedList
    - 'x -> (quote x)
    - ; comments run to the end of the line
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from schemer.errors import ParseError
from schemer.types.values import (
    Value,
    Number,
    String,
    Character,
    Bool,
    List,
    make_dotted,
    TRUE,
    FALSE,
)
from schemer.types.atom import Atom


SYMBOL_CHARS = "!#$%&|*+\\-/:<=>?@^_~"

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<char>#\\(?:space|newline|[A-Za-z0-9 ])(?=[\s()';\"]|$))"  # character literals
    r'|(?P<symbol>[^\s()\'";]+)',  # bare words: atoms, numbers, booleans, dot
    re.DOTALL,
)

ATOM_RE = re.compile(rf"[A-Za-z{SYMBOL_CHARS}][A-Za-z0-9{SYMBOL_CHARS}]*")
NUMBER_RE = re.compile(r"[0-9]+")
ESCAPE_RE = re.compile(r'\\([nr\\"])')

ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
}


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def _position(source: str, pos: int) -> tuple[int, int]:
    """Convert an offset into a 1-based (line, column) pair."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def _error(source: str, pos: int, message: str) -> ParseError:
    line, column = _position(source, pos)
    return ParseError(message, line, column)


def unescape(body: str) -> str:
    """Reverse the string escapes in a single pass, so `\\\\"` is `\\` then `"`."""
    return ESCAPE_RE.sub(lambda m: ESCAPES[m.group(1)], body)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token tuples, skipping whitespace and comments."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise _error(source, pos, "unterminated string literal")
            raise _error(source, pos, f"unexpected character {source[pos]!r}")
        kind = m.lastgroup
        if kind != "comment":
            yield Token(kind, m.group(kind), pos)
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = ""):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.source = source

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, token: Optional[Token], message: str) -> ParseError:
        pos = len(self.source) if token is None else token.pos
        return _error(self.source, pos, message)

    def parse_expr(self) -> Value:
        token = self.advance()
        if token is None:
            raise self.error(None, "unexpected end of input, expected an expression")

        if token.kind == "quote":
            return List((Atom("quote"), self.parse_expr()))

        if token.kind == "lparen":
            return self._parse_list(token)

        if token.kind == "rparen":
            raise self.error(token, "unexpected ')'")

        if token.kind == "string":
            return String(unescape(token.text[1:-1]))

        if token.kind == "char":
            val = token.text[2:]  # strip off "#\"
            return Character(NAMED_CHARS.get(val, val))

        return self._parse_word(token)

    def _parse_word(self, token: Token) -> Value:
        text = token.text
        if NUMBER_RE.fullmatch(text):
            try:
                return Number(int(text))
            except ValueError:
                # longer than sys.get_int_max_str_digits()
                raise self.error(token, "integer literal too long") from None
        if text == "#t":
            return TRUE
        if text == "#f":
            return FALSE
        if ATOM_RE.fullmatch(text):
            return Atom(text)
        if text == ".":
            raise self.error(token, "unexpected '.' outside of a list")
        raise self.error(token, f"invalid token {text!r}, expected an atom, number or literal")

    def _parse_list(self, opening: Token) -> Value:
        items: list[Value] = []
        while True:
            token = self.peek()
            if token is None:
                raise self.error(opening, "unmatched '(', expected ')'")
            if token.kind == "rparen":
                self.advance()
                return List(items)
            if token.kind == "symbol" and token.text == ".":
                self.advance()
                if not items:
                    raise self.error(token, "expected an expression before '.'")
                last = self.parse_expr()
                closing = self.advance()
                if closing is None or closing.kind != "rparen":
                    raise self.error(closing, "expected ')' after dotted tail")
                return make_dotted(items, last)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Value]:
        while self.peek() is not None:
            yield self.parse_expr()


def read(text: str) -> Value:
    """Parse exactly one expression from `text`."""
    stream = TokenStream(lex(text), text)
    expr = stream.parse_expr()
    extra = stream.peek()
    if extra is not None:
        raise stream.error(extra, "expected end of input after expression")
    return expr


def read_all(text: str) -> list[Value]:
    """Parse every expression in `text`, in order."""
    return list(TokenStream(lex(text), text).parse_all())
