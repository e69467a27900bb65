"""
  Malt Reader: tokenizer and recursive-descent parser

- Eager tokenizing into a list of token strings
- Emits Malt forms:

    - nil -> Nil
    - true / false -> bool
    - integers -> int
    - "strings" -> str
    - :keywords -> Keyword
    - symbols -> Symbol
    - ( ... ) -> List
    - [ ... ] -> Vector
    - { ... } -> HashMap
    - 'x `x ~x ~@x @x -> (quote x), (quasiquote x), (unquote x),
                         (splice-unquote x), (deref x)
"""

from __future__ import annotations

import re
from typing import Iterator

from malt import Form
from malt.types.errors import MaltEndOfInput, MaltNoInput, MaltUnexpectedCloser
from malt.types.forms import HashMap, Keyword, List, Vector
from malt.types.nil import Nil
from malt.types.symbol import Symbol
from malt.reader import reader_macros


TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # brackets and single-char macros
    r'|"(?:\\.|[^\\"])*"?'  # strings, possibly unterminated
    r"|;.*"  # line comment
    r"|[^\s\[\]{}('\"`,;)]*"  # fallback: atoms
    r")"
)

INT_RE = re.compile(r"-?[0-9]+")
STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"')
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

# Escapes without an entry are kept verbatim, backslash included.
_ESCAPES: dict[str, str] = {
    "n": "\n",
    "\\": "\\",
    '"': '"',
}

_LITERALS: dict[str, Form] = {
    "true": True,
    "false": False,
    "nil": Nil,
}

_OPENERS: dict[str, tuple[str, type]] = {
    "(": (")", List),
    "[": ("]", Vector),
    "{": ("}", HashMap),
}

_CLOSERS = frozenset(closer for closer, _ in _OPENERS.values())


def tokenize(source: str) -> list[str]:
    """Split `source` into token strings. Comments are kept as tokens."""
    return [token for token in TOKEN_RE.findall(source) if token]


def is_comment(token: str) -> bool:
    return token.startswith(";")


def unescape_string(token: str) -> str:
    """Decode the body of a well-formed string token in a single left-to-right pass."""
    return ESCAPE_RE.sub(
        lambda m: _ESCAPES.get(m.group(1), m.group(0)), token[1:-1]
    )


class Reader:
    """Cursor over a token list."""

    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> str:
        if self.at_end():
            raise MaltEndOfInput("EOF")
        return self.tokens[self.position]

    def next(self) -> str:
        token = self.peek()
        self.position += 1
        return token

    def skip_comments(self) -> None:
        while not self.at_end() and is_comment(self.tokens[self.position]):
            self.position += 1

    def read_form(self) -> Form:
        token = self.peek()
        # One leading comment and one leading comma are dropped; callers loop for more.
        if is_comment(token):
            self.next()
            token = self.peek()
        if token.startswith(","):
            self.next()
            token = self.peek()

        if token in _CLOSERS:
            raise MaltUnexpectedCloser(token)
        if token in _OPENERS:
            closer, kind = _OPENERS[token]
            forms = self.read_sequence(closer)
            if kind is HashMap:
                return HashMap.from_forms(forms)
            return kind(forms)
        if reader_macros.is_macro(token):
            self.next()
            return reader_macros.expand(token, self.read_form())
        return self.read_atom()

    def read_sequence(self, closer: str) -> list[Form]:
        """Consume an opener, then read forms up to and including `closer`."""
        self.next()
        forms: list[Form] = []
        while True:
            self.skip_comments()
            if self.at_end():
                raise MaltEndOfInput(f"expected '{closer}', got EOF")
            if self.tokens[self.position] == closer:
                self.next()
                return forms
            forms.append(self.read_form())

    def read_atom(self) -> Form:
        token = self.next()
        if INT_RE.fullmatch(token):
            return int(token)
        if token.startswith(":"):
            return Keyword(token.lstrip(":"))
        if STRING_RE.fullmatch(token):
            return unescape_string(token)
        if token.startswith('"'):
            raise MaltEndOfInput(f"unbalanced string {token}")
        if token in _LITERALS:
            return _LITERALS[token]
        return Symbol(token)

    def read_all(self) -> Iterator[Form]:
        """Yield every remaining top-level form, skipping comments between them."""
        while True:
            self.skip_comments()
            if self.at_end():
                return
            yield self.read_form()


def read_str(source: str) -> Form:
    """Read the first form of `source`.

    Raises MaltNoInput if `source` holds nothing but whitespace and comments.
    """
    tokens = tokenize(source)
    if all(is_comment(t) for t in tokens):
        raise MaltNoInput("no input")
    return Reader(tokens).read_form()


def read_all(source: str) -> Iterator[Form]:
    """Lazily read every top-level form of `source`."""
    return Reader(tokenize(source)).read_all()
