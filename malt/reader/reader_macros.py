"""Reader macros: single-token prefixes that wrap the next form.

Each entry maps the prefix token to the head symbol of the two-element list
the reader builds, so `'x` reads as `(quote x)`.
"""

from __future__ import annotations

from malt.types.forms import List
from malt.types.symbol import Symbol

READER_MACROS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}


def is_macro(token: str) -> bool:
    return token in READER_MACROS


def expand(token: str, form) -> List:
    """Wrap an already-read form in the list named by the macro `token`."""
    return List([READER_MACROS[token], form])
