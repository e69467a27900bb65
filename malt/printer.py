"""Canonical text rendering of Malt forms.

The output of `pr_str` reads back to an equal form for every variant the
reader produces.
"""

from __future__ import annotations

from malt import Form
from malt.types.forms import HashMap, Keyword, List, Vector
from malt.types.function import Function
from malt.types.nil import NilType
from malt.types.symbol import Symbol


def escape_string(value: str) -> str:
    """Inverse of the reader's string decoding, without the surrounding quotes."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _join(forms) -> str:
    return " ".join(pr_str(f) for f in forms)


def pr_str(form: Form) -> str:
    """Render `form` as canonical Malt source text."""
    match form:
        case List():
            return f"({_join(form)})"
        case Vector():
            return f"[{_join(form)}]"
        case HashMap():
            # Insertion order: keys print in the order they were read.
            return "{" + _join(f for kv in form.items() for f in kv) + "}"
        case Keyword():
            return f":{str(form)}"
        case str():
            return f'"{escape_string(form)}"'
        case Symbol():
            return form.name
        case bool():
            return "true" if form else "false"
        case int():
            return str(form)
        case float():
            return f"{form:f}"
        case NilType():
            return "nil"
        case Function():
            return form.name
        case _:
            raise TypeError(f"cannot print non-form value {form!r}")
