"""Container and keyword variants of the Malt data model.

Lists and vectors share a shape but keep distinct types so the printer and
the binding forms can tell them apart. Hash-maps are keyed by strings or
keywords only.
"""

from __future__ import annotations

from typing import Callable, Iterable

from malt import Form
from malt.types.errors import MaltMalformedCollection, MaltTypeError


class Keyword(str):
    """A `:name` literal. Never equal to a plain string with the same text."""

    __slots__ = ()

    def __eq__(self, other) -> bool:
        return isinstance(other, Keyword) and str.__eq__(self, other)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash((Keyword, str(self)))

    def __repr__(self):
        return f"Keyword({str(self)!r})"


class List(list):
    """An ordered sequence of forms, printed as `(...)`."""

    __slots__ = ()

    def __repr__(self):
        return f"List({list.__repr__(self)})"


class Vector(list):
    """An ordered sequence of forms, printed as `[...]`."""

    __slots__ = ()

    def __repr__(self):
        return f"Vector({list.__repr__(self)})"


class HashMap(dict):
    """Mapping from string or keyword keys to forms, in insertion order."""

    __slots__ = ()

    @classmethod
    def from_forms(cls, forms: list[Form]) -> HashMap:
        """Build a map from a flat `k1 v1 k2 v2 ...` sequence.

        Raises MaltMalformedCollection for an odd count and MaltTypeError for a
        key that is not a string or keyword.
        """
        if len(forms) % 2 != 0:
            raise MaltMalformedCollection(
                f"uneven number of entries in hashmap: {len(forms)}"
            )
        hm = cls()
        for key, value in zip(forms[::2], forms[1::2]):
            if not isinstance(key, str):
                raise MaltTypeError(f"hashmap key must be a string or keyword, got {key!r}")
            hm[key] = value
        return hm

    def __repr__(self):
        return f"HashMap({dict.__repr__(self)})"


def fmap(form: Form, transform: Callable[[Form], Form]) -> Form:
    """Apply `transform` to each element of a List/Vector or each value of a HashMap.

    Returns a new container of the same variant. Any other form is returned untouched.
    """
    match form:
        case List():
            return List(transform(item) for item in form)
        case Vector():
            return Vector(transform(item) for item in form)
        case HashMap():
            return HashMap((key, transform(value)) for key, value in form.items())
        case _:
            return form


def pairs(forms: Iterable[Form]) -> Iterable[tuple[Form, Form]]:
    """Yield consecutive (first, second) pairs from an even-length sequence."""
    it = iter(forms)
    return zip(it, it)
