"""Native function representation for Malt."""

from __future__ import annotations

from typing import Callable

from malt import LispValue


class Function:
    """A native callable with a display name.

    The wrapped callable receives the evaluated argument forms as a list and
    returns a form, or raises a MaltError.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name: str = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Function({self.name!r})"
