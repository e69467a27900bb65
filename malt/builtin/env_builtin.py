"""Built-in functions for the Malt runtime environment.

This module defines integer arithmetic and console output, and `register`,
which installs them into an Environment as Function values.
"""
from __future__ import annotations

from typing import Callable

from malt import LispValue
from malt.printer import pr_str
from malt.types.environment import Environment
from malt.types.errors import MaltArithmeticError, MaltArityError, MaltTypeError
from malt.types.function import Function
from malt.types.nil import Nil
from malt.types.symbol import Symbol

_OPERAND_NAMES = ("first", "second")


def _is_int(value: LispValue) -> bool:
    # bool is an int subclass in Python but a separate variant here
    return isinstance(value, int) and not isinstance(value, bool)


def _int_operands(name: str, args: list[LispValue]) -> tuple[int, int]:
    """Check that `args` holds exactly two Ints and return them."""
    if len(args) != 2:
        raise MaltArityError(f"{name} requires exactly 2 arguments, got {len(args)}")
    for position, arg in zip(_OPERAND_NAMES, args):
        if not _is_int(arg):
            raise MaltTypeError(f"{position} argument to {name} is not an Int: {pr_str(arg)}")
    return args[0], args[1]


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> int:
    a, b = _int_operands("+", args)
    return a + b


def sub(args: list[LispValue]) -> int:
    a, b = _int_operands("-", args)
    return a - b


def mul(args: list[LispValue]) -> int:
    a, b = _int_operands("*", args)
    return a * b


def div(args: list[LispValue]) -> int:
    """Integer division truncating toward zero."""
    a, b = _int_operands("/", args)
    if b == 0:
        raise MaltArithmeticError(f"division by zero: (/ {a} {b})")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


# -------------------------------
# Output
# -------------------------------
def print_forms(args: list[LispValue]) -> LispValue:
    """Write the printed forms of all arguments, concatenated, as one line."""
    print("".join(pr_str(arg) for arg in args))
    return Nil


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "print": print_forms,
}


def register(env: Environment) -> None:
    """Install every built-in into `env`."""
    env.update({Symbol(name): Function(name, fn) for name, fn in BUILTINS.items()})
