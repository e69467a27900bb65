from malt import EvaluatorFn
from malt import Form, LispValue
from malt.printer import pr_str
from malt.types.errors import MaltArityError, MaltInvalidSymbol
from malt.types.symbol import Symbol
from malt.types.environment import Environment


def def_form(
    tail: list[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds into the current environment and returns the value.
    """
    if len(tail) != 2:
        raise MaltArityError("def! requires exactly 2 arguments: (def! name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MaltInvalidSymbol(f"env key is not a symbol: {pr_str(name)}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
