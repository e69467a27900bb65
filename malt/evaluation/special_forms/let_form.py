from malt import EvaluatorFn
from malt import Form, LispValue
from malt.printer import pr_str
from malt.types.errors import MaltArityError, MaltInvalidSymbol, MaltTypeError
from malt.types.forms import List, Vector, pairs
from malt.types.symbol import Symbol
from malt.types.environment import Environment


def let_form(
    tail: list[Form],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* [name1 value1 name2 value2 ...] body)

    Each value is evaluated in the new scope as built so far, so later
    bindings can refer to earlier ones. The body sees all of them; the
    enclosing scope sees none.
    """
    if len(tail) != 2:
        raise MaltArityError("let* requires a bindings form and a body: (let* [bindings] body)")

    bindings, body = tail
    if not isinstance(bindings, (List, Vector)):
        raise MaltTypeError(f"bindings is not a list or a vector: {pr_str(bindings)}")
    if len(bindings) % 2 != 0:
        raise MaltTypeError(f"let* bindings has an odd number of entries: {pr_str(bindings)}")

    local_env = Environment(outer=env)
    for name, val_expr in pairs(bindings):
        if not isinstance(name, Symbol):
            raise MaltInvalidSymbol(f"attempting to bind to a non symbol: {pr_str(name)}")
        local_env.define(name, evaluate_fn(val_expr, local_env))

    return evaluate_fn(body, local_env)
