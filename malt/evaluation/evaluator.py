"""Core tree-walking evaluator for the Malt interpreter.

Lists are special-form calls or applications; every other form is handed to
`eval_ast`, which resolves symbols and evaluates the contents of collections.
"""

from __future__ import annotations

from malt import Form, LispValue
from malt.evaluation.special_forms import SPECIAL_FORMS
from malt.printer import pr_str
from malt.types.environment import Environment
from malt.types.errors import MaltNotCallable
from malt.types.forms import HashMap, List, Vector, fmap
from malt.types.function import Function
from malt.types.symbol import Symbol


def eval_ast(ast: Form, env: Environment) -> LispValue:
    """Evaluate a non-application form: look up symbols, map over collections."""
    match ast:
        case Symbol():
            return env.lookup(ast)
        case List() | Vector() | HashMap():
            return fmap(ast, lambda form: evaluate(form, env))
        case _:
            return ast


def evaluate(ast: Form, env: Environment) -> LispValue:
    if not isinstance(ast, List):
        return eval_ast(ast, env)
    if not ast:
        return ast

    head = ast[0]
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](ast[1:], env, evaluate)

    fn, *args = eval_ast(ast, env)
    if not isinstance(fn, Function):
        raise MaltNotCallable(fn, pr_str(fn))
    return fn(args)
