"""Malt: reader, printer and tree-walking evaluator for a small Lisp.

Every value is a form. The variants are List, Vector, HashMap, Symbol,
str, Keyword, int, float, bool, Nil and Function; see malt.types.
"""

from typing import Any, Callable

# A parsed or evaluated value; reader output and evaluator output share one model.
Form = Any
LispValue = Form

# Signature of the evaluator handed to special forms: (form, env) -> value
EvaluatorFn = Callable[..., LispValue]
