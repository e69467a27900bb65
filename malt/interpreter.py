from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from malt import Form, LispValue
from malt.builtin.env_builtin import register
from malt.evaluation.evaluator import evaluate
from malt.printer import pr_str
from malt.reader.parser import read_all, read_str
from malt.types.environment import Environment
from malt.types.errors import MaltNestingError
from malt.types.forms import List
from malt.types.nil import Nil

logger = logging.getLogger(__name__)


@contextmanager
def _nesting_guard(step: str) -> Iterator[None]:
    # Reader, evaluator and printer all recurse once per level of nesting.
    try:
        yield
    except RecursionError:
        raise MaltNestingError(f"form nested too deeply ({step})") from None


class Interpreter:
    """
    Read, evaluate and print Malt code against one global Environment.
    Definitions made with def! persist across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)
        if prelude:
            self.eval(prelude)

    def read(self, source: str) -> Form:
        with _nesting_guard("read"):
            return read_str(source)

    def evaluate(self, form: Form) -> LispValue:
        with _nesting_guard("evaluate"):
            return evaluate(form, self.env)

    def print(self, form: LispValue) -> str:
        with _nesting_guard("print"):
            return pr_str(form)

    def rep(self, source: str) -> str:
        """One read-eval-print cycle over the first form of `source`."""
        form = self.read(source)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("read %s", self.print(form))
        value = self.evaluate(form)
        text = self.print(value)
        logger.debug("evaluated to %s", text)
        return text

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; Nil for none, the value for one, else a List."""
        with _nesting_guard("read"):
            forms = list(read_all(code))
        results = List(self.evaluate(form) for form in forms)
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
