"""Interactive shell for Malt.

Reads one line at a time, runs it through Interpreter.rep and prints the
result. Errors are reported and the loop carries on; end-of-file exits.
"""

from __future__ import annotations

import logging
from pathlib import Path

try:
    import readline
except ImportError:  # not built on every platform; history is then skipped
    readline = None

from malt import config
from malt.interpreter import Interpreter
from malt.types.errors import MaltError, MaltNoInput

logger = logging.getLogger(__name__)


def repl(interp: Interpreter, prompt: str) -> None:
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            return
        try:
            print(interp.rep(line))
        except MaltNoInput:
            continue
        except MaltError as e:
            logger.debug("error for input %r", line, exc_info=True)
            print(f"Error: {e}")


def load_history(history: Path) -> None:
    if readline is None:
        return
    try:
        readline.read_history_file(history)
    except FileNotFoundError:
        logger.debug("no history file at %s", history)
    except OSError as e:
        logger.warning("could not read history from %s: %s", history, e)


def save_history(history: Path) -> None:
    if readline is None:
        return
    try:
        readline.write_history_file(history)
    except OSError as e:
        logger.warning("could not save history to %s: %s", history, e)


def main() -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    history = config.get_history_file()
    load_history(history)
    try:
        repl(Interpreter(), config.get_prompt())
    finally:
        save_history(history)


if __name__ == "__main__":
    main()
