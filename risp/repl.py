"""Interactive read-eval-print loop for risp."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from risp import config
from risp.errors import RispError
from risp.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run_repl(
    interpreter: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str | None = None,
) -> int:
    """Prompt, read a line, evaluate and print until `exit` or end of input."""
    if prompt is None:
        prompt = config.get_prompt()

    while True:
        stdout.write(prompt)
        stdout.flush()

        line = stdin.readline()
        if line == "":
            # end of input on an empty read (ctrl-d)
            stdout.write("\n")
            break

        trimmed = line.strip()
        if trimmed.lower() == "exit":
            break
        if not trimmed:
            continue

        try:
            result = interpreter.eval(line)
        except RispError as e:
            logger.debug("evaluation failed: %r", e)
            stdout.write(f"{e}\n")
        except RecursionError:
            logger.debug("evaluation exhausted the stack")
            stdout.write("recursion depth exceeded\n")
        else:
            stdout.write(f"{result}\n")
    return 0


def main() -> int:
    logging.basicConfig(level=config.get_log_level())

    prelude = None
    path = config.get_prelude_path()
    if path is not None:
        try:
            prelude = path.read_text(encoding="utf-8")
        except OSError as e:
            sys.stderr.write(f"cannot read prelude {path}: {e}\n")
            return 1

    try:
        interpreter = Interpreter(prelude=prelude)
    except RispError as e:
        sys.stderr.write(f"error in prelude {path}: {e}\n")
        return 1
    return run_repl(interpreter, sys.stdin, sys.stdout)
