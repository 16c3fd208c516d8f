"""Interactive loop around the reader, the reduction driver and the printer."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from reduct import config
from reduct.errors import ReductConfigError, ReductSyntaxError
from reduct.types.value import Value
from reduct.types.error import read_error, error_message
from reduct.reader.parser import parse, read
from reduct.evaluation.driver import reduce, Reduction, TerminalCondition
from reduct.printer import to_pretty


class Interpreter:
    """
    Reads one line of text at a time, reduces it to normal form and
    formats the outcome for display.
    """

    def __init__(self, max_steps: int | None = None, prompt: str | None = None):
        self.max_steps = max_steps
        self.prompt = config.get_prompt() if prompt is None else prompt

    def read(self, code: str) -> Value:
        return read(code)

    def eval(self, code: str) -> Reduction:
        try:
            expr = parse(code)
        except ReductSyntaxError as e:
            return Reduction(read_error(str(e)), TerminalCondition.ERROR, 0)
        return reduce(expr, self.max_steps)

    def respond(self, code: str) -> str:
        # Only a parse failure is a read error; a table written as
        # {type = error, ...} is ordinary data and goes to the reducer
        try:
            expr = parse(code)
        except ReductSyntaxError as e:
            return "Read error: " + str(e)

        value, condition, _ = reduce(expr, self.max_steps)
        if condition is TerminalCondition.ERROR:
            return "Eval error: " + error_message(value)
        if condition is TerminalCondition.CYCLE_DETECTED:
            return "Infinite loop detected, bailing"
        if condition is TerminalCondition.STEP_LIMIT:
            return "Step limit reached, bailing"
        return to_pretty(value)

    def repl(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        while True:
            stdout.write(self.prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                stdout.write("\n")
                break
            stdout.write(self.respond(line) + "\n\n")


def _config_arg(parse_fn, name):
    def convert(raw: str):
        try:
            return parse_fn(name, raw)
        except ReductConfigError as e:
            raise argparse.ArgumentTypeError(str(e)) from None
    return convert


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="reduct", description="Reduct table-rewriting REPL")
    parser.add_argument("-e", "--eval", dest="code", help="reduce one expression and exit")
    parser.add_argument(
        "--max-steps", type=_config_arg(config.parse_positive_int, "--max-steps"),
        default=None, help="give up after this many steps",
    )
    parser.add_argument(
        "--log-level", type=_config_arg(config.parse_log_level, "--log-level"),
        default=None, help="logging level name",
    )
    args = parser.parse_args(argv)

    level = config.get_log_level() if args.log_level is None else args.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    max_steps = config.get_max_steps() if args.max_steps is None else args.max_steps
    interp = Interpreter(max_steps=max_steps)
    if args.code is not None:
        print(interp.respond(args.code))
        return 0
    try:
        interp.repl()
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
