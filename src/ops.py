from __future__ import annotations

import sys
from typing import IO, Iterator, List, Optional

from builtin import ExitCode
from command import Command
from lexer import ShellSyntaxError, lex
from parser import parse
from typesystem import Error, Null, Value


def parse_line(line: str) -> List[Command]:
    """Lex and parse one input line. Raises ShellSyntaxError from the lexer."""
    return parse(lex(line))


def execute_line(line: str) -> Iterator[Value]:
    """Evaluate every statement on ``line``, yielding each value in turn.

    Values are produced lazily so that output of earlier statements can be
    shown before later statements run.
    """
    try:
        commands = parse_line(line)
    except ShellSyntaxError as e:
        yield Error(str(e), int(ExitCode.UNKNOWN_ERROR))
        return
    for command in commands:
        yield command.run()


def render(value: Value, color: bool = True) -> str:
    return value.decorated() if color else value.colorless()


def echo(value: Value, color: bool = True, stream: Optional[IO[str]] = None) -> None:
    """Print ``value`` the way the prompt shows results; ``Null`` prints nothing."""
    if isinstance(value, Null):
        return
    out = stream if stream is not None else sys.stdout
    text = render(value, color)
    if not text:
        return
    # Undecodable filename bytes are shown as U+FFFD.
    text = text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
    out.write(text if text.endswith("\n") else text + "\n")
    out.flush()


def run_line(line: str, color: bool = True, stream: Optional[IO[str]] = None) -> Value:
    """Execute and echo a whole line; returns the last value produced."""
    last: Value = Null()
    for value in execute_line(line):
        echo(value, color, stream)
        last = value
    return last
