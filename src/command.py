# Command tree nodes and their evaluation

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Optional

import builtin
from builtin import BuiltinKind, ExitCode, error_from_os
from lexer import Token
from process import run_external
from typesystem import Error, FileRef, Null, String, Value


class Command:
    """A node of a parsed statement.

    ``run`` evaluates the node to a Value. ``stdin`` is the upstream value when
    the node is the destination of a pipe and ``None`` otherwise; it only lives
    for the duration of the call.
    """

    def run(self, stdin: Optional[Value] = None) -> Value:
        raise NotImplementedError


@dataclass
class Literal(Command):
    value: Value

    def run(self, stdin: Optional[Value] = None) -> Value:
        return self.value


def render_args(args: List[Command]) -> List[str]:
    """Reduce argument nodes to the plain strings handed to a program."""
    return [arg.run().undecorated() for arg in args]


@dataclass
class Builtin(Command):
    builtin: BuiltinKind
    args: List[Command] = field(default_factory=list)

    def run(self, stdin: Optional[Value] = None) -> Value:
        args = render_args(self.args)
        match self.builtin:
            case BuiltinKind.CD:
                return builtin.cd(args)
            case BuiltinKind.EXIT:
                return builtin.exit_shell(args)
            case BuiltinKind.LS:
                return builtin.ls(args)
            case BuiltinKind.PWD:
                return builtin.pwd(args)


@dataclass
class External(Command):
    name: Token
    args: List[Command] = field(default_factory=list)

    def run(self, stdin: Optional[Value] = None) -> Value:
        return run_external(self.name.value, render_args(self.args), stdin)


@dataclass
class Redirect(Command):
    source: Command
    destination: Command

    def run(self, stdin: Optional[Value] = None) -> Value:
        output = self.source.run()
        target = self.destination.run()
        if isinstance(target, (String, FileRef)):
            path = target.undecorated() if isinstance(target, String) else target.path
        else:
            sys.stderr.write(f"tysh: redirect: destination must be a path, got {target.colorless()!r}\n")
            sys.stderr.flush()
            return Null()
        try:
            with open(path, "wb") as f:
                f.write(output.to_bytes())
        except OSError as e:
            return error_from_os(e)
        return Null()


@dataclass
class Pipe(Command):
    source: Command
    destination: Command

    def run(self, stdin: Optional[Value] = None) -> Value:
        upstream = self.source.run()
        return self.destination.run(stdin=upstream)


@dataclass
class Empty(Command):
    def run(self, stdin: Optional[Value] = None) -> Value:
        return Null()


@dataclass
class Invalid(Command):
    """Marks a statement that failed to parse."""

    message: str

    def run(self, stdin: Optional[Value] = None) -> Value:
        return Error(self.message, int(ExitCode.UNKNOWN_ERROR))
