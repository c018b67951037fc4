"""External process bridge.

Runs a program found on PATH with plain-string arguments and captures what it
writes. When the command is the destination of a pipe, the upstream value's
undecorated bytes are fed to the child's stdin; otherwise stdin is inherited
from the shell.
"""
from __future__ import annotations

import subprocess
from typing import List, Optional

from builtin import error_from_os
from typesystem import ProcessOutput, Value


class ProcessRunner:
    """Run one external command: a program name plus its argv tail."""

    def __init__(self, name: str, args: List[str]) -> None:
        self.name: str = name
        self.args: List[str] = list(args)

    @property
    def argv(self) -> List[str]:
        return [self.name, *self.args]

    def run(self, stdin: Optional[Value] = None) -> Value:
        """Spawn the process and block until it exits.

        ``subprocess.run`` writes the input and drains stdout/stderr at the
        same time, so a child that produces a lot of output before reading all
        of its input cannot stall the shell.
        """
        payload = stdin.to_bytes() if stdin is not None else None
        try:
            completed = subprocess.run(
                self.argv,
                input=payload,
                capture_output=True,
            )
        except OSError as e:
            return error_from_os(e)
        return ProcessOutput(completed.returncode, completed.stdout, completed.stderr)


def run_external(name: str, args: List[str], stdin: Optional[Value] = None) -> Value:
    return ProcessRunner(name, args).run(stdin)
