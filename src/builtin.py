"""Builtin commands: cd, exit, ls and pwd.

Each builtin takes its arguments already rendered to plain strings and returns
a Value. Failures from the operating system come back as ``Error`` values
carrying one of the fixed codes in ``ExitCode``.
"""
from __future__ import annotations

import os
import sys
from enum import Enum, IntEnum
from pathlib import Path
from typing import List, Optional

from typesystem import Array, Error, FileRef, Null, Value


class BuiltinKind(Enum):
    CD = "cd"
    EXIT = "exit"
    LS = "ls"
    PWD = "pwd"

    @classmethod
    def lookup(cls, name: str) -> Optional["BuiltinKind"]:
        try:
            return cls(name)
        except ValueError:
            return None


class ExitCode(IntEnum):
    TOO_MANY_ARGUMENTS = 1
    HOME_DIR_NOT_FOUND = 25
    FILE_NOT_FOUND = 50
    PERMISSION_DENIED = 100
    UNKNOWN_ERROR = 200


def error_from_os(exc: OSError) -> Error:
    """Translate an OS error into an Error value with a fixed code."""
    if isinstance(exc, FileNotFoundError):
        code = ExitCode.FILE_NOT_FOUND
    elif isinstance(exc, PermissionError):
        code = ExitCode.PERMISSION_DENIED
    else:
        code = ExitCode.UNKNOWN_ERROR
    message = exc.strerror or str(exc)
    if exc.filename is not None:
        message = f"{message}: {exc.filename}"
    return Error(message, int(code))


def too_many_arguments() -> Error:
    return Error("Too many arguments", int(ExitCode.TOO_MANY_ARGUMENTS))


def _home_dir() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


def cd(args: List[str]) -> Value:
    if len(args) > 1:
        return too_many_arguments()
    if args:
        target: Optional[Path] = Path(args[0])
    else:
        target = _home_dir()
        if target is None:
            return Error("Could not find home directory", int(ExitCode.HOME_DIR_NOT_FOUND))
    try:
        os.chdir(target)
    except OSError as e:
        return error_from_os(e)
    return Null()


def ls(args: List[str]) -> Value:
    if len(args) > 1:
        return too_many_arguments()
    path = args[0] if args else "."
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        return error_from_os(e)
    return Array(tuple(FileRef(Path(e.path), full_path=False) for e in entries))


def pwd(args: List[str]) -> Value:
    if args:
        return too_many_arguments()
    try:
        return FileRef(Path(os.getcwd()), full_path=True)
    except OSError as e:
        return error_from_os(e)


def exit_shell(args: List[str]) -> Value:
    # Arguments are accepted and ignored.
    sys.stdout.flush()
    sys.stderr.flush()
    raise SystemExit(0)
