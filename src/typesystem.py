"""Runtime values produced by evaluating commands.

Every value renders three ways:

- ``decorated()`` for the interactive echo: quoted, coloured, structured.
- ``colorless()`` keeps the quotes and brackets but no ANSI codes.
- ``undecorated()`` is the raw text that goes into files and child processes.

Values are immutable. Equality is per variant: a ``FileRef`` compares by path
only, everything else by all of its fields.
"""
from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

# --- ANSI colour helpers ---

GREEN = "32"
YELLOW = "33"
BLUE = "34"
RED = "31"
WHITE = "37"
BRIGHT_GREEN = "92"
BRIGHT_BLUE = "94"
BRIGHT_MAGENTA = "95"


def paint(code: str, text: str) -> str:
    return f"\033[{code}m{text}\033[0m"


def _indent(text: str) -> str:
    return "\n  ".join(text.split("\n"))


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class Value:
    """Base of every runtime value."""

    def decorated(self) -> str:
        raise NotImplementedError

    def colorless(self) -> str:
        raise NotImplementedError

    def undecorated(self) -> str:
        raise NotImplementedError

    def to_bytes(self) -> bytes:
        # Filenames and argv carry undecodable bytes as surrogate escapes.
        return self.undecorated().encode("utf-8", errors="surrogateescape")

    def __str__(self) -> str:
        return self.decorated()


@dataclass(frozen=True)
class ProcessOutput(Value):
    """Captured result of an external process."""

    status: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.status == 0

    def _text(self) -> str:
        return _decode(self.stdout if self.success else self.stderr)

    def decorated(self) -> str:
        return self._text()

    def colorless(self) -> str:
        return self._text()

    def undecorated(self) -> str:
        return self._text()

    def to_bytes(self) -> bytes:
        return self.stdout if self.success else self.stderr


@dataclass(frozen=True)
class FileRef(Value):
    """A path on disk; ``full_path`` selects how much of it is shown."""

    path: Path
    full_path: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    @property
    def display_name(self) -> str:
        if self.full_path or not self.path.name:
            return str(self.path)
        return self.path.name

    def decorated(self) -> str:
        name = self.display_name
        hidden = self.path.name.startswith(".")
        try:
            st = os.stat(self.path)
        except OSError as e:
            return f"{name} ({e.strerror})"
        if stat.S_ISDIR(st.st_mode):
            return paint(BRIGHT_BLUE if hidden else BLUE, name)
        if stat.S_ISREG(st.st_mode):
            if hidden:
                return paint(BRIGHT_GREEN, name)
            if st.st_mode & 0o111:
                return paint(YELLOW, name)
            return paint(GREEN, name)
        return repr(name)

    def colorless(self) -> str:
        return self.display_name

    def undecorated(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class String(Value):
    text: str

    def decorated(self) -> str:
        return paint(GREEN, f'"{self.text}"')

    def colorless(self) -> str:
        return f'"{self.text}"'

    def undecorated(self) -> str:
        return self.text


@dataclass(frozen=True)
class Array(Value):
    items: Tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def _bracketed(self, parts: list[str]) -> str:
        if not parts:
            return "[]"
        body = ",\n".join("  " + _indent(p) for p in parts)
        return f"[\n{body}\n]"

    def decorated(self) -> str:
        return self._bracketed([item.decorated() for item in self.items])

    def colorless(self) -> str:
        return self._bracketed([item.colorless() for item in self.items])

    def undecorated(self) -> str:
        return "\n".join(item.undecorated() for item in self.items)


@dataclass(frozen=True)
class Integer(Value):
    value: int

    def decorated(self) -> str:
        return paint(WHITE, str(self.value))

    def colorless(self) -> str:
        return str(self.value)

    def undecorated(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(Value):
    value: float

    def decorated(self) -> str:
        return paint(WHITE, repr(self.value))

    def colorless(self) -> str:
        return repr(self.value)

    def undecorated(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Boolean(Value):
    value: bool

    def _text(self) -> str:
        return "true" if self.value else "false"

    def decorated(self) -> str:
        return paint(BRIGHT_MAGENTA, self._text())

    def colorless(self) -> str:
        return self._text()

    def undecorated(self) -> str:
        return self._text()


@dataclass(frozen=True)
class Null(Value):
    def decorated(self) -> str:
        return paint(YELLOW, "null")

    def colorless(self) -> str:
        return "null"

    def undecorated(self) -> str:
        return ""


@dataclass(frozen=True)
class Error(Value):
    message: str
    code: int

    def decorated(self) -> str:
        return f"{paint(RED, 'Error: ')}{self.message}\nExited With status {self.code}"

    def colorless(self) -> str:
        return f"Error: {self.message}\nExited With status {self.code}"

    def undecorated(self) -> str:
        return self.message


def exit_status(value: Value) -> int:
    """Map a value onto a process exit status."""
    if isinstance(value, Error):
        return value.code
    if isinstance(value, ProcessOutput):
        return value.status
    return 0
