#!/usr/bin/env python3

# Entry of tysh

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

try:
    import readline  # type: ignore
except ImportError:  # pragma: no cover - readline is missing on some platforms
    readline = None

READLINE_ACTIVE = bool(readline)

PROMPT_SUFFIX = " >> "

from ops import run_line  # local module in the same folder
from typesystem import exit_status


def prompt() -> str:
    """Current directory with the home directory shown as ``~``."""
    cwd = os.getcwd()
    home = os.environ.get("HOME")
    if home and Path(home) != Path(os.sep):
        home = os.path.realpath(home)
        if cwd == home or cwd.startswith(home + os.sep):
            cwd = "~" + cwd[len(home):]
    return cwd + PROMPT_SUFFIX


def use_color(no_color: bool = False) -> bool:
    if no_color or os.environ.get("NO_COLOR") is not None:
        return False
    return sys.stdout.isatty()


def setup_readline() -> None:
    if not READLINE_ACTIVE:
        return
    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("Control-l: clear-screen")
    except Exception:
        pass


def repl(color: bool) -> int:
    setup_readline()
    while True:
        try:
            line = input(prompt())
        except EOFError:
            # Ctrl-D -> exit
            print()
            return 0
        except KeyboardInterrupt:
            # Ctrl-C at prompt -> new line and continue
            print()
            continue

        if not line.strip():
            continue

        try:
            run_line(line, color=color)
        except KeyboardInterrupt:
            print()
        except Exception as e:
            sys.stderr.write(f"tysh: exec error: {e}\n")
            sys.stderr.flush()


def run_command(line: str, color: bool) -> int:
    return exit_status(run_line(line, color=color))


def parse_args(args=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="tysh - a shell whose commands evaluate to typed values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tysh                       # Interactive prompt
  tysh -c 'ls > files.txt'   # Run one line and exit
  NO_COLOR=1 tysh            # Echo values without ANSI colours
"""
    )

    parser.add_argument(
        "--command", "-c",
        metavar="LINE",
        help="Run LINE and exit with the status of its last value"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Echo values without ANSI colours"
    )

    return parser.parse_args(args)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    color = use_color(args.no_color)
    if args.command is not None:
        sys.exit(run_command(args.command, color))
    sys.exit(repl(color))


if __name__ == "__main__":
    main()
