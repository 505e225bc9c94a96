"""Interactive command: load a catalogue file and ask how to search it."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import Optional, Sequence, TextIO

from booktracker.catalog import load_catalog_file

__all__ = ["RESET", "YELLOW", "Status", "SearchBy", "read_choice", "prompt", "main"]

RESET = "\033[0m"
YELLOW = "\033[33m"

USAGE = "launch> ./tracker file.txt\n"
MENU = (
    "To search by title:  digit 0\n"
    "To search by Author: digit 1\n"
    "To exit:             digit exit\n"
    "> "
)
INPUT_ERROR = YELLOW + "Input 1 accepts only 0, 1, or exit\n" + RESET


class Status(Enum):
    """State of the interactive loop."""

    VALID = auto()
    INVALID = auto()
    EXIT = auto()


class SearchBy(Enum):
    """Which field a search looks at."""

    BY_TITLE = auto()
    BY_AUTHOR = auto()


_CHOICES = {"0\n": SearchBy.BY_TITLE, "1\n": SearchBy.BY_AUTHOR}


def read_choice(line: Optional[str]) -> tuple[Status, Optional[SearchBy]]:
    """Interpret one line of input, newline included.

    ``None`` (end of input) and ``exit`` end the session; ``0`` and ``1``
    choose a search field; anything else is invalid.
    """
    if line is None or line == "exit\n":
        return Status.EXIT, None
    choice = _CHOICES.get(line)
    if choice is None:
        return Status.INVALID, None
    return Status.VALID, choice


def prompt(stdin: TextIO, stdout: TextIO) -> tuple[Status, Optional[SearchBy]]:
    """Show the menu, read one answer and echo a valid choice."""
    stdout.write(MENU)
    stdout.flush()
    line = stdin.readline()
    status, choice = read_choice(line if line else None)
    if status is Status.VALID:
        stdout.write(f"{line}\n")
    return status, choice


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = list(sys.argv[1:] if argv is None else argv)
    stdout = sys.stdout
    status = Status.VALID
    catalog = None
    if len(args) == 1:
        try:
            catalog, rejected = load_catalog_file(args[0])
        except OSError:
            status = Status.EXIT
        else:
            for line in rejected:
                stdout.write(f"Invalid line: {line}\n")
    else:
        stdout.write(USAGE)
        status = Status.EXIT

    while status is not Status.EXIT:
        status, _ = prompt(sys.stdin, stdout)
        if status is Status.INVALID:
            stdout.write(INPUT_ERROR)
    if catalog is not None:
        catalog.clear()
    stdout.flush()
    return 0