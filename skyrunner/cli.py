"""Command-line entry point: argument checks, help text and game start."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from skyrunner.game import run

EXIT_FAILURE = 84
HELP_FILE = "help/h"


class UsageError(Exception):
    """The command line does not name a readable map file."""


def _wants_help(argument: str) -> bool:
    return argument.startswith("-h")


def check_arguments(argv: Sequence[str]) -> str | None:
    """Return the map path named by ``argv``, or ``None`` when help is asked for.

    ``argv`` holds the arguments without the program name. Raises
    :class:`UsageError` when no map, too many arguments, or an unreadable
    map is given.
    """
    if not argv:
        raise UsageError("no map file given")
    if len(argv) > 1:
        raise UsageError("too many arguments")
    argument = argv[0]
    if _wants_help(argument):
        return None
    path = Path(argument)
    if path.is_dir():
        raise UsageError(f"{argument}: is a directory")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise UsageError(f"{argument}: cannot be opened") from exc
    return argument


def show_help(path: str | os.PathLike[str] = HELP_FILE) -> None:
    """Print the help file line by line followed by a blank line.

    Nothing is printed when the help file does not exist.
    """
    try:
        data = Path(path).read_bytes()
    except OSError:
        return
    lines = data.decode("utf-8", errors="replace").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    out = sys.stdout
    for line in lines:
        out.write(line + "\n")
    out.write("\n")
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Check the arguments and play the given map; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        map_path = check_arguments(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return EXIT_FAILURE
    if map_path is None:
        show_help()
        return EXIT_FAILURE
    run(map_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())