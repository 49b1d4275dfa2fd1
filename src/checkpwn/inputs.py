"""
Reading account lists for bulk checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from pathlib import Path
from typing import Iterator

from checkpwn.errors import InputUnavailable

LIST_FILE_SUFFIX = ".ls"


def is_list_file(argument: str) -> bool:
    """Check if a command-line argument names an account list."""
    return argument.endswith(LIST_FILE_SUFFIX)


def strip_identifier(line: str) -> str:
    """Remove all spaces, tabs and newlines from a line."""
    return "".join(line.split())


def iter_identifiers(path: str | Path) -> Iterator[str]:
    """Lazily yield the accounts in a list file, one per line.

    Blank lines are skipped.

    Raises:
        InputUnavailable: the file could not be read
    """
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                identifier = strip_identifier(line)
                if identifier:
                    yield identifier
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailable(f"Error reading local file {path}: {e}") from e
