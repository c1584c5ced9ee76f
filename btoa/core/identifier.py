"""Symbol names derived from the input file name.

WHY: The fragment exports two symbols named after the input file, so
"login-screen.bmp" gives login_screen_bmp_file and
login_screen_bmp_file_size. File names contain characters assemblers
reject in symbols.

HOW: derive_identifier() takes the base name and replaces "." and "-"
with "_". It returns a new string and never touches the caller's data.
is_valid_identifier() reports whether the result is a legal symbol.

RULES:
- Only "." and "-" are replaced; nothing else is rewritten
- The directory part of the path is dropped
- Validity (letters, digits, underscore, no leading digit) is checked,
  not enforced; callers decide what to do with a bad identifier
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import List, Union

REPLACED_CHARS = ".-"

DATA_LABEL_SUFFIX = "_file"
SIZE_LABEL_SUFFIX = "_file_size"

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_ILLEGAL_CHAR_RE = re.compile(r"[^A-Za-z0-9_]")


def derive_identifier(filename: Union[str, PurePath]) -> str:
    """Derive the symbol basename from an input file name.

    Args:
        filename: Path or name of the input file.

    Returns:
        The base name with every "." and "-" replaced by "_",
        e.g. ``"assets/login-screen.bmp"`` → ``"login_screen_bmp"``.
    """
    name = PurePath(filename).name
    for char in REPLACED_CHARS:
        name = name.replace(char, "_")
    return name


def is_valid_identifier(identifier: str) -> bool:
    """True if ``identifier`` is usable as an assembler symbol."""
    return _IDENTIFIER_RE.fullmatch(identifier) is not None


def identifier_problems(identifier: str) -> List[str]:
    """Describe why ``identifier`` is not a valid assembler symbol.

    Returns an empty list for valid identifiers.
    """
    problems: List[str] = []
    if not identifier:
        problems.append("identifier is empty")
        return problems
    if identifier[0].isdigit():
        problems.append("starts with a digit")
    illegal = sorted(set(_ILLEGAL_CHAR_RE.findall(identifier)))
    if illegal:
        problems.append("contains illegal characters: {}".format(
            " ".join(repr(c) for c in illegal)
        ))
    return problems


def data_label(identifier: str) -> str:
    return identifier + DATA_LABEL_SUFFIX


def size_label(identifier: str) -> str:
    return identifier + SIZE_LABEL_SUFFIX
