"""Dialect table — registry of supported assembler syntaxes.

WHY: The CLI needs a single lookup from a user-supplied dialect name to
its profile, and an ordered list of names for usage text.

HOW: DIALECTS maps names to DialectProfile instances, in declaration
order. lookup() is an exact match; get_dialect() is the raising variant
used by the CLI.

RULES:
- Names are matched exactly and case-sensitively ("NASM" is unknown)
- list_names() preserves declaration order: nasm, fasm, as
- The built-in profiles must not change; generated files depend on them
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from btoa.dialects.base import DialectProfile
from btoa.errors import UsageError

BUILTIN_DIALECTS: Sequence[DialectProfile] = (
    DialectProfile(
        name="nasm",
        byte_directive="db",
        size_expr_prefix="dd $-",
        export_prefix="[GLOBAL ",
        export_suffix="]",
    ),
    DialectProfile(
        name="fasm",
        byte_directive="db",
        size_expr_prefix="dd $-",
        export_prefix="global ",
    ),
    DialectProfile(
        name="as",
        byte_directive=".byte",
        size_expr_prefix=".long .-",
        export_prefix=".globl ",
    ),
)


def build_registry(profiles: Sequence[DialectProfile]) -> Dict[str, DialectProfile]:
    """Build a name → profile mapping; on duplicate names the first wins."""
    registry: Dict[str, DialectProfile] = {}
    for profile in profiles:
        registry.setdefault(profile.name, profile)
    return registry


DIALECTS: Dict[str, DialectProfile] = build_registry(BUILTIN_DIALECTS)


def lookup(name: str) -> Optional[DialectProfile]:
    """Return the profile registered under ``name``, or None."""
    return DIALECTS.get(name)


def list_names() -> List[str]:
    """Supported dialect names, in declaration order."""
    return list(DIALECTS.keys())


def get_dialect(name: str) -> DialectProfile:
    """Return the profile for ``name``.

    Raises:
        UsageError: If no dialect of that name exists. The message lists
                    the supported names.
    """
    profile = lookup(name)
    if profile is None:
        raise UsageError(
            "Non-supported assembly syntax '{}'. Supported: {}.".format(
                name, ", ".join(list_names())
            )
        )
    return profile
