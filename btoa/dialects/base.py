"""Assembler dialect profile.

WHY: Assemblers disagree on the spelling of three things the emitter
needs: the byte-definition directive, the "here minus label" size
expression, and the symbol export directive. A profile captures exactly
those strings so the emitter can stay dialect-agnostic.

HOW: DialectProfile is a frozen dataclass. Profiles are pure data — no
behavior beyond a few string-building helpers.

RULES:
- Profiles are immutable and created once, at import
- size_expr_prefix is concatenated directly with the data label, e.g.
  "dd $-" + "logo_bmp_file" → "dd $-logo_bmp_file"
- export_suffix may be empty
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DialectProfile:
    """Syntax profile of one assembler.

    Attributes:
        name: Dialect key used on the command line, e.g. ``"nasm"``.
        byte_directive: Mnemonic that defines a byte, e.g. ``"db"``.
        size_expr_prefix: Text placed before the data label to form the
                          size expression, e.g. ``".long .-"``.
        export_prefix: Text before an exported symbol, e.g. ``"[GLOBAL "``.
        export_suffix: Text after an exported symbol, e.g. ``"]"``.
    """

    name: str
    byte_directive: str
    size_expr_prefix: str
    export_prefix: str
    export_suffix: str = ""

    def export(self, symbol: str) -> str:
        """Export directive for ``symbol``, without a trailing newline."""
        return "{}{}{}".format(self.export_prefix, symbol, self.export_suffix)

    def size_expression(self, label: str) -> str:
        """Assemble-time expression for "current address minus ``label``"."""
        return "{}{}".format(self.size_expr_prefix, label)
