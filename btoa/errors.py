"""Error taxonomy for the converter.

WHY: The CLI has to tell apart bad arguments, files that cannot be
opened, and I/O failures in the middle of a conversion. Each one gets a
different message and exit status.

HOW: One base class, BtoaError, and a subclass per failure kind. Library
code raises them; only btoa.cli.main() turns them into messages.

RULES:
- Every error is fatal, nothing is retried
- UsageError exits with 2 (argparse convention), the rest with 1
- ReadError / WriteError carry the partial ConversionResult
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from btoa.core.emitter import ConversionResult


class BtoaError(Exception):
    """Base class for all converter errors."""

    exit_code = 1


class UsageError(BtoaError):
    """Wrong argument count or unknown dialect."""

    exit_code = 2


class OpenError(BtoaError):
    """Input file missing/unreadable, or output file cannot be created."""


class ConversionError(BtoaError):
    """An I/O failure in the middle of emit().

    Attributes:
        result: ConversionResult with the failure status and the number
                of bytes read before the failure.
    """

    def __init__(self, message: str, result: Optional[ConversionResult] = None) -> None:
        super().__init__(message)
        self.result = result


class ReadError(ConversionError):
    """Reading the input stream failed before end of file."""


class WriteError(ConversionError):
    """Writing the output stream failed; any written output is partial."""
