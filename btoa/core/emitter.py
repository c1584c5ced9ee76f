"""Emitter — streams input bytes into an assembly data fragment.

WHY: This is the only real logic in the converter. Given a dialect
profile and an identifier, it writes the export directives, the data
label, the byte list and the size symbol, in one pass over the input.

HOW: Reads the input one byte at a time and writes output as it goes.
Every read and write is wrapped so an OSError becomes ReadError or
WriteError carrying the partial ConversionResult.

Output layout for "logo.bin" (3 bytes) in the "as" dialect::

    .globl logo_bin_file
    logo_bin_file:

    .byte	0x89,	0x50,	0x4e

    .globl logo_bin_file_size
    logo_bin_file_size: .long .-logo_bin_file

RULES:
- ELEMS_PER_LINE (8) literals per data line; the last line may be short
- Byte literals are lowercase hex, "0x" prefix, no zero padding (0x0..0xff)
- Empty input: header and footer only, no byte-directive line
- The size symbol is an assemble-time expression, not a number
- On any read/write failure, stop immediately; never finish the fragment
- A symbol the output encoding cannot represent is a write failure
- byte_count always equals the number of bytes read from input
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional, TextIO

from btoa.config import ELEMS_PER_LINE
from btoa.core.identifier import data_label, size_label
from btoa.dialects.base import DialectProfile
from btoa.errors import ReadError, WriteError

logger = logging.getLogger(__name__)


class ConversionStatus(enum.Enum):
    SUCCESS = "success"
    READ_FAILURE = "read-failure"
    WRITE_FAILURE = "write-failure"


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one emit() call.

    Attributes:
        byte_count: Number of bytes read from the input.
        status: SUCCESS, or the kind of failure that stopped the pass.
    """

    byte_count: int
    status: ConversionStatus = ConversionStatus.SUCCESS

    @property
    def ok(self) -> bool:
        return self.status is ConversionStatus.SUCCESS


def format_byte(value: int) -> str:
    """Format one byte as an assembler literal, e.g. 10 → ``"0xa"``."""
    return "0x{:x}".format(value)


class _Emission:
    """State of a single emit() pass: the two streams and the byte count."""

    def __init__(self, input_stream: BinaryIO, output_stream: TextIO) -> None:
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.count = 0

    def read_byte(self) -> Optional[int]:
        try:
            chunk = self.input_stream.read(1)
        except OSError as e:
            raise ReadError(
                "Unable to read the input file: {}".format(e),
                ConversionResult(self.count, ConversionStatus.READ_FAILURE),
            ) from e
        if not chunk:
            return None
        return chunk[0]

    def write(self, text: str) -> None:
        try:
            self.output_stream.write(text)
        except (OSError, UnicodeEncodeError) as e:
            raise WriteError(
                "Unable to write the output file: {}".format(e),
                ConversionResult(self.count, ConversionStatus.WRITE_FAILURE),
            ) from e


def emit(
    input_stream: BinaryIO,
    output_stream: TextIO,
    profile: DialectProfile,
    identifier: str,
) -> ConversionResult:
    """Write the assembly fragment for ``input_stream`` to ``output_stream``.

    Args:
        input_stream: Binary stream, read sequentially until EOF.
        output_stream: Text stream receiving the fragment.
        profile: Dialect to emit.
        identifier: Symbol basename, see derive_identifier().

    Returns:
        ConversionResult with the number of bytes converted.

    Raises:
        ReadError: Reading the input failed before EOF.
        WriteError: Writing the output failed. Output written so far is
                    incomplete.
    """
    data = data_label(identifier)
    size = size_label(identifier)
    emission = _Emission(input_stream, output_stream)

    logger.debug("Emitting %s fragment for %s", profile.name, data)

    emission.write(profile.export(data) + "\n")
    emission.write(data + ":\n")

    while True:
        byte = emission.read_byte()
        if byte is None:
            break

        position = emission.count
        emission.count += 1

        if position % ELEMS_PER_LINE:
            emission.write(",\t")
        else:
            emission.write("\n{}\t".format(profile.byte_directive))
        emission.write(format_byte(byte))

    emission.write("\n\n{}\n".format(profile.export(size)))
    emission.write("{}: {}\n".format(size, profile.size_expression(data)))

    logger.debug("Emitted %d bytes as %s", emission.count, data)
    return ConversionResult(emission.count)
