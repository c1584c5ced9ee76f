"""Command-line interface for the binary-to-assembly converter.

WHY: Users run the converter from build scripts and Makefiles:
``btoa nasm logo.bmp logo.asm``. The CLI turns that into one emit()
call and reports the outcome on stderr so stdout can carry the fragment.

HOW: argparse takes the dialect, the input file and an optional output
file. The dialect is resolved through the dialect table, both files are
opened inside an ExitStack, and emit() does the conversion. BtoaError
subclasses are mapped to an "Error: ..." line and an exit status.

RULES:
- Positional arguments: <dialect> <input-file> [<output-file>]
- No output file → the fragment is written to stdout
- Status and error messages go to stderr, never stdout
- Exit status: 0 success, 1 open/read/write failure, 2 usage error
- A write failure warns that the output is inconsistent
- Output files keep undecodable file-name bytes as-is (surrogateescape)
- Input and output files are closed on every path; stdout is never closed
- Python 3.9 compatible — no match/case
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from typing import List, Optional, TextIO

from btoa import __version__
from btoa.config import BANNER, LOG_FORMAT, LOG_LEVEL, resolve_log_level
from btoa.core.emitter import ConversionResult, emit
from btoa.core.identifier import derive_identifier, identifier_problems
from btoa.dialects import get_dialect, list_names
from btoa.errors import BtoaError, OpenError, UsageError, WriteError

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: stdout may carry the generated fragment, so nothing else can
    go there.
    """
    print(msg, file=sys.stderr, flush=True)


def _open_output(stack: ExitStack, output_file: Optional[str]) -> TextIO:
    if output_file is None:
        return sys.stdout
    try:
        stream = open(output_file, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise OpenError("Unable to create a new file: {}".format(e)) from e
    return stack.enter_context(stream)


def convert_file(
    dialect: str,
    input_file: str,
    output_file: Optional[str] = None,
) -> ConversionResult:
    """Convert ``input_file`` into an assembly fragment.

    WHY: Keeps the file handling out of main() so it can be called
    from other tools and from tests without going through sys.exit().

    HOW: Resolves the dialect, opens the input in binary mode and the
    output in text mode (or uses stdout), derives the identifier from
    the input's base name and calls emit(). The ExitStack closes both
    files whether emit() returns or raises.

    RULES:
    - The dialect is checked before any file is opened
    - The input is opened before the output is created
    - An identifier that is not a legal symbol is logged, not rejected
    - Output is flushed before returning so late write errors surface
      as WriteError

    Raises:
        UsageError: Unknown dialect.
        OpenError: Input cannot be opened or output cannot be created.
        ReadError / WriteError: I/O failure during conversion.
    """
    profile = get_dialect(dialect)

    identifier = derive_identifier(input_file)
    for problem in identifier_problems(identifier):
        logger.warning("Identifier '%s' derived from %s %s", identifier, input_file, problem)

    with ExitStack() as stack:
        try:
            in_stream = stack.enter_context(open(input_file, "rb"))
        except OSError as e:
            raise OpenError("Unable to open the input file: {}".format(e)) from e

        out_stream = _open_output(stack, output_file)
        logger.info("Converting %s to %s syntax", input_file, profile.name)

        result = emit(in_stream, out_stream, profile, identifier)

        try:
            out_stream.flush()
        except OSError as e:
            raise WriteError("Unable to write the output file: {}".format(e)) from e

    return result


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    the parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="btoa",
        description="Convert a binary file into an assembly source fragment "
                    "that defines its bytes and their size.",
        epilog="<dialect> can be one of: {}. Use -- before an input file "
               "name that starts with a dash.".format(" ".join(list_names())),
    )

    parser.add_argument(
        "dialect",
        help="Assembler syntax to emit.",
    )

    parser.add_argument(
        "input_file",
        help="Binary file to embed.",
    )

    parser.add_argument(
        "output_file",
        nargs="?",
        default=None,
        help="Assembly file to create (default: standard output).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else resolve_log_level(LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``btoa`` command.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits through sys.exit() with the status described above
    """
    parser = build_parser()

    _status(BANNER)
    _status("")

    args = parser.parse_args(argv)

    try:
        _configure_logging(args.verbose)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    try:
        result = convert_file(args.dialect, args.input_file, args.output_file)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(e.exit_code)
    except WriteError as e:
        print("Error: {} WARNING: Output data is inconsistent!".format(e), file=sys.stderr)
        if args.output_file:
            print("Do not use the partial output in {}.".format(args.output_file), file=sys.stderr)
        sys.exit(e.exit_code)
    except BtoaError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(e.exit_code)

    _status("{} bytes have been converted.".format(result.byte_count))
    sys.exit(0)


if __name__ == "__main__":
    main()
