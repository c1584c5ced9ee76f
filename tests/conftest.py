"""Shared test fixtures for the btoa test suite.

WHY: Emitter and CLI tests need the same helpers — in-memory streams,
streams that fail on demand, and sample input files.

HOW: Plain helper classes plus pytest fixtures built on tmp_path.

RULES:
- File I/O tests use tmp_path for isolation
- Failing streams raise OSError, like a real disk or pipe failure
"""

import io
from typing import List

import pytest

from btoa.dialects import DIALECTS


class FailingWriter(io.StringIO):
    """Text stream whose write() fails after ``fail_after`` successful calls."""

    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.calls = 0

    def write(self, s):
        if self.calls >= self.fail_after:
            raise OSError(28, "No space left on device")
        self.calls += 1
        return super().write(s)


class FailingFlushWriter(io.StringIO):
    """Text stream that accepts every write but fails on flush().

    Stands in for buffered stdout hitting a full disk or a closed pipe.
    """

    def flush(self):
        raise OSError(32, "Broken pipe")


class FailingReader(io.BytesIO):
    """Binary stream whose read() fails once ``fail_at`` bytes were read."""

    def __init__(self, data: bytes, fail_at: int) -> None:
        super().__init__(data)
        self.fail_at = fail_at

    def read(self, size=-1):
        if self.tell() >= self.fail_at:
            raise OSError(5, "Input/output error")
        return super().read(size)


def data_lines(fragment: str, directive: str) -> List[str]:
    """Lines of ``fragment`` that define bytes with ``directive``."""
    return [line for line in fragment.splitlines() if line.startswith(directive + "\t")]


def literals(line: str) -> List[str]:
    """Byte literals on one data line, e.g. ['0x0', '0x1']."""
    _, _, values = line.partition("\t")
    return [value.strip() for value in values.split(",")]


@pytest.fixture(params=list(DIALECTS))
def dialect(request):
    """Each built-in dialect profile in turn."""
    return DIALECTS[request.param]


@pytest.fixture
def ten_bytes():
    return bytes(range(10))


@pytest.fixture
def sample_file(tmp_path, ten_bytes):
    """A 10-byte input file named login-screen.bmp."""
    path = tmp_path / "login-screen.bmp"
    path.write_bytes(ten_bytes)
    return path
