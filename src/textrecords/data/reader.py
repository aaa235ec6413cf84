"""Lazy line reader over corpus files."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)


def read_lines(
    path: str | Path,
    encoding: str = "utf-8",
    strip_whitespace: bool = True,
) -> Iterator[str]:
    """Open ``path`` and return a lazy iterator over its lines.

    The file is opened before this function returns, so a missing or
    unreadable file raises ``OSError`` immediately rather than on the first
    ``next()``. Lines end at ``\\n`` only; a lone ``\\r`` stays part of the
    line. Trailing whitespace (including the newline) is stripped from every
    line, or only the ``\\n``/``\\r\\n`` terminator when ``strip_whitespace``
    is false.

    A read or decode error part-way through the file is logged and ends the
    iteration; every line before the failing one is kept and the error is not
    raised. Parse errors in the caller are unaffected by this and still
    propagate.
    """
    path = Path(path)
    handle = path.open("rb")
    return _iter_handle(handle, path, encoding, strip_whitespace)


def _iter_handle(
    handle: BinaryIO,
    path: Path,
    encoding: str = "utf-8",
    strip_whitespace: bool = True,
) -> Iterator[str]:
    with handle:
        line_number = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as e:
                logger.error(f"Read error in {path}, stopping early: {e}")
                return
            if not raw:
                return
            line_number += 1
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError as e:
                logger.error(f"Decode error in {path} at line {line_number}, stopping early: {e}")
                return
            if strip_whitespace:
                yield line.rstrip()
            else:
                yield _strip_terminator(line)


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line
