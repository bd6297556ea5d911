"""Shared file operation utilities."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterable, Iterator, Union

from common.exceptions import FileOperationError

logger = logging.getLogger(__name__)


@contextmanager
def file_manager(
    filename: Union[str, Path],
    mode: str = "r",
    encoding: str = "utf-8",
) -> Iterator[IO[str]]:
    """Open a text file with consistent defaults and ensure closure.

    Failures to open are raised as FileOperationError; errors raised
    inside the block propagate unchanged after the file is closed.
    """
    logger.debug("Opening file %s with mode=%r", filename, mode)
    try:
        f = open(filename, mode, encoding=encoding)
    except OSError as ex:
        raise FileOperationError(f"Failed to open '{filename}': {ex}") from ex
    try:
        yield f
    finally:
        f.close()
        logger.debug("Closed file %s", filename)


def iter_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with their line terminators stripped."""
    for line in lines:
        yield line.rstrip("\r\n")
