"""Shared CLI utilities for consistent argument parsing and prompting."""

from __future__ import annotations

import argparse
import logging
from typing import TextIO

from common.exceptions import ValidationError


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --log-level argument.

    Args:
        parser: ArgumentParser to add the argument to
    """
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="INFO",
        help="Logging verbosity",
    )


def setup_logging(level: str) -> None:
    """Configure logging with consistent format.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def prompt(message: str, stdin: TextIO, stdout: TextIO) -> str:
    """Ask for a single line of input on the given console streams.

    Args:
        message: Text written before reading, without a trailing newline
        stdin: Stream the answer is read from
        stdout: Stream the message is written to

    Returns:
        The answer with surrounding whitespace removed

    Raises:
        ValidationError: If the answer is empty or the input is exhausted
    """
    stdout.write(message)
    stdout.flush()
    answer = stdin.readline().strip()
    if not answer:
        raise ValidationError(f"No answer given for prompt: {message.strip()}")
    return answer
