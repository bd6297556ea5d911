"""Shared exception classes for the word count tools."""

from __future__ import annotations


class WordCountError(Exception):
    """Base exception for all word count errors."""

    pass


class FileOperationError(WordCountError):
    """Error during file operations."""

    pass


class ValidationError(WordCountError):
    """Raised when a prompt for a file name gets an empty answer."""

    pass
