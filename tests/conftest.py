"""Shared pytest fixtures for word count tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a sample text file for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / "sample.txt"
    file_path.write_text("The cat sat on the mat.\nThe dog -- 2 dogs -- sat too!\n", encoding="utf-8")
    return file_path


@pytest.fixture
def empty_text_file(tmp_path: Path) -> Path:
    """Create an empty text file for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to empty text file
    """
    file_path = tmp_path / "empty.txt"
    file_path.write_text("", encoding="utf-8")
    return file_path
