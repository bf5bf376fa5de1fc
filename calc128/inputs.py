"""Preparing raw user input for evaluation."""

from __future__ import annotations

__all__ = ["wrap_input", "clean_input"]

_BLANKS = " \t"


def wrap_input(text: str) -> str:
    """Enclose ``text`` in an outer pair of parentheses."""
    return f"({text})"


def clean_input(text: str) -> str:
    """Remove spaces and tabs from ``text``."""
    return "".join(char for char in text if char not in _BLANKS)