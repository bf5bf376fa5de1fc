"""Shared state for one calculation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

__all__ = ["Context", "UserDefined"]


@dataclass
class Context:
    """Holds the input, tokens and results of the expression being evaluated."""

    raw_tokens: list[str] = field(default_factory=list)
    raw_input: str = ""
    clean_input: str = ""
    zero_count: int = 0
    result: Decimal = Decimal(0)
    string_result: str = ""
    calculation_time: str = ""
    input_buffer: str = ""
    user_precision: int = 6

    def reset(self) -> None:
        """Clear the per-calculation fields, keeping user settings and the buffer."""
        self.raw_input = ""
        self.clean_input = ""
        self.raw_tokens.clear()
        self.result = Decimal(0)
        self.string_result = ""
        self.calculation_time = ""


@dataclass
class UserDefined:
    """User preferences for display."""

    display_elapsed_time: bool = False