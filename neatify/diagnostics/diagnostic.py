"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured finding emitted by the lexer or the format runner.

    `offset` is the character index in the source text where the finding
    starts.
    """

    code: str
    message: str
    offset: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
