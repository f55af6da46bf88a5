"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the quote character that opened it.",
    severity="warning",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="warning",
    category="lexer",
)

FORMAT_INTERNAL_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="FORMAT_INTERNAL_ERROR",
    message="Formatting failed; the source was left unchanged.",
    severity="error",
    category="format",
)
