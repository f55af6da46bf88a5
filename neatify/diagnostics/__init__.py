"""Diagnostics."""

from neatify.diagnostics.codes import (
    FORMAT_INTERNAL_ERROR,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from neatify.diagnostics.diagnostic import Diagnostic, Severity
from neatify.diagnostics.report import collect_diagnostics, diagnostic_from_spec, has_errors

__all__ = [
    "FORMAT_INTERNAL_ERROR",
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "diagnostic_from_spec",
    "has_errors",
]
