"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from neatify.diagnostics.codes import DiagnosticSpec
from neatify.diagnostics.diagnostic import Diagnostic


def diagnostic_from_spec(spec: DiagnosticSpec, offset: int, *, message: str | None = None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        offset=offset,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
