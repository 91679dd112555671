"""Rendering of diagnostics for terminals, logs and tooling.

One formatter renders a Diagnostic, or a NumericParseError together with the
input context it carries, in one of three layouts:

    RUST    multi-line, compiler style (default)
    SIMPLE  single line: CODE: message
    JSON    one JSON object per diagnostic

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic, FrozenErrorContext

if TYPE_CHECKING:
    from .errors import NumericParseError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_RED = "\033[1;31m"
_YELLOW = "\033[1;33m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Layouts supported by DiagnosticFormatter."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render diagnostics in a fixed layout.

    Attributes:
        output_format: Layout to produce
        sanitize: Truncate messages and echoed input to max_content_length,
            so untrusted numeric text cannot flood a log line
        color: Wrap the severity in ANSI colors (RUST layout only)
        max_content_length: Truncation limit when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.input_blank()))
        INPUT_BLANK: Input is empty or contains only whitespace
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic."""
        return self._render(diagnostic, None)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_parse_error(self, error: NumericParseError) -> str:
        """Render a parse error with its input, target type and locale.

        Errors built from a plain message (no Diagnostic) render the message
        alone in every layout.
        """
        if error.diagnostic is None:
            message = self._clip(str(error))
            if self.output_format is OutputFormat.JSON:
                return json.dumps({"message": message}, ensure_ascii=False)
            return message
        return self._render(error.diagnostic, error.context)

    def _render(self, diagnostic: Diagnostic, context: FrozenErrorContext | None) -> str:
        match self.output_format:
            case OutputFormat.RUST:
                return self._render_rust(diagnostic, context)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._render_json(diagnostic, context)

    def _render_rust(self, diagnostic: Diagnostic, context: FrozenErrorContext | None) -> str:
        """Compiler-style block.

        Example output:
            error[INVALID_CHARACTER]: Unexpected character 'g' at position 4 in '9392gk381'
              --> column 5
              = convention: invariant
              = help: Only ASCII digits, '.', ',', a sign and surrounding whitespace ...
        """
        severity: str = diagnostic.severity
        if self.color:
            shade = _YELLOW if diagnostic.severity == "warning" else _RED
            severity = f"{shade}{severity}{_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if diagnostic.span is not None:
            lines.append(f"  --> column {diagnostic.span.column}")
        for key, value in self._notes(diagnostic, context):
            match key:
                case "input":
                    lines.append(f"  = input: {value!r}")
                case "hint":
                    lines.append(f"  = help: {value}")
                case _:
                    lines.append(f"  = {key}: {value}")
        return "\n".join(lines)

    def _render_json(self, diagnostic: Diagnostic, context: FrozenErrorContext | None) -> str:
        """One JSON object; optional keys appear only when set."""
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
        for key, value in self._notes(diagnostic, context):
            data[key] = value
        return json.dumps(data, ensure_ascii=False)

    def _notes(
        self, diagnostic: Diagnostic, context: FrozenErrorContext | None
    ) -> list[tuple[str, str]]:
        """Key/value annotations shared by the RUST and JSON layouts."""
        notes: list[tuple[str, str]] = []
        if context is not None:
            if context.input_value:
                notes.append(("input", self._clip(context.input_value)))
            if context.parse_type:
                notes.append(("type", context.parse_type))
            if context.locale_code:
                notes.append(("locale", context.locale_code))
        convention = diagnostic.convention or (context.convention if context else "")
        if convention:
            notes.append(("convention", convention))
        if diagnostic.hint:
            notes.append(("hint", diagnostic.hint))
        return notes

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
