"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to every
datevalue exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (construction, ISO parsing, field ranges)
        2000-2999: Locale errors (resource lookup, resource parsing)
    """

    # Input errors (1000-1999)
    UNRECOGNIZED_INPUT_FORMAT = 1001
    UNSUPPORTED_TIMEZONE_OFFSET = 1002
    INVALID_FIELD = 1003

    # Locale errors (2000-2999)
    LOCALE_RESOURCE_MISSING = 2001
    LOCALE_PARSE_ERROR = 2002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a locale resource.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If line or column is less than 1 (both are 1-indexed).
        """
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Resource location (None unless a locale resource failed to parse)
        hint: Suggestion for fixing the error
        resource: Locale resource path or tag involved in the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    resource: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a multi-line report.

        Example output:
            error[LOCALE_PARSE_ERROR]: Locale 'de_DE' failed to parse
              --> locales/de_DE.json, line 4, column 9
              = help: Check the locale resource for JSON syntax errors

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.span is not None:
            where = f"line {self.span.line}, column {self.span.column}"
            if self.resource:
                where = f"{self.resource}, {where}"
            lines.append(f"  --> {where}")
        elif self.resource:
            lines.append(f"  --> {self.resource}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
