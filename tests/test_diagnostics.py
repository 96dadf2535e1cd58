"""Tests for diagnostic codes, templates and the exception hierarchy.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from datevalue import DateConfig, FixedClock
from datevalue.diagnostics import (
    DateValueError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    InvalidFieldError,
    LocaleError,
    LocaleParseError,
    LocaleResourceMissingError,
    SourceSpan,
    UnrecognizedInputFormatError,
    UnsupportedTimezoneOffsetError,
)


class TestDiagnosticCode:
    """Code values are unique and grouped by category."""

    def test_unique_values(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_categories(self) -> None:
        assert 1000 <= DiagnosticCode.INVALID_FIELD.value < 2000
        assert 2000 <= DiagnosticCode.LOCALE_PARSE_ERROR.value < 3000


class TestSourceSpan:
    """Spans are 1-indexed."""

    @pytest.mark.parametrize(("line", "column"), [(0, 1), (1, 0), (-1, 5)])
    def test_rejects_zero_and_negative(self, line: int, column: int) -> None:
        with pytest.raises(ValueError, match="1-indexed"):
            SourceSpan(line=line, column=column)


class TestFormatError:
    """Diagnostic.format_error report layout."""

    def test_message_only(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_FIELD, message="Invalid month 13")
        assert diagnostic.format_error() == "error[INVALID_FIELD]: Invalid month 13"
        assert str(diagnostic) == "Invalid month 13"

    def test_with_span_resource_and_hint(self) -> None:
        diagnostic = ErrorTemplate.locale_parse_error(
            "de_DE", "Expecting value", line=4, column=9, resource="locales/de_DE.json"
        )
        lines = diagnostic.format_error().splitlines()
        assert lines[0] == (
            "error[LOCALE_PARSE_ERROR]: Locale 'de_DE' failed to parse at line 4: Expecting value"
        )
        assert lines[1] == "  --> locales/de_DE.json, line 4, column 9"
        assert lines[2].startswith("  = help: ")

    def test_resource_without_span(self) -> None:
        diagnostic = ErrorTemplate.locale_resource_missing("de_DE", "en_US", "locales/en_US.json")
        assert "  --> locales/en_US.json" in diagnostic.format_error()
        assert diagnostic.span is None


class TestErrorTemplate:
    """Message text produced by the templates."""

    def test_unrecognized_input(self) -> None:
        diagnostic = ErrorTemplate.unrecognized_input(1.5)
        assert diagnostic.message == "Unrecognized date input 1.5 (float)"
        with_reason = ErrorTemplate.unrecognized_input("x", "no 'T' separator")
        assert with_reason.message.endswith(": no 'T' separator")

    def test_unsupported_offset(self) -> None:
        value = "2020-03-05T14:30:00+02:00"
        diagnostic = ErrorTemplate.unsupported_offset(value, "+02:00")
        assert diagnostic.message == f"Unsupported timezone offset '+02:00' in '{value}'"
        assert diagnostic.code == DiagnosticCode.UNSUPPORTED_TIMEZONE_OFFSET

    def test_invalid_field(self) -> None:
        diagnostic = ErrorTemplate.invalid_field("month", 13, "1..12")
        assert diagnostic.message == "Invalid month 13: expected 1..12"

    def test_shape_error_has_no_span(self) -> None:
        diagnostic = ErrorTemplate.locale_parse_error("de_DE", "missing 'months' object")
        assert diagnostic.span is None
        assert "is malformed" in diagnostic.message


class TestExceptions:
    """Exception hierarchy and attached diagnostics."""

    @pytest.mark.parametrize(
        "cls",
        [
            UnrecognizedInputFormatError,
            UnsupportedTimezoneOffsetError,
            InvalidFieldError,
            LocaleError,
            LocaleParseError,
            LocaleResourceMissingError,
        ],
    )
    def test_all_derive_from_base(self, cls: type[DateValueError]) -> None:
        assert issubclass(cls, DateValueError)

    def test_plain_message(self) -> None:
        error = DateValueError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.invalid_field("day", 32, "1..31")
        error = InvalidFieldError(diagnostic)
        assert str(error) == diagnostic.message
        assert error.diagnostic is diagnostic
        assert isinstance(error, ValueError)

    def test_locale_error_attributes(self) -> None:
        error = LocaleParseError(
            "bad", locale_code="de_DE", line=2, column=13, detail="Expecting value"
        )
        assert (error.locale_code, error.line, error.column) == ("de_DE", 2, 13)
        assert error.detail == "Expecting value"
        missing = LocaleResourceMissingError("gone", locale_code="xx", fallback_locale="en_US")
        assert missing.fallback_locale == "en_US"


class TestDateConfig:
    """DateConfig validates its values."""

    def test_defaults(self) -> None:
        config = DateConfig()
        assert config.locale is None
        assert config.fallback_locale == "en_US"

    def test_empty_fallback_rejected(self) -> None:
        with pytest.raises(ValueError, match="fallback_locale"):
            DateConfig(fallback_locale="")

    def test_empty_locale_rejected(self) -> None:
        with pytest.raises(ValueError, match="locale must be None"):
            DateConfig(locale="")

    def test_fixed_clock(self) -> None:
        assert DateConfig(clock=FixedClock(42)).clock.now_epoch() == 42
