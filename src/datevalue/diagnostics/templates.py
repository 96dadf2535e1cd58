"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here so exception constructors never
    build their own text.
    """

    @staticmethod
    def unrecognized_input(value: object, reason: str | None = None) -> Diagnostic:
        """Construction input matched none of the accepted shapes.

        Args:
            value: The rejected input
            reason: Optional detail about why it was rejected

        Returns:
            Diagnostic for UNRECOGNIZED_INPUT_FORMAT
        """
        msg = f"Unrecognized date input {value!r} ({type(value).__name__})"
        if reason:
            msg = f"{msg}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOGNIZED_INPUT_FORMAT,
            message=msg,
            hint=(
                "Pass a mapping with year/month/day/hour/minute/second, "
                "an ISO 8601 string such as '2020-03-05T14:30:00Z', or epoch seconds"
            ),
        )

    @staticmethod
    def unsupported_offset(value: str, offset: str) -> Diagnostic:
        """ISO 8601 input carried a timezone designator other than Z.

        Args:
            value: The ISO string
            offset: The offending designator

        Returns:
            Diagnostic for UNSUPPORTED_TIMEZONE_OFFSET
        """
        msg = f"Unsupported timezone offset '{offset}' in '{value}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_TIMEZONE_OFFSET,
            message=msg,
            hint="Convert the timestamp to UTC and use the 'Z' designator",
        )

    @staticmethod
    def invalid_field(name: str, value: object, expected: str) -> Diagnostic:
        """Calendar field outside its valid range.

        Args:
            name: Field name (year, month, day, hour, minute, second)
            value: Rejected value
            expected: Description of the accepted range

        Returns:
            Diagnostic for INVALID_FIELD
        """
        msg = f"Invalid {name} {value!r}: expected {expected}"
        return Diagnostic(code=DiagnosticCode.INVALID_FIELD, message=msg)

    @staticmethod
    def locale_resource_missing(
        locale_code: str,
        fallback_locale: str,
        resource: str | None = None,
    ) -> Diagnostic:
        """Neither the requested nor the fallback locale resource was readable.

        Args:
            locale_code: Requested locale
            fallback_locale: Fallback locale that was also tried
            resource: Human-readable path of the fallback resource

        Returns:
            Diagnostic for LOCALE_RESOURCE_MISSING
        """
        msg = (
            f"No locale resource for '{locale_code}' "
            f"and fallback locale '{fallback_locale}' is unavailable"
        )
        return Diagnostic(
            code=DiagnosticCode.LOCALE_RESOURCE_MISSING,
            message=msg,
            resource=resource,
            hint=f"Ship a resource for the fallback locale '{fallback_locale}'",
        )

    @staticmethod
    def locale_parse_error(
        locale_code: str,
        detail: str,
        line: int | None = None,
        column: int | None = None,
        resource: str | None = None,
    ) -> Diagnostic:
        """Locale resource text failed to parse or had the wrong shape.

        Args:
            locale_code: Locale whose resource failed
            detail: Parser or validation message
            line: 1-indexed line of the failure, when known
            column: 1-indexed column of the failure, when known
            resource: Human-readable path of the resource

        Returns:
            Diagnostic for LOCALE_PARSE_ERROR
        """
        if line is not None:
            msg = f"Locale '{locale_code}' failed to parse at line {line}: {detail}"
        else:
            msg = f"Locale '{locale_code}' is malformed: {detail}"
        span = SourceSpan(line=line, column=column or 1) if line is not None else None
        return Diagnostic(
            code=DiagnosticCode.LOCALE_PARSE_ERROR,
            message=msg,
            span=span,
            resource=resource,
            hint=(
                "A locale resource needs months.long (12), months.short (12) "
                "and a formats mapping"
            ),
        )
