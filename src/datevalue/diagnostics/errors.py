"""datevalue exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DateValueError",
    "InvalidFieldError",
    "LocaleError",
    "LocaleParseError",
    "LocaleResourceMissingError",
    "UnrecognizedInputFormatError",
    "UnsupportedTimezoneOffsetError",
]


class DateValueError(Exception):
    """Base exception for all datevalue errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateValueError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class UnrecognizedInputFormatError(DateValueError):
    """Construction input matched none of the accepted shapes.

    Also raised for ISO 8601 strings whose components are not integers.
    """


class UnsupportedTimezoneOffsetError(DateValueError):
    """ISO 8601 input carried a timezone designator other than ``Z``."""


class InvalidFieldError(DateValueError, ValueError):
    """Calendar field out of range, or an unknown field name.

    Subclasses ValueError so callers validating plain integers can catch
    the builtin.
    """


class LocaleError(DateValueError):
    """Base class for locale resource failures.

    Attributes:
        locale_code: Locale whose resource failed
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class LocaleResourceMissingError(LocaleError):
    """Neither the requested nor the fallback locale resource could be read.

    Fatal: there is no table to format with.

    Attributes:
        fallback_locale: Fallback locale that was also tried
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        fallback_locale: str = "",
    ) -> None:
        super().__init__(message, locale_code=locale_code)
        self.fallback_locale = fallback_locale


class LocaleParseError(LocaleError):
    """Locale resource text failed to parse, or parsed into the wrong shape.

    Attributes:
        line: 1-indexed line of the parse failure (None for shape errors)
        column: 1-indexed column of the parse failure (None for shape errors)
        detail: Parser or validation message without location prefix
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        line: int | None = None,
        column: int | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(message, locale_code=locale_code)
        self.line = line
        self.column = column
        self.detail = detail
