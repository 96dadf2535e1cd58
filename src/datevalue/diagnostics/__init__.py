"""Diagnostic system for datevalue errors.

Provides structured error diagnostics with codes, resource locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    DateValueError,
    InvalidFieldError,
    LocaleError,
    LocaleParseError,
    LocaleResourceMissingError,
    UnrecognizedInputFormatError,
    UnsupportedTimezoneOffsetError,
)
from .templates import ErrorTemplate

__all__ = [
    "DateValueError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidFieldError",
    "LocaleError",
    "LocaleParseError",
    "LocaleResourceMissingError",
    "SourceSpan",
    "UnrecognizedInputFormatError",
    "UnsupportedTimezoneOffsetError",
]
