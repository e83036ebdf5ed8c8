"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (options, locales, schema inference)
        2000-2999: Lookup errors (month, weekday and currency names)
        3000-3999: Parsing errors (pattern matching, value assembly)
    """

    # Configuration errors (1000-1999)
    SCHEMA_INFERENCE_FAILED = 1001
    UNSUPPORTED_OPTIONS = 1002
    LOCALE_UNKNOWN = 1003
    PATTERN_STRING_INVALID = 1004

    # Lookup errors (2000-2999)
    NAME_NOT_FOUND = 2001
    NAME_AMBIGUOUS = 2002

    # Parsing errors (3000-3999)
    PATTERN_NO_MATCH = 3001
    UNPARSEABLE = 3002
    DATE_INVALID = 3003
    AMOUNT_INVALID = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale the failing operation ran under
        input_value: Text that failed to parse or look up
        pattern: Generated regular expression involved in the failure
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    input_value: str | None = None
    pattern: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[NAME_NOT_FOUND]: Name 'janvier' not found
              --> locale en_GB
              = help: Check the spelling or the locale of the input

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
