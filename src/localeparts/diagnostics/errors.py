"""localeparts exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions may store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocalePartsError(Exception):
    """Base exception for all localeparts errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        input_value: The text involved in the failure (empty if not applicable)
        locale_code: The locale the operation ran under (empty if not applicable)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize LocalePartsError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The text involved in the failure
            locale_code: The locale the operation ran under
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code


class SchemaInferenceError(LocalePartsError):
    """Sample output could not be segmented into the requested fields.

    Raised at configuration time, never silently degraded into a wrong
    schema.
    """


class NotFoundError(LocalePartsError, LookupError):
    """Name lookup failed in a month, weekday or currency table."""


class NoMatchError(LocalePartsError):
    """Generated pattern did not match the input.

    Attributes:
        pattern: The regular expression that was tried
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        pattern: str = "",
    ) -> None:
        super().__init__(message, input_value=input_value, locale_code=locale_code)
        self.pattern = pattern


class UnparseableError(LocalePartsError, ValueError):
    """No candidate parser could interpret the input as a value."""


class UnsupportedOptionsError(LocalePartsError, ValueError):
    """Requested formatting options cannot be honoured.

    Examples:
    - Unknown option key or width
    - Pattern string with an unsupported letter count
    - Locale data that silently drops a requested field
    """


class LocaleNotSupportedError(UnsupportedOptionsError):
    """Locale identifier unknown to the CLDR data."""
