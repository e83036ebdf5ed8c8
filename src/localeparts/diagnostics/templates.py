"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Configuration errors

    @staticmethod
    def schema_inference_failed(
        locale_code: str,
        rendered: str,
        reason: str,
    ) -> Diagnostic:
        """Sample rendering could not be segmented into fields.

        Args:
            locale_code: Locale the sample was rendered in
            rendered: The sample rendering that was analysed
            reason: Which field was missing or repeated

        Returns:
            Diagnostic for SCHEMA_INFERENCE_FAILED
        """
        msg = f"Cannot infer the part layout of '{rendered}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_INFERENCE_FAILED,
            message=msg,
            hint="Pass an explicit pattern string for this locale",
            locale_code=locale_code,
            input_value=rendered,
        )

    @staticmethod
    def unsupported_option(key: str, value: object, allowed: Iterable[str]) -> Diagnostic:
        """Unknown option key or width.

        Args:
            key: The option name
            value: The rejected value
            allowed: Accepted values for the option

        Returns:
            Diagnostic for UNSUPPORTED_OPTIONS
        """
        msg = f"Unsupported value {value!r} for option '{key}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_OPTIONS,
            message=msg,
            hint=f"Use one of: {', '.join(allowed)}",
        )

    @staticmethod
    def field_dropped(locale_code: str, field: str, pattern: str) -> Diagnostic:
        """Locale data resolved to a pattern without a requested field.

        Args:
            locale_code: Locale the options were resolved in
            field: Requested field absent from the pattern
            pattern: The resolved CLDR pattern

        Returns:
            Diagnostic for UNSUPPORTED_OPTIONS
        """
        msg = f"Locale '{locale_code}' has no pattern showing '{field}'; resolved '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_OPTIONS,
            message=msg,
            hint="Request a field combination the locale supports or pass a pattern string",
            locale_code=locale_code,
            pattern=pattern,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Unknown locale.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en-GB', 'de_DE', 'nl')",
            locale_code=locale_code,
        )

    @staticmethod
    def pattern_string_invalid(pattern: str, token: str) -> Diagnostic:
        """Pattern string token with an unsupported letter or count.

        Args:
            pattern: The full pattern string
            token: The offending field token

        Returns:
            Diagnostic for PATTERN_STRING_INVALID
        """
        msg = f"Unsupported field '{token}' in pattern '{pattern}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_STRING_INVALID,
            message=msg,
            hint="Use y/yy/yyyy, M/MM/MMM/MMMM, d/dd, EEE/EEEE; quote literal letters",
            input_value=pattern,
        )

    # Lookup errors

    @staticmethod
    def name_not_found(name: str, locale_code: str) -> Diagnostic:
        """Name absent from a lookup table.

        Args:
            name: The name that was looked up
            locale_code: Locale of the table

        Returns:
            Diagnostic for NAME_NOT_FOUND
        """
        msg = f"Name '{name}' not found for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.NAME_NOT_FOUND,
            message=msg,
            hint="Check the spelling or the locale of the input",
            locale_code=locale_code,
            input_value=name,
        )

    @staticmethod
    def name_ambiguous(name: str, locale_code: str, candidates: Iterable[object]) -> Diagnostic:
        """Name maps to several values and the strategy demands one.

        Args:
            name: The ambiguous name
            locale_code: Locale of the table
            candidates: Values the name maps to

        Returns:
            Diagnostic for NAME_AMBIGUOUS
        """
        listed = ", ".join(str(candidate) for candidate in candidates)
        msg = f"Name '{name}' is ambiguous for locale '{locale_code}': {listed}"
        return Diagnostic(
            code=DiagnosticCode.NAME_AMBIGUOUS,
            message=msg,
            hint="Use prefer(...) to pick among the candidates or an unambiguous name",
            locale_code=locale_code,
            input_value=name,
        )

    # Parsing errors

    @staticmethod
    def no_match(text: str, pattern: str, locale_code: str = "") -> Diagnostic:
        """Generated pattern did not match.

        Args:
            text: The input text
            pattern: The regular expression tried
            locale_code: Locale the pattern was built for

        Returns:
            Diagnostic for PATTERN_NO_MATCH
        """
        msg = f"No match for '{text}'"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NO_MATCH,
            message=msg,
            hint="Check that the input follows the locale's layout",
            locale_code=locale_code or None,
            input_value=text,
            pattern=pattern,
        )

    @staticmethod
    def unparseable(text: str, locale_code: str, kind: str) -> Diagnostic:
        """No parser could interpret the input.

        Args:
            text: The input text
            locale_code: Locale used for parsing
            kind: What was being parsed ('date', 'money')

        Returns:
            Diagnostic for UNPARSEABLE
        """
        msg = f"Unable to parse '{text}' as a {kind} for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.UNPARSEABLE,
            message=msg,
            hint="Pass explicit options or a pattern string matching the input",
            locale_code=locale_code,
            input_value=text,
        )

    @staticmethod
    def date_invalid(text: str, locale_code: str, reason: str) -> Diagnostic:
        """Matched fields do not form a calendar date.

        Args:
            text: The input text
            locale_code: Locale used for parsing
            reason: Why the date could not be built

        Returns:
            Diagnostic for DATE_INVALID
        """
        msg = f"'{text}' does not denote a valid date: {reason}"
        return Diagnostic(
            code=DiagnosticCode.DATE_INVALID,
            message=msg,
            hint="Dates need a year, a month and a day that exist in the calendar",
            locale_code=locale_code,
            input_value=text,
        )

    @staticmethod
    def amount_invalid(text: str, locale_code: str, reason: str) -> Diagnostic:
        """Matched parts do not form a monetary amount.

        Args:
            text: The input text
            locale_code: Locale used for parsing
            reason: Why the amount could not be built

        Returns:
            Diagnostic for AMOUNT_INVALID
        """
        msg = f"'{text}' does not denote an amount of money: {reason}"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_INVALID,
            message=msg,
            hint="Money needs a currency and an integer part",
            locale_code=locale_code,
            input_value=text,
        )
