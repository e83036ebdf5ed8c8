"""Tests for diagnostics: templates, formatter and the exception hierarchy."""

import json

import pytest

from localeparts.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    LocaleNotSupportedError,
    LocalePartsError,
    NoMatchError,
    NotFoundError,
    OutputFormat,
    SchemaInferenceError,
    UnparseableError,
    UnsupportedOptionsError,
)


class TestDiagnosticFormatter:
    """Test DiagnosticFormatter output formats."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.no_match("tomorrow", r"(?P<g0>\d{1,2})", "en_GB")

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        """Rust style shows code, locale, pattern and help."""
        lines = DiagnosticFormatter().format(diagnostic).splitlines()
        assert lines[0] == "error[PATTERN_NO_MATCH]: No match for 'tomorrow'"
        assert lines[1] == "  --> locale en_GB"
        assert lines[2] == r"  = pattern: (?P<g0>\d{1,2})"
        assert lines[3].startswith("  = help: ")

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(diagnostic) == "PATTERN_NO_MATCH: No match for 'tomorrow'"

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        """JSON output is machine readable."""
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))
        assert data["code"] == "PATTERN_NO_MATCH"
        assert data["code_value"] == DiagnosticCode.PATTERN_NO_MATCH.value
        assert data["input_value"] == "tomorrow"
        assert data["locale_code"] == "en_GB"

    def test_sanitize_truncates(self) -> None:
        """Long content is cut when sanitizing."""
        diagnostic = ErrorTemplate.no_match("x" * 500, "p")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE, sanitize=True)
        assert formatter.format(diagnostic).endswith("...")
        assert len(formatter.format(diagnostic)) < 200

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format_all([diagnostic, diagnostic]).count("\n\n") == 1


class TestExceptions:
    """Test exception construction and hierarchy."""

    def test_message_from_diagnostic(self) -> None:
        """A diagnostic becomes the formatted exception message."""
        error = NotFoundError(ErrorTemplate.name_not_found("janvier", "en_GB"))
        assert "NAME_NOT_FOUND" in str(error)
        assert error.diagnostic is not None
        assert error.diagnostic.input_value == "janvier"

    def test_plain_message(self) -> None:
        error = LocalePartsError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_no_match_keeps_pattern(self) -> None:
        error = NoMatchError("no", pattern="abc", input_value="x")
        assert error.pattern == "abc"
        assert error.input_value == "x"

    @pytest.mark.parametrize(
        ("error_type", "builtin"),
        [
            (NotFoundError, LookupError),
            (UnparseableError, ValueError),
            (UnsupportedOptionsError, ValueError),
            (LocaleNotSupportedError, UnsupportedOptionsError),
        ],
    )
    def test_builtin_bases(self, error_type: type[Exception], builtin: type[Exception]) -> None:
        """Errors can be caught by their natural builtin base."""
        assert issubclass(error_type, builtin)
        assert issubclass(error_type, LocalePartsError)

    def test_schema_inference_error_is_base(self) -> None:
        assert issubclass(SchemaInferenceError, LocalePartsError)


class TestTemplates:
    """Test ErrorTemplate factories."""

    def test_unsupported_option_lists_allowed(self) -> None:
        diagnostic = ErrorTemplate.unsupported_option("year", "long", ["numeric", "2-digit"])
        assert diagnostic.code == DiagnosticCode.UNSUPPORTED_OPTIONS
        assert diagnostic.hint is not None
        assert "numeric, 2-digit" in diagnostic.hint

    def test_name_ambiguous_lists_candidates(self) -> None:
        diagnostic = ErrorTemplate.name_ambiguous("$", "en_US", ["USD", "CAD"])
        assert "USD, CAD" in diagnostic.message

    def test_unparseable(self) -> None:
        diagnostic = ErrorTemplate.unparseable("soon", "en_GB", "date")
        assert diagnostic.code == DiagnosticCode.UNPARSEABLE
        assert diagnostic.message == "Unable to parse 'soon' as a date for locale 'en_GB'"
