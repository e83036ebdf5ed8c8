"""Diagnostic system for localeparts errors.

Provides structured error diagnostics with codes, hints and the generated
patterns involved in a failure.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    LocaleNotSupportedError,
    LocalePartsError,
    NoMatchError,
    NotFoundError,
    SchemaInferenceError,
    UnparseableError,
    UnsupportedOptionsError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LocaleNotSupportedError",
    "LocalePartsError",
    "NoMatchError",
    "NotFoundError",
    "OutputFormat",
    "SchemaInferenceError",
    "UnparseableError",
    "UnsupportedOptionsError",
]
