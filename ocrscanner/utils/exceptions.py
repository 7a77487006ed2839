"""
Custom Exceptions Module.

This module defines the exceptions used around the payment-slip scanner.
The classifier and the checksum validator never raise: a malformed digit
string, an unparsable amount or a fragment without matches are reported
through return values. The exceptions below belong to the surrounding
layers (configuration, command line input and output, text recognition).

Exception Hierarchy:
    OCRScannerError (base)
    ├── ConfigurationError
    ├── InputError
    │   ├── InputNotFoundError
    │   └── UnreadableInputError
    ├── OutputError
    └── RecognitionError
"""


class OCRScannerError(Exception):
    """
    Base exception for all scanner errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(OCRScannerError):
    """Raised when a configuration file is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str = None):
        message = f"Invalid configuration: {path}"
        details = {"path": path, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(OCRScannerError):
    """Base exception for command line input errors."""
    pass


class InputNotFoundError(InputError):
    """Raised when an input text file cannot be found."""

    def __init__(self, filepath: str):
        message = f"Input file not found: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)


class UnreadableInputError(InputError):
    """Raised when input text cannot be read or decoded."""

    def __init__(self, source: str, reason: str = None):
        message = f"Could not read input: {source}"
        details = {"source": source, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(OCRScannerError):
    """Raised when results cannot be written."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Could not write output: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


# =============================================================================
# RECOGNITION ERRORS
# =============================================================================

class RecognitionError(OCRScannerError):
    """
    Raised by a text recognizer when a frame cannot be processed.

    The scanner session logs and drops these; they never reach the
    classifier.
    """

    def __init__(self, reason: str = None):
        message = "Text recognition failed"
        details = {"reason": reason}
        super().__init__(message, details)


__all__ = [
    'OCRScannerError',
    'ConfigurationError',
    'InputError',
    'InputNotFoundError',
    'UnreadableInputError',
    'OutputError',
    'RecognitionError',
]
