"""
Custom exceptions for the Keyword Intent Analyzer.
"""


class AnalyzerError(Exception):
    """Base exception for keyword analysis errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AnalyzerError):
    """Exception for data validation errors."""

    def __init__(self, message: str, field: str = None, value=None):
        self.field = field
        self.value = value
        super().__init__(
            message,
            {"field": field, "value": str(value) if value else None}
        )


class UploadError(ValidationError):
    """Exception for rejected keyword uploads."""

    def __init__(self, message: str, filename: str = None):
        self.filename = filename
        super().__init__(message, field="file", value=filename)


class ConfigurationError(AnalyzerError):
    """Exception for configuration errors."""

    def __init__(self, message: str, missing_keys: list = None):
        self.missing_keys = missing_keys or []
        super().__init__(
            message,
            {"missing_keys": missing_keys}
        )


class ParseWarning(UserWarning):
    """
    Category for silently recovered parse problems.

    Unparseable volumes become 0 and numeric-looking CSV rows are dropped;
    neither fails the batch.
    """
