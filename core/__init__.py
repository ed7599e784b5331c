"""
Core module for the Keyword Intent Analyzer.
Contains exception handling and logging setup.

The analysis service lives in core.keyword_service and is imported from
there directly, since it depends on the ingestion and labeling packages.
"""
from core.exceptions import (
    AnalyzerError,
    ValidationError,
    UploadError,
    ConfigurationError,
    ParseWarning
)
from core.logger import setup_logger, get_logger

__all__ = [
    "AnalyzerError",
    "ValidationError",
    "UploadError",
    "ConfigurationError",
    "ParseWarning",
    "setup_logger",
    "get_logger"
]
