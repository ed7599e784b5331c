"""
Configuration module for the Keyword Intent Analyzer.
"""
from config.settings import (
    Settings,
    ClusteringSettings,
    IngestionSettings,
    DisplaySettings,
    get_settings
)

__all__ = [
    "Settings",
    "ClusteringSettings",
    "IngestionSettings",
    "DisplaySettings",
    "get_settings"
]
