"""
Application settings and configuration.
Runtime secrets are loaded from Streamlit Secrets, falling back to
environment variables.
"""
import os
import streamlit as st
from dataclasses import dataclass, field
from typing import Tuple
from functools import lru_cache

from core.exceptions import ConfigurationError


@dataclass
class ClusteringSettings:
    """Settings for the placeholder pair clusterer."""

    cluster_size: int = 2  # Keywords per positional group
    mock_dimensions: int = 50  # Length of mock similarity vectors


@dataclass
class IngestionSettings:
    """Settings for keyword uploads."""

    allowed_extensions: Tuple[str, ...] = (".csv", ".txt")
    max_upload_mb: int = 50
    encodings: Tuple[str, ...] = ("utf-8-sig", "utf-8", "latin-1", "cp1252")

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@dataclass
class DisplaySettings:
    """Settings for the results view."""

    preview_count: int = 3  # Keywords shown per intent in the overview
    table_height: int = 400


@dataclass
class Settings:
    """
    Main application settings.
    Loads LOG_MODE from Streamlit Secrets (st.secrets) or the environment.
    """

    # App info
    app_name: str = "Keyword Intent Analyzer"
    app_version: str = "1.0.0"

    # Sub-settings
    clustering: ClusteringSettings = field(default_factory=ClusteringSettings)
    ingestion: IngestionSettings = field(default_factory=IngestionSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    LOG_MODES = ("debug", "info", "production")

    def _get_secret(
        self,
        flat_key: str,
        nested_section: str,
        nested_key: str,
        default: str = ""
    ) -> str:
        """
        Get secret supporting both flat and nested formats.

        Flat: LOG_MODE = "debug"
        Nested: [logging]
                mode = "debug"

        Falls back to the environment variable named flat_key.
        """
        try:
            if flat_key in st.secrets:
                return str(st.secrets[flat_key])

            if nested_section in st.secrets:
                section = st.secrets[nested_section]
                if nested_key in section:
                    return str(section[nested_key])
        except Exception:
            # No secrets.toml outside the Streamlit runtime
            pass

        return os.environ.get(flat_key, default)

    @property
    def log_mode(self) -> str:
        """Get logging mode from secrets or environment."""
        mode = self._get_secret("LOG_MODE", "logging", "mode", "info")
        return mode.strip().lower() or "info"

    def validate(self) -> None:
        """
        Validate settings values.

        Raises:
            ConfigurationError: If a value is out of range
        """
        problems = []

        if self.clustering.cluster_size < 1:
            problems.append("clustering.cluster_size")
        if self.clustering.mock_dimensions < 1:
            problems.append("clustering.mock_dimensions")
        if self.ingestion.max_upload_mb <= 0:
            problems.append("ingestion.max_upload_mb")
        if self.log_mode not in self.LOG_MODES:
            problems.append("LOG_MODE")

        if problems:
            raise ConfigurationError(
                f"Invalid settings: {', '.join(problems)}",
                missing_keys=problems
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to avoid recreating settings on each call.
    """
    return Settings()
