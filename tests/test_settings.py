import logging

import pytest

from config.settings import ClusteringSettings, Settings, get_settings
from core.exceptions import ConfigurationError
from core.logger import get_logger, setup_logger


@pytest.fixture
def base_logger():
    logger = logging.getLogger("keyword_intent")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_MODE", raising=False)
    settings = Settings()

    assert settings.clustering.cluster_size == 2
    assert settings.clustering.mock_dimensions == 50
    assert settings.ingestion.allowed_extensions == (".csv", ".txt")
    assert settings.ingestion.max_upload_bytes == 50 * 1024 * 1024
    assert settings.display.preview_count == 3
    assert settings.log_mode == "info"
    settings.validate()


def test_log_mode_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_MODE", " DEBUG ")
    assert Settings().log_mode == "debug"


def test_validate_rejects_bad_values(monkeypatch):
    monkeypatch.setenv("LOG_MODE", "verbose")
    settings = Settings(clustering=ClusteringSettings(cluster_size=0))

    with pytest.raises(ConfigurationError) as exc:
        settings.validate()

    assert exc.value.missing_keys == ["clustering.cluster_size", "LOG_MODE"]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logger_levels(base_logger):
    assert setup_logger("debug").level == logging.DEBUG
    assert setup_logger("production").level == logging.ERROR
    assert setup_logger("info").level == logging.INFO


def test_setup_logger_adds_one_handler(base_logger):
    setup_logger("info")
    setup_logger("info")
    assert len(base_logger.handlers) == 1


def test_get_logger_names():
    assert get_logger("labeling").name == "keyword_intent.labeling"
    assert get_logger().name == "keyword_intent"
