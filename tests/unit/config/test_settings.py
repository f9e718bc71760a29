import logging

import pytest
from rich.logging import RichHandler

from bloomkit.config.log_setup import configure_logging
from bloomkit.config.settings import FilterSettings, load_settings
from bloomkit.errors import InvalidParameters


class TestFilterSettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings.default_capacity == 100000
        assert settings.default_error_rate == 0.01
        assert settings.salt == b""
        assert settings.max_workers >= 1
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self) -> None:
        settings = load_settings(
            {
                "BLOOMKIT_DEFAULT_CAPACITY": "2500",
                "BLOOMKIT_DEFAULT_ERROR_RATE": "0.001",
                "BLOOMKIT_SALT": "deadbeef",
                "BLOOMKIT_PARALLEL_THRESHOLD": "50",
                "BLOOMKIT_MAX_WORKERS": "3",
                "BLOOMKIT_LOG_LEVEL": "debug",
                "UNRELATED": "ignored",
            }
        )
        assert settings.default_capacity == 2500
        assert settings.default_error_rate == 0.001
        assert settings.salt == b"\xde\xad\xbe\xef"
        assert settings.parallel_threshold == 50
        assert settings.max_workers == 3
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(
        "env",
        [
            {"BLOOMKIT_DEFAULT_CAPACITY": "lots"},
            {"BLOOMKIT_DEFAULT_CAPACITY": "0"},
            {"BLOOMKIT_DEFAULT_ERROR_RATE": "1.0"},
            {"BLOOMKIT_SALT": "not-hex"},
            {"BLOOMKIT_MAX_WORKERS": "0"},
            {"BLOOMKIT_PARALLEL_THRESHOLD": "-1"},
        ],
    )
    def test_invalid_environment(self, env) -> None:
        with pytest.raises(InvalidParameters):
            load_settings(env)

    def test_direct_validation(self) -> None:
        with pytest.raises(InvalidParameters):
            FilterSettings(default_error_rate=0)


class TestConfigureLogging:
    def test_installs_single_rich_handler(self, clean_bloomkit_logger) -> None:
        configure_logging("info")
        logger = configure_logging(logging.DEBUG)
        assert logger is clean_bloomkit_logger
        assert logger.level == logging.DEBUG
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
