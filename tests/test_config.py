"""Tests for configuration and initialization."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from okerr import ResultConfig, get_config, init


class TestResultConfig:
    """Tests for the ResultConfig dataclass."""

    def test_default_values(self) -> None:
        """ResultConfig defaults to catching Exception with logging off."""
        config = ResultConfig()
        assert config.catch == (Exception,)
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        """ResultConfig instances are immutable."""
        config = ResultConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


@pytest.mark.usefixtures('clean_config')
class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_without_init(self) -> None:
        """The library works without init()."""
        assert get_config() == ResultConfig()

    def test_init_returns_installed_config(self) -> None:
        """init() returns the config that get_config() then serves."""
        config = init(catch=(ValueError, KeyError))
        assert config.catch == (ValueError, KeyError)
        assert get_config() is config

    def test_init_defaults(self) -> None:
        """init() without arguments installs the defaults."""
        assert init() == ResultConfig()

    def test_init_accepts_lowercase_level(self) -> None:
        """Log level names are case-insensitive."""
        assert init(log_level='debug').log_level == 'DEBUG'

    def test_init_rejects_unknown_level(self) -> None:
        """An unknown log level is a ValueError."""
        with pytest.raises(ValueError, match='Unknown log level'):
            init(log_level='LOUD')

    def test_init_rejects_non_exception_catch(self) -> None:
        """A catch entry that is not an exception class is a TypeError."""
        with pytest.raises(TypeError, match='exception classes'):
            init(catch=(ValueError, str))  # type: ignore[arg-type]

    def test_init_rejects_empty_catch(self) -> None:
        """An empty catch set is a ValueError."""
        with pytest.raises(ValueError, match='at least one'):
            init(catch=())

    def test_init_json_logs_flag(self) -> None:
        """json_logs is recorded on the config."""
        assert init(log_level='INFO', json_logs=False).json_logs is False

    def test_init_sets_package_level(self) -> None:
        """init() sets the level on the okerr logger, not on the root logger."""
        root_level = logging.getLogger().level
        init(log_level='WARNING')
        assert logging.getLogger('okerr').level == logging.WARNING
        assert logging.getLogger().level == root_level


@pytest.mark.usefixtures('clean_config')
class TestEnvironmentLogLevel:
    """Tests for OKERR_LOG_LEVEL detection."""

    def test_env_level_used_when_not_given(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """OKERR_LOG_LEVEL supplies the level when none is passed."""
        monkeypatch.setenv('OKERR_LOG_LEVEL', 'info')
        assert init().log_level == 'INFO'

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit log_level overrides OKERR_LOG_LEVEL."""
        monkeypatch.setenv('OKERR_LOG_LEVEL', 'INFO')
        assert init(log_level='ERROR').log_level == 'ERROR'

    def test_unknown_env_level_disables_logging(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unknown OKERR_LOG_LEVEL warns and leaves logging off."""
        monkeypatch.setenv('OKERR_LOG_LEVEL', 'chatty')
        with caplog.at_level(logging.WARNING):
            config = init()
        assert config.log_level is None
        assert 'OKERR_LOG_LEVEL' in caplog.text

    def test_empty_env_is_silent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty OKERR_LOG_LEVEL leaves logging off."""
        monkeypatch.setenv('OKERR_LOG_LEVEL', '')
        assert init().log_level is None
