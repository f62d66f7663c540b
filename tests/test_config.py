"""Tests for configuration and initialization."""

from __future__ import annotations

from unittest.mock import patch

import pytest

import klaw_outcome
from klaw_outcome import OutcomeConfig, get_config, init


class TestOutcomeConfig:
    def test_default_values(self) -> None:
        config = OutcomeConfig()
        assert config.log_level is None
        assert config.json_logs is True
        assert config.trace_runs is False

    def test_config_is_frozen(self) -> None:
        config = OutcomeConfig()
        with pytest.raises(AttributeError):
            config.trace_runs = True  # type: ignore[misc]


class TestGetConfig:
    def test_defaults_without_init(self) -> None:
        assert get_config() == OutcomeConfig()

    def test_reads_environment_without_init(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_OUTCOME_TRACE', 'yes')
        monkeypatch.setenv('KLAW_OUTCOME_JSON_LOGS', 'false')
        monkeypatch.setenv('KLAW_OUTCOME_LOG_LEVEL', 'DEBUG')
        assert get_config() == OutcomeConfig(log_level='DEBUG', json_logs=False, trace_runs=True)

    def test_unknown_flag_value_uses_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_OUTCOME_TRACE', 'maybe')
        assert get_config().trace_runs is False


class TestInit:
    def test_init_returns_and_stores_config(self) -> None:
        config = init(trace_runs=True)
        assert config.trace_runs is True
        assert get_config() is config

    def test_arguments_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_OUTCOME_TRACE', '1')
        assert init(trace_runs=False).trace_runs is False

    def test_environment_fills_missing_arguments(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_OUTCOME_TRACE', '1')
        assert init().trace_runs is True

    def test_log_level_configures_logging(self) -> None:
        with patch('klaw_outcome._config.configure_logging') as configure:
            init(log_level='DEBUG', json_logs=False)
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_no_log_level_leaves_logging_alone(self) -> None:
        with patch('klaw_outcome._config.configure_logging') as configure:
            init()
        configure.assert_not_called()

    def test_reset(self) -> None:
        init(trace_runs=True)
        klaw_outcome._config.reset()
        assert get_config().trace_runs is False
