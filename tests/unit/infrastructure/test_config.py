"""Unit tests for src/infrastructure/config.py.

Tests cover Settings defaults, env var override, and validation.
"""

import pytest
from pydantic import ValidationError

from src.infrastructure.config import Settings, settings


def test_settings_default_benchmark_is_sp500():
    assert Settings().benchmark_ticker == "^GSPC"


def test_settings_default_risk_free_rate():
    assert Settings().risk_free_rate == 0.02


def test_settings_default_retry_policy():
    s = Settings()
    assert s.max_attempts == 3
    assert s.retry_delay_seconds == pytest.approx(0.3)


def test_settings_default_history_cache_is_fifteen_minutes():
    assert Settings().history_cache_ttl_seconds == 900


def test_settings_reads_benchmark_from_env(monkeypatch):
    monkeypatch.setenv("BENCHMARK_TICKER", "^FCHI")
    assert Settings().benchmark_ticker == "^FCHI"


def test_settings_reads_risk_free_rate_from_env(monkeypatch):
    monkeypatch.setenv("RISK_FREE_RATE", "0.045")
    assert Settings().risk_free_rate == pytest.approx(0.045)


def test_settings_risk_free_rate_at_minus_one_raises():
    with pytest.raises(ValidationError):
        Settings(risk_free_rate=-1.0)


def test_settings_zero_attempts_raises():
    with pytest.raises(ValidationError):
        Settings(max_attempts=0)


def test_module_settings_instance():
    assert isinstance(settings, Settings)
