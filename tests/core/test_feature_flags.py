"""Tests for Settings and MockModeFlags resolution."""

import pytest

from ideamock.core.config import Settings
from ideamock.core.exceptions import MockConfigurationError
from ideamock.core.feature_flags import MockModeFlags, normalize_scenario
from ideamock.schemas.mock import MockServiceConfig, TestScenario

pytestmark = pytest.mark.unit


def _flags(**values) -> MockModeFlags:
    values.setdefault("environment", "development")
    return MockModeFlags(Settings(_env_file=None, **values))


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("NODE_ENV", "ENVIRONMENT", "FF_USE_MOCK_API", "FF_MIN_LATENCY", "FF_MAX_LATENCY"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.ff_use_mock_api is False
        assert settings.ff_min_latency == 500
        assert settings.ff_max_latency == 2000

    def test_reads_flags_from_environment(self, monkeypatch):
        monkeypatch.setenv("FF_USE_MOCK_API", "true")
        monkeypatch.setenv("FF_MOCK_SCENARIO", "api_error")
        monkeypatch.setenv("FF_MIN_LATENCY", "10")
        monkeypatch.setenv("NODE_ENV", "production")

        settings = Settings(_env_file=None)

        assert settings.ff_use_mock_api is True
        assert settings.ff_mock_scenario == "api_error"
        assert settings.ff_min_latency == 10
        assert settings.is_production is True


# ---------------------------------------------------------------------------
# MockModeFlags
# ---------------------------------------------------------------------------


class TestMockModeFlags:
    def test_mock_mode_follows_flag(self):
        assert _flags(ff_use_mock_api=True).is_mock_mode_enabled() is True
        assert _flags(ff_use_mock_api=False).is_mock_mode_enabled() is False

    def test_production_guard(self):
        assert _flags(ff_use_mock_api=True, environment="production").is_mock_mode_enabled() is False

    def test_production_override(self):
        flags = _flags(ff_use_mock_api=True, environment="production", allow_test_mode_in_production=True)

        assert flags.is_mock_mode_enabled() is True
        assert flags.validate_environment().is_valid is True

    def test_service_config_from_flags(self):
        config = _flags(
            ff_mock_scenario="partial_response",
            ff_mock_variability=True,
            ff_simulate_latency=True,
            ff_min_latency=50,
            ff_max_latency=100,
            ff_log_mock_requests=True,
        ).get_mock_service_config()

        assert config == MockServiceConfig(
            default_scenario=TestScenario.PARTIAL_RESPONSE,
            enable_variability=True,
            simulate_latency=True,
            min_latency=50,
            max_latency=100,
            log_requests=True,
        )

    def test_unknown_scenario_falls_back_to_success(self):
        config = _flags(ff_mock_scenario="chaos").get_mock_service_config()

        assert config.default_scenario == TestScenario.SUCCESS

    def test_inverted_latency_range_raises(self):
        with pytest.raises(MockConfigurationError) as exc_info:
            _flags(ff_min_latency=900, ff_max_latency=100).get_mock_service_config()

        assert exc_info.value.code == MockConfigurationError.INVALID_LATENCY_RANGE

    def test_all_flags(self):
        flags = _flags(ff_use_mock_api=True).get_all_flags()

        assert flags["FF_USE_MOCK_API"] is True
        assert flags["FF_MIN_LATENCY"] == 500
        assert set(flags) == {
            "FF_USE_MOCK_API",
            "FF_MOCK_SCENARIO",
            "FF_MOCK_VARIABILITY",
            "FF_SIMULATE_LATENCY",
            "FF_MIN_LATENCY",
            "FF_MAX_LATENCY",
            "FF_LOG_MOCK_REQUESTS",
        }


class TestValidateEnvironment:
    def test_valid_environment(self):
        result = _flags(ff_use_mock_api=True).validate_environment()

        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_mock_mode_in_production_is_an_error(self):
        result = _flags(ff_use_mock_api=True, environment="production").validate_environment()

        assert result.is_valid is False
        assert "production" in result.errors[0]

    def test_invalid_scenario_is_a_warning(self):
        result = _flags(ff_use_mock_api=True, ff_mock_scenario="chaos").validate_environment()

        assert result.is_valid is True
        assert "chaos" in result.warnings[0]

    def test_inverted_latency_is_an_error(self):
        result = _flags(ff_min_latency=10, ff_max_latency=5).validate_environment()

        assert result.is_valid is False


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("timeout", TestScenario.TIMEOUT),
        (" RATE_LIMIT ", TestScenario.RATE_LIMIT),
        ("", TestScenario.SUCCESS),
        (None, TestScenario.SUCCESS),
        ("bogus", TestScenario.SUCCESS),
    ],
)
def test_normalize_scenario(raw, expected):
    assert normalize_scenario(raw) == expected


def test_service_config_rejects_inverted_range():
    with pytest.raises(MockConfigurationError):
        MockServiceConfig(min_latency=200, max_latency=100)
