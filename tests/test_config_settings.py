"""Tests for runtime settings loading and validation."""

import pytest

from status_responder.config import ResponderSettings, SettingsLoadError, config_load_settings


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without inherited settings variables or a local `.env`."""

    monkeypatch.chdir(tmp_path)
    for field_name in ResponderSettings.model_fields:
        monkeypatch.delenv(f"STATUS_RESPONDER_{field_name.upper()}", raising=False)


def test_config_load_settings_defaults_to_port_8080_on_all_interfaces() -> None:
    """Use documented defaults when nothing is configured.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when defaults drift.
    """

    settings = config_load_settings()

    assert settings.application_port == 8080
    assert settings.application_host == "0.0.0.0"
    assert settings.environment_name == "development"
    assert settings.log_level == "info"


def test_config_load_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read settings from `STATUS_RESPONDER_*` environment variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Raises:
        AssertionError: Raised when environment values are ignored.
    """

    monkeypatch.setenv("STATUS_RESPONDER_APPLICATION_PORT", "9090")
    monkeypatch.setenv("STATUS_RESPONDER_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("STATUS_RESPONDER_ENVIRONMENT_NAME", " staging ")

    settings = config_load_settings()

    assert settings.application_port == 9090
    assert settings.log_level == "warning"
    assert settings.environment_name == "staging"


def test_config_load_settings_prefers_explicit_overrides_and_skips_none(monkeypatch: pytest.MonkeyPatch) -> None:
    """Apply explicit overrides over environment values, ignoring None."""

    monkeypatch.setenv("STATUS_RESPONDER_APPLICATION_PORT", "9090")

    settings = config_load_settings(application_port=0, application_host=None, log_level=None)

    assert settings.application_port == 0
    assert settings.application_host == "0.0.0.0"


def test_config_load_settings_reads_dotenv_file(tmp_path) -> None:
    """Read settings from `.env` in the working directory."""

    (tmp_path / ".env").write_text("STATUS_RESPONDER_APPLICATION_PORT=8181\n", encoding="utf-8")

    assert config_load_settings().application_port == 8181


@pytest.mark.parametrize(
    "overrides",
    [
        {"application_port": 70000},
        {"application_port": -1},
        {"application_host": "   "},
        {"log_level": "verbose"},
    ],
)
def test_config_load_settings_raises_settings_load_error_for_invalid_values(overrides: dict[str, object]) -> None:
    """Wrap validation failures in SettingsLoadError.

    Args:
        overrides: Invalid field values.

    Raises:
        AssertionError: Raised when invalid settings are accepted.
    """

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings(**overrides)
