from tracker.core.config import Settings, get_settings


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert settings.log_level == "INFO"
    assert settings.otel_enabled is False
    assert settings.otel_exporter_otlp_endpoint is None


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TRACKER_OTEL_ENABLED", "true")
    monkeypatch.setenv("TRACKER_OTEL_EXPORTER_OTLP_HEADERS", "api-key=secret")

    settings = Settings(_env_file=None)

    assert settings.log_level == "debug"
    assert settings.otel_enabled is True
    assert settings.otel_exporter_otlp_headers == "api-key=secret"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
