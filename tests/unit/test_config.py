"""
Unit tests for application settings.
"""

from renewdesk.config import DEFAULT_ALLOWED_HOSTS, DEFAULT_CORS_ORIGINS, Settings, get_settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.api_prefix == "/api/v1"
        assert settings.latency_list == 0.5
        assert settings.latency_get == 0.3
        assert settings.expiring_soon_days == 30
        assert settings.urgent_days == 7
        assert settings.recent_notifications_limit == 3

    def test_cors_origins_from_comma_separated_string(self):
        settings = Settings(cors_origins="https://a.example, https://b.example")

        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_blank_cors_origins_fall_back_to_defaults(self):
        assert Settings(cors_origins="").cors_origins == DEFAULT_CORS_ORIGINS

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LATENCY_LIST", "0")

        settings = Settings()

        assert settings.is_production
        assert not settings.is_development
        assert settings.latency_list == 0

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_allowed_hosts_from_comma_separated_string(self):
        settings = Settings(allowed_hosts="api.example.com, *.example.com")

        assert settings.allowed_hosts == ["api.example.com", "*.example.com"]
        assert Settings(allowed_hosts="").allowed_hosts == DEFAULT_ALLOWED_HOSTS
