"""Tests for shared/config.py."""

from shared.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Should fall back to defaults when no environment is set."""
        for name in (
            "SPARK_APPROVE_CLEARS_REQUEST",
            "SPARK_SESSION_COOKIE_NAME",
            "SPARK_ASSISTANT_TOKEN_INTERVAL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.app_name == "Spark API"
        assert settings.approve_clears_request is False
        assert settings.session_cookie_name == "sb-access-token"
        assert settings.assistant_token_interval == 0.35

    def test_reads_prefixed_environment(self, monkeypatch):
        """Should read SPARK_-prefixed variables."""
        monkeypatch.setenv("SPARK_SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("SPARK_APPROVE_CLEARS_REQUEST", "true")
        monkeypatch.setenv("SPARK_ASSISTANT_TOKEN_INTERVAL", "0.01")

        settings = Settings(_env_file=None)

        assert settings.supabase_url == "https://test.supabase.co"
        assert settings.approve_clears_request is True
        assert settings.assistant_token_interval == 0.01

    def test_ignores_unprefixed_environment(self, monkeypatch):
        """Unprefixed names should not leak into settings."""
        monkeypatch.delenv("SPARK_SUPABASE_URL", raising=False)
        monkeypatch.setenv("SUPABASE_URL", "https://other.supabase.co")

        settings = Settings(_env_file=None)

        assert settings.supabase_url == ""


class TestGetSettings:
    def test_is_cached(self):
        """Should return the same instance on repeated calls."""
        assert get_settings() is get_settings()
