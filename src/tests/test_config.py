"""Tests for Settings."""

import pytest

from jaeger_simplejson.config import ConfigError, Settings


class TestSettingsFromEnv:
    """Tests for Settings.from_env()."""

    def test_defaults(self):
        """Test that only the base URL is required."""
        settings = Settings.from_env({"JAEGER_BASE_URL": "http://jaeger:16686"})

        assert settings.base_url == "http://jaeger:16686"
        assert settings.link_url == "http://jaeger:16686"
        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.request_timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.log_file is None

    def test_all_values(self):
        settings = Settings.from_env(
            {
                "JAEGER_BASE_URL": "http://jaeger:16686/",
                "JAEGER_LINK_URL": "https://tracing.example.com/",
                "API_HOST": "127.0.0.1",
                "API_PORT": "9000",
                "JAEGER_TIMEOUT": "5",
                "LOG_LEVEL": "debug",
                "LOG_FILE": "/tmp/bridge.log",
            }
        )

        assert settings.base_url == "http://jaeger:16686"
        assert settings.link_url == "https://tracing.example.com"
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000
        assert settings.request_timeout == 5.0
        assert settings.log_level == "debug"
        assert settings.log_file == "/tmp/bridge.log"

    def test_missing_base_url(self):
        with pytest.raises(ConfigError, match="JAEGER_BASE_URL must be set"):
            Settings.from_env({})

    def test_blank_base_url(self):
        with pytest.raises(ConfigError):
            Settings.from_env({"JAEGER_BASE_URL": "  "})

    @pytest.mark.parametrize("url", ["jaeger:16686", "ftp://jaeger", "http://"])
    def test_invalid_url(self, url):
        with pytest.raises(ConfigError):
            Settings.from_env({"JAEGER_BASE_URL": url})

    def test_invalid_link_url(self):
        with pytest.raises(ConfigError):
            Settings.from_env(
                {"JAEGER_BASE_URL": "http://jaeger", "JAEGER_LINK_URL": "nope"}
            )

    def test_invalid_port(self):
        with pytest.raises(ConfigError):
            Settings.from_env({"JAEGER_BASE_URL": "http://jaeger", "API_PORT": "http"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("JAEGER_BASE_URL", "http://from-env:16686")
        monkeypatch.delenv("JAEGER_LINK_URL", raising=False)
        assert Settings.from_env().link_url == "http://from-env:16686"
