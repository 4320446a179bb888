"""
Tests for Settings and get_settings.
"""

from modelzoo_spec.core.config import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self):
        """Test the built-in defaults."""
        settings = Settings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FILE == ""
        assert settings.READER_PROFILE == "current"
        assert settings.UPGRADE_ON_READ is False
        assert settings.MODEL_FILE_NAME == "model.yaml"

    def test_environment_overrides(self, monkeypatch):
        """Test that MODELZOO_-prefixed variables override defaults."""
        monkeypatch.setenv("MODELZOO_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MODELZOO_UPGRADE_ON_READ", "true")

        settings = Settings()

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.UPGRADE_ON_READ is True

    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Test that plain variable names do not leak in."""
        monkeypatch.setenv("READER_PROFILE", "legacy")

        assert Settings().READER_PROFILE == "current"

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one instance until reset."""
        first = get_settings()

        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
