"""Tests for config.py - environment-driven settings."""

from resulttype.config import Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self, monkeypatch, tmp_path):
        """Test defaults when nothing is set."""
        monkeypatch.delenv("RESULTTYPE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("RESULTTYPE_JSON_LOGS", raising=False)
        monkeypatch.delenv("RESULTTYPE_RICH_TRACEBACKS", raising=False)

        settings = Settings(_env_file=tmp_path / "missing.env")

        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.rich_tracebacks is False

    def test_env_override(self, monkeypatch):
        """Test prefixed environment variables are read."""
        monkeypatch.setenv("RESULTTYPE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RESULTTYPE_JSON_LOGS", "true")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_unprefixed_ignored(self, monkeypatch):
        """Test bare LOG_LEVEL does not leak in."""
        monkeypatch.delenv("RESULTTYPE_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert Settings().log_level == "INFO"

    def test_env_file(self, monkeypatch, tmp_path):
        """Test values are read from a .env file."""
        monkeypatch.delenv("RESULTTYPE_RICH_TRACEBACKS", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("RESULTTYPE_RICH_TRACEBACKS=1\nUNRELATED=value\n")

        settings = Settings(_env_file=env_file)

        assert settings.rich_tracebacks is True
