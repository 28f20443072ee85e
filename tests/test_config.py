"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from library_api.config import DatabaseConfig, Settings


class TestSettings:
    """Tests for Settings loading."""

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("DBUSER", "librarian")
        monkeypatch.setenv("DBPASS", "s3cret")

        settings = Settings(_env_file=None)

        assert settings.database.user == "librarian"
        assert settings.database.password == "s3cret"

    def test_defaults(self, monkeypatch):
        for name in ("DBUSER", "DBPASS", "HOST", "PORT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.host == "localhost"
        assert settings.port == 8080
        assert settings.log_level == "INFO"
        assert settings.database.user == ""

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_password_not_in_repr(self, monkeypatch):
        monkeypatch.setenv("DBPASS", "s3cret")

        settings = Settings(_env_file=None)

        assert "s3cret" not in repr(settings)
        assert "s3cret" not in repr(settings.database)


class TestDatabaseConfig:
    """Tests for the fixed database location."""

    def test_fixed_location(self):
        config = DatabaseConfig()

        assert config.host == "localhost"
        assert config.port == 3306
        assert config.name == "library"

    def test_url(self):
        config = DatabaseConfig(user="librarian", password="p@ss/word")

        url = config.url

        assert url.drivername == "mysql+pymysql"
        assert url.username == "librarian"
        assert url.password == "p@ss/word"
        assert url.host == "localhost"
        assert url.port == 3306
        assert url.database == "library"

    def test_url_without_credentials(self):
        url = DatabaseConfig().url

        assert url.username is None
        assert url.password is None

    def test_frozen(self):
        config = DatabaseConfig()

        with pytest.raises(ValidationError):
            config.port = 3307
