"""Unit tests for Settings."""

from circle.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_development_origins(self, monkeypatch):
        """Should allow the local Vite dev server by default."""
        monkeypatch.setenv("ENVIRONMENT", "development")

        settings = Settings()

        assert "http://localhost:5173" in settings.allowed_origins
        assert "http://localhost:3000" in settings.allowed_origins

    def test_production_origin_uses_https(self, monkeypatch):
        """Should derive an https frontend origin outside development."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("CORS__FRONTEND_HOST", "circle.example")

        settings = Settings()

        assert settings.allowed_origins[0] == "https://circle.example"

    def test_nested_database_url(self, monkeypatch):
        """Should read nested values with the double underscore delimiter."""
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        assert Settings().database_url == "postgresql+asyncpg://u:p@db:5432/x"
