"""
QuirkNotes Backend — Settings Tests
=====================================

What:  Validation and parsing rules of the pydantic-settings Settings class.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from quirknotes.config import Settings


class TestSettings:

    def test_defaults_listen_on_4000(self, monkeypatch):
        monkeypatch.delenv("BACKEND_PORT", raising=False)
        assert Settings().backend_port == 4000

    def test_log_level_is_upper_cased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(PydanticValidationError):
            Settings()

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://example.com,")
        assert Settings().cors_origins_list == ["http://localhost:3000", "http://example.com"]

    def test_port_range_enforced(self, monkeypatch):
        monkeypatch.setenv("BACKEND_PORT", "80")
        with pytest.raises(PydanticValidationError):
            Settings()

    def test_access_log_skips_health_by_default(self, monkeypatch):
        monkeypatch.delenv("ACCESS_LOG_SKIP_PATHS", raising=False)
        assert Settings().access_log_skip_paths_list == ["/health"]

    def test_access_log_skip_paths_split(self, monkeypatch):
        monkeypatch.setenv("ACCESS_LOG_SKIP_PATHS", "/health, /docs")
        assert Settings().access_log_skip_paths_list == ["/health", "/docs"]
