"""Tests for config_models module (pydantic-settings integration)."""

from typing import Any

import pytest
from pydantic import ValidationError

from polyglot_ast.services.config_models import PolyglotSettings

# Type alias to help with BaseSettings._env_file parameter which isn't in the type signature
_PolyglotSettings: Any = PolyglotSettings


class TestPolyglotSettings:
    """Tests for PolyglotSettings."""

    def test_default_values(self):
        """Should have sensible defaults."""
        settings = _PolyglotSettings(_env_file=None)
        assert settings.max_depth == 32
        assert settings.detect_cycles is True
        assert settings.encoding == "utf-8"
        assert settings.log_level == "WARNING"

    def test_loads_from_env(self, monkeypatch):
        """Should load values from POLYGLOT_ prefixed variables."""
        monkeypatch.setenv("POLYGLOT_MAX_DEPTH", "4")
        monkeypatch.setenv("POLYGLOT_DETECT_CYCLES", "false")
        settings = _PolyglotSettings(_env_file=None)
        assert settings.max_depth == 4
        assert settings.detect_cycles is False

    def test_ignores_unprefixed_env(self, monkeypatch):
        """Should not read variables without the prefix."""
        monkeypatch.setenv("MAX_DEPTH", "4")
        settings = _PolyglotSettings(_env_file=None)
        assert settings.max_depth == 32

    def test_loads_from_env_file(self, tmp_path):
        """Should read values from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("POLYGLOT_ENCODING=latin-1\n")
        settings = _PolyglotSettings(_env_file=env_file)
        assert settings.encoding == "latin-1"

    def test_max_depth_must_be_positive(self):
        """Should reject a depth limit below one."""
        with pytest.raises(ValidationError):
            _PolyglotSettings(_env_file=None, max_depth=0)

    def test_unknown_encoding_rejected(self):
        """Should reject encodings Python does not know."""
        with pytest.raises(ValidationError):
            _PolyglotSettings(_env_file=None, encoding="not-a-codec")

    def test_log_level_normalized(self):
        """Should uppercase the log level."""
        settings = _PolyglotSettings(_env_file=None, log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        """Should reject unknown log levels."""
        with pytest.raises(ValidationError):
            _PolyglotSettings(_env_file=None, log_level="LOUD")
