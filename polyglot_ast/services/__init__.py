"""Services layer - configuration shared by the library and the CLI."""

from __future__ import annotations

from .config_models import PolyglotSettings

__all__ = ["PolyglotSettings"]
