"""
Exception hierarchy for polyglot_ast.

Only contract violations and configuration problems are raised; problems
found in the analysed program are reported as diagnostics instead.
"""

from __future__ import annotations

__all__ = [
    "PolyglotError",
    "InvalidArgumentError",
    "ConfigurationError",
]


class PolyglotError(Exception):
    """Base class for all polyglot_ast errors."""


class InvalidArgumentError(PolyglotError, ValueError):
    """Raised when an operation receives an argument it cannot handle."""

    def __init__(self, message: str = "Invalid argument received"):
        super().__init__(message)


class ConfigurationError(PolyglotError):
    """Raised when a grammar for a supported language cannot be loaded.

    This signals an installation problem (missing or incompatible grammar
    wheel), never a problem with the analysed source.
    """
