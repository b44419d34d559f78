"""Tree-sitter adapter - interop call recognition across languages.

Knows how GraalVM-style interop calls look in Python, JavaScript, Java and C
parse trees, and owns the parsers for those languages.
"""

from __future__ import annotations

from .languages import (
    LanguageAdapter,
    get_adapter,
    language_from_string,
    supported_languages,
)
from .manager import ParserManager
from .models import CallKind, EvalArgs, EvalTarget, Language

__all__ = [
    "ParserManager",
    "LanguageAdapter",
    "Language",
    "CallKind",
    "EvalArgs",
    "EvalTarget",
    "get_adapter",
    "language_from_string",
    "supported_languages",
]
