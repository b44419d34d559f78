"""Language-specific interop call adapters.

Each language has its own adapter class that knows how interop calls are
shaped in the tree-sitter parse tree for that language.
"""

from __future__ import annotations

from polyglot_ast.common.exceptions import InvalidArgumentError

from ..models import Language
from .base import LanguageAdapter

# Language registry - maps languages to adapter classes
# Populated when adapters are imported
_ADAPTER_REGISTRY: dict[Language, type[LanguageAdapter]] = {}
_BUILTINS_LOADED = False

# Spellings accepted as the target language of an evaluate call
LANGUAGE_ALIASES: dict[str, Language] = {
    "python": Language.PYTHON,
    "js": Language.JAVASCRIPT,
    "javascript": Language.JAVASCRIPT,
    "java": Language.JAVA,
    "c": Language.C,
}


def language_from_string(name: str) -> Language:
    """Map a language string as written in a program to a Language.

    Args:
        name: Language string (e.g., 'python', 'js')

    Returns:
        The matching Language

    Raises:
        InvalidArgumentError: If the string names no supported language
    """
    try:
        return LANGUAGE_ALIASES[name]
    except KeyError:
        raise InvalidArgumentError(f"Unsupported language: {name!r}") from None


def get_adapter(language: str | Language) -> LanguageAdapter | None:
    """Get an adapter instance for a language.

    Args:
        language: Language or language string (e.g., 'python', 'js')

    Returns:
        LanguageAdapter instance or None if unsupported
    """
    # Lazy import adapters to avoid loading all grammars upfront
    _ensure_adapters_loaded()

    if not isinstance(language, Language):
        language = LANGUAGE_ALIASES.get(language)
        if language is None:
            return None

    adapter_class = _ADAPTER_REGISTRY.get(language)
    if adapter_class:
        return adapter_class()
    return None


def register_adapter(language: Language, adapter_class: type[LanguageAdapter]) -> None:
    """Register a language adapter.

    Args:
        language: Language handled by the adapter
        adapter_class: Adapter class to register
    """
    _ADAPTER_REGISTRY[language] = adapter_class


def supported_languages() -> list[str]:
    """Get list of supported language names."""
    _ensure_adapters_loaded()
    return [language.value for language in _ADAPTER_REGISTRY]


def _ensure_adapters_loaded() -> None:
    """Lazy-load all language adapters."""
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    _BUILTINS_LOADED = True

    # Import all adapters - they self-register on import
    from . import c, java, javascript, python  # noqa: F401


__all__ = [
    "LANGUAGE_ALIASES",
    "LanguageAdapter",
    "get_adapter",
    "language_from_string",
    "register_adapter",
    "supported_languages",
]
