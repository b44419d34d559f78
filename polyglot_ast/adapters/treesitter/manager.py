"""Tree-sitter parser manager for polyglot trees.

Loads the grammar of each supported language once and turns source bytes into
tree-sitter trees. A grammar that cannot be loaded is an installation problem
and raises ConfigurationError; a parse that yields no tree is reported as None.
"""

from __future__ import annotations

import logging
import os

import tree_sitter

from polyglot_ast.common.exceptions import ConfigurationError

from .languages import LanguageAdapter, supported_languages
from .models import Language

logger = logging.getLogger(__name__)


class ParserManager:
    """Cache of configured tree-sitter parsers, one per language."""

    # Extension to language mapping
    EXTENSION_MAP: dict[str, Language] = {
        ".py": Language.PYTHON,
        ".pyw": Language.PYTHON,
        ".js": Language.JAVASCRIPT,
        ".mjs": Language.JAVASCRIPT,
        ".cjs": Language.JAVASCRIPT,
        ".java": Language.JAVA,
        ".c": Language.C,
        ".h": Language.C,
    }

    def __init__(self) -> None:
        """Initialize the manager."""
        self._parsers: dict[Language, tree_sitter.Parser] = {}

    def parse(self, source: bytes, adapter: LanguageAdapter) -> tree_sitter.Tree | None:
        """Parse source code into a tree-sitter tree.

        Args:
            source: Source code as bytes
            adapter: Adapter of the language ``source`` is written in

        Returns:
            Parsed tree or None on failure

        Raises:
            ConfigurationError: If the grammar cannot be loaded
        """
        parser = self._get_parser(adapter)
        try:
            return parser.parse(source)
        except Exception as e:
            logger.debug("tree-sitter failed to parse %s source: %s", adapter.language_name, e)
            return None

    @classmethod
    def detect_language(cls, file_path: str | os.PathLike[str]) -> Language | None:
        """Detect language from file extension.

        Args:
            file_path: Path to the file

        Returns:
            Language or None if not detected
        """
        ext = os.path.splitext(os.fspath(file_path))[1].lower()
        return cls.EXTENSION_MAP.get(ext)

    @classmethod
    def get_supported_languages(cls) -> list[str]:
        """Get list of supported languages."""
        return supported_languages()

    # =========================================================================
    # Private helper methods
    # =========================================================================

    def _get_parser(self, adapter: LanguageAdapter) -> tree_sitter.Parser:
        """Get or create a parser for the adapter's language.

        Args:
            adapter: Language adapter (to get the grammar)

        Returns:
            Configured tree-sitter parser
        """
        language = adapter.language
        if language not in self._parsers:
            try:
                raw_language = adapter.get_language()
                # Wrap in Language object (tree-sitter 0.24+ API)
                ts_language = tree_sitter.Language(raw_language)
                parser = tree_sitter.Parser(ts_language)
            except Exception as e:
                raise ConfigurationError(
                    f"Error loading the {language.value} grammar into the parser; "
                    "check that tree-sitter and the grammar package versions are compatible"
                ) from e
            self._parsers[language] = parser

        return self._parsers[language]


__all__ = ["ParserManager"]
