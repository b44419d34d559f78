"""
polyglot_ast - syntax trees spanning multiple languages.

Builds one navigable tree out of a program whose parts call into each other
through GraalVM-style interop calls (``polyglot.eval``, ``Polyglot.evalFile``,
``polyglot_eval_file``, ...), then walks it with a zipper that crosses from a
call site into the evaluated code transparently.

Supported languages: Python, JavaScript, Java and C.
"""

from __future__ import annotations

from polyglot_ast.adapters.treesitter import CallKind, Language, LanguageAdapter, get_adapter
from polyglot_ast.common.exceptions import ConfigurationError, InvalidArgumentError, PolyglotError
from polyglot_ast.common.logging import Diagnostic, DiagnosticCollector, DiagnosticKind
from polyglot_ast.common.text_utils import strip_quotes
from polyglot_ast.services.config_models import PolyglotSettings
from polyglot_ast.tree import (
    CallSite,
    CallSiteCollector,
    PolyglotProcessor,
    PolyglotTree,
    PolyglotZipper,
    TreePrinter,
)

__version__ = "0.1.0"

__all__ = [
    "CallKind",
    "CallSite",
    "CallSiteCollector",
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "InvalidArgumentError",
    "Language",
    "LanguageAdapter",
    "PolyglotError",
    "PolyglotProcessor",
    "PolyglotSettings",
    "PolyglotTree",
    "PolyglotZipper",
    "TreePrinter",
    "get_adapter",
    "strip_quotes",
]
