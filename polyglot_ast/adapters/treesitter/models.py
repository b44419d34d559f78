"""Data models shared by the tree-sitter language adapters.

These models are language-agnostic and used across all supported languages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import tree_sitter


class Language(str, Enum):
    """The closed set of languages a polyglot tree can contain."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    JAVA = "java"
    C = "c"


class CallKind(str, Enum):
    """Interop call families, valued by the synthetic node kind they expose."""

    EVAL = "polyglot_eval_call"
    IMPORT = "polyglot_import_call"
    EXPORT = "polyglot_export_call"
    NONE = "none"


@dataclass(frozen=True)
class EvalArgs:
    """Raw argument nodes of an evaluate call.

    For positional languages ``first`` is the language literal and ``second``
    the payload literal; ``call_form`` identifies the inline/file variant when
    the language has two. For name-tagged languages both nodes are argument
    names whose role is only known after reading them.
    """

    first: tree_sitter.Node
    second: tree_sitter.Node
    call_form: tree_sitter.Node | None = None


@dataclass(frozen=True)
class EvalTarget:
    """What an evaluate call asks for: a language and either code or a file."""

    language: str
    code: str | None = None
    path: Path | None = None

    @property
    def is_file(self) -> bool:
        return self.code is None and self.path is not None


__all__ = [
    "Language",
    "CallKind",
    "EvalArgs",
    "EvalTarget",
]
