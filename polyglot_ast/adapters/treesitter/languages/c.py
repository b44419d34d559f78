"""C (GraalVM LLVM runtime) interop adapter.

Calls are plain functions from ``graalvm/llvm/polyglot.h``::

    polyglot_eval("python", "print(42)");
    polyglot_eval_file("llvm", "hello.ll");
    polyglot_import("x");
    polyglot_export("x", x);
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import tree_sitter

from ..models import EvalArgs, Language
from . import register_adapter
from .base import LanguageAdapter


class CAdapter(LanguageAdapter):
    """Adapter for C source parsed with tree-sitter-c."""

    call_node_kind = "call_expression"
    callee_index = 0
    callee_node_kind = "identifier"

    eval_calls = frozenset({"polyglot_eval", "polyglot_eval_file"})
    import_calls = frozenset({"polyglot_import"})
    export_calls = frozenset({"polyglot_export"})

    positional_args = True
    string_kinds = frozenset({"string_literal"})

    code_eval = "polyglot_eval"
    code_eval_file = "polyglot_eval_file"

    @property
    def language(self) -> Language:
        return Language.C

    def get_language(self) -> Any:
        """Return the tree-sitter C language."""
        import tree_sitter_c

        return tree_sitter_c.language()

    def get_args(self, node: tree_sitter.Node) -> EvalArgs | None:
        call_form = self.child_at(node, 0)
        language = self.child_at(node, 1, 1)
        payload = self.child_at(node, 1, 3)
        if call_form is None or language is None or payload is None:
            return None
        return EvalArgs(language, payload, call_form)


# Register this adapter
register_adapter(Language.C, CAdapter)
