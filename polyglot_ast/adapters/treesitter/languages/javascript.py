"""JavaScript interop adapter.

GraalJS uses two functions, one for inline code and one for files, both
taking positional arguments::

    Polyglot.eval("python", "print(42)")
    Polyglot.evalFile("python", "./helper.py")
    Polyglot.import("x")
    Polyglot.export("x", x)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import tree_sitter

from ..models import EvalArgs, Language
from . import register_adapter
from .base import LanguageAdapter


class JavaScriptAdapter(LanguageAdapter):
    """Adapter for JavaScript source parsed with tree-sitter-javascript."""

    call_node_kind = "call_expression"
    callee_index = 0
    callee_node_kind = "member_expression"

    eval_calls = frozenset({"Polyglot.eval", "Polyglot.evalFile"})
    import_calls = frozenset({"Polyglot.import"})
    export_calls = frozenset({"Polyglot.export"})

    positional_args = True
    string_kinds = frozenset({"string", "template_string"})

    code_eval = "eval"
    code_eval_file = "evalFile"

    @property
    def language(self) -> Language:
        return Language.JAVASCRIPT

    def get_language(self) -> Any:
        """Return the tree-sitter JavaScript language."""
        import tree_sitter_javascript

        return tree_sitter_javascript.language()

    def get_args(self, node: tree_sitter.Node) -> EvalArgs | None:
        call_form = self.child_at(node, 0, 2)  # property name: eval / evalFile
        language = self.child_at(node, 1, 1)
        payload = self.child_at(node, 1, 3)
        if call_form is None or language is None or payload is None:
            return None
        return EvalArgs(language, payload, call_form)


# Register this adapter
register_adapter(Language.JAVASCRIPT, JavaScriptAdapter)
