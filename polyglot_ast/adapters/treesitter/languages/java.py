"""Java (GraalVM polyglot API) interop adapter.

Warning: support is limited to string literal arguments::

    context.eval("python", "print(42)");
    context.getBindings("js").getMember("x");
    context.getBindings("js").putMember("x", 42);
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import tree_sitter

from ..models import EvalArgs, Language
from . import register_adapter
from .base import LanguageAdapter


class JavaAdapter(LanguageAdapter):
    """Adapter for Java source parsed with tree-sitter-java."""

    # object . name argument_list
    call_node_kind = "method_invocation"
    callee_index = 2
    callee_node_kind = "identifier"

    eval_calls = frozenset({"eval"})
    import_calls = frozenset({"getMember"})
    export_calls = frozenset({"putMember"})

    positional_args = True
    arguments_index = 3
    string_kinds = frozenset({"string_literal"})

    @property
    def language(self) -> Language:
        return Language.JAVA

    def get_language(self) -> Any:
        """Return the tree-sitter Java language."""
        import tree_sitter_java
        return tree_sitter_java.language()

    def get_args(self, node: tree_sitter.Node) -> EvalArgs | None:
        language = self.child_at(node, 3, 1)
        code = self.child_at(node, 3, 3)
        if language is None or code is None:
            return None
        return EvalArgs(language, code)


# Register this adapter
register_adapter(Language.JAVA, JavaAdapter)
