"""Python (GraalPy) interop adapter.

GraalPy exposes a single ``polyglot.eval`` that tells inline code and files
apart through mandatory keyword arguments::

    polyglot.eval(language="js", string="console.log(42)")
    polyglot.eval(language="ruby", path="lib/helper.rb")
    polyglot.import_value(name="x")
    polyglot.export_value(name="x", value=x)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import tree_sitter

from ..models import EvalArgs, Language
from . import register_adapter
from .base import LanguageAdapter


class PythonAdapter(LanguageAdapter):
    """Adapter for Python source parsed with tree-sitter-python."""

    call_node_kind = "call"
    callee_index = 0
    callee_node_kind = "attribute"

    eval_calls = frozenset({"polyglot.eval"})
    import_calls = frozenset({"polyglot.import_value"})
    export_calls = frozenset({"polyglot.export_value"})

    positional_args = False
    string_kinds = frozenset({"string"})

    code_arg = "string"
    path_arg = "path"
    lang_arg = "language"

    @property
    def language(self) -> Language:
        return Language.PYTHON

    def get_language(self) -> Any:
        """Return the tree-sitter Python language."""
        import tree_sitter_python

        return tree_sitter_python.language()

    def get_args(self, node: tree_sitter.Node) -> EvalArgs | None:
        # call -> argument_list -> keyword_argument -> identifier
        first = self.child_at(node, 1, 1)
        second = self.child_at(node, 1, 3)
        if first is None or second is None:
            return None
        if first.type != "keyword_argument" or second.type != "keyword_argument":
            return None

        first_name = self.child_at(first, 0)
        second_name = self.child_at(second, 0)
        if first_name is None or second_name is None:
            return None
        return EvalArgs(first_name, second_name)

    def get_binding_node(
        self, node: tree_sitter.Node, source: bytes
    ) -> tree_sitter.Node | None:
        """Return the ``name=`` keyword value, or the first positional string."""
        arguments = self.find_child_by_type(node, "argument_list")
        if arguments is None:
            return None

        for child in arguments.named_children:
            if child.type != "keyword_argument":
                continue
            name = self.child_at(child, 0)
            value = self.child_at(child, 2)
            if name is not None and value is not None and self.get_node_text(name, source) == "name":
                return value if value.type in self.string_kinds else None

        for child in arguments.named_children:
            if child.type in self.string_kinds:
                return child
            if child.type != "keyword_argument":
                # positional, but not a literal
                return None
        return None


# Register this adapter
register_adapter(Language.PYTHON, PythonAdapter)
