"""Abstract base class for language-specific interop call adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import tree_sitter

from ..models import CallKind, EvalArgs, Language


def child_at(node: tree_sitter.Node | None, *indexes: int) -> tree_sitter.Node | None:
    """Follow a chain of child indexes, returning None as soon as one is out of range.

    tree-sitter raises IndexError for an index past the last child, so every
    positional child lookup goes through here.

    Args:
        node: Starting node (None is passed through)
        *indexes: Child index at each level

    Returns:
        The node reached, or None
    """
    for index in indexes:
        if node is None or not 0 <= index < node.child_count:
            return None
        node = node.child(index)
    return node


class LanguageAdapter(ABC):
    """Abstract base class for language adapters.

    Each adapter knows what an interop call looks like in the tree-sitter
    parse tree of its language: which node kind is a call, where the callee
    sits, how the callee is spelled for each call family and how the
    arguments are laid out. Adapters are stateless.

    Every lookup fails soft: a missing child at an expected offset means
    "not a call of this kind" and yields None, never an exception.
    """

    # Shape of a call expression
    call_node_kind: str = ""
    callee_index: int = 0
    callee_node_kind: str = ""

    # Callee spellings per call family
    eval_calls: frozenset[str] = frozenset()
    import_calls: frozenset[str] = frozenset()
    export_calls: frozenset[str] = frozenset()

    # Argument conventions
    positional_args: bool = True
    arguments_index: int = 1
    string_kinds: frozenset[str] = frozenset()

    # Positional languages with an inline and a file form
    code_eval: str | None = None
    code_eval_file: str | None = None

    # Name-tagged languages
    code_arg: str | None = None
    path_arg: str | None = None
    lang_arg: str | None = None

    @property
    @abstractmethod
    def language(self) -> Language:
        """Return the Language this adapter handles."""

    @property
    def language_name(self) -> str:
        return self.language.value

    @abstractmethod
    def get_language(self) -> Any:
        """Return the raw tree-sitter grammar for this language."""

    @abstractmethod
    def get_args(self, node: tree_sitter.Node) -> EvalArgs | None:
        """Return the argument nodes of an evaluate call.

        Args:
            node: A node already recognized as an evaluate call

        Returns:
            EvalArgs or None when the expected shape is absent
        """

    # =========================================================================
    # Call recognition
    # =========================================================================

    def get_callee(self, node: tree_sitter.Node) -> tree_sitter.Node | None:
        """Return the callee node if ``node`` has this language's call shape."""
        if node.type != self.call_node_kind:
            return None
        child = child_at(node, self.callee_index)
        if child is None or child.type != self.callee_node_kind:
            return None
        return child

    def classify(self, callee_text: str) -> CallKind:
        """Classify a callee spelling into an interop call family."""
        if callee_text in self.eval_calls:
            return CallKind.EVAL
        if callee_text in self.import_calls:
            return CallKind.IMPORT
        if callee_text in self.export_calls:
            return CallKind.EXPORT
        return CallKind.NONE

    def call_kind(self, node: tree_sitter.Node, source: bytes) -> CallKind:
        """Classify a node, returning CallKind.NONE for anything but an interop call."""
        callee = self.get_callee(node)
        if callee is None:
            return CallKind.NONE
        return self.classify(self.get_node_text(callee, source))

    def get_binding_node(
        self, node: tree_sitter.Node, source: bytes
    ) -> tree_sitter.Node | None:
        """Return the node holding the binding name of an import/export call.

        The default reads the first argument and accepts it only when it is a
        string literal; a computed name has no static binding.
        """
        first = child_at(node, self.arguments_index, 1)
        if first is None or first.type not in self.string_kinds:
            return None
        return first

    # =========================================================================
    # Helper methods available to all adapters
    # =========================================================================

    def get_node_text(
        self, node: tree_sitter.Node, source: bytes, encoding: str = "utf-8"
    ) -> str:
        """Extract text content from a tree-sitter node.

        Args:
            node: Tree-sitter node
            source: Original source as bytes
            encoding: Encoding of ``source``

        Returns:
            Text content of the node
        """
        return source[node.start_byte : node.end_byte].decode(encoding, errors="replace")

    def child_at(self, node: tree_sitter.Node | None, *indexes: int) -> tree_sitter.Node | None:
        """Follow a chain of child indexes, returning None as soon as one is missing."""
        return child_at(node, *indexes)

    def find_child_by_type(
        self, node: tree_sitter.Node, type_name: str
    ) -> tree_sitter.Node | None:
        """Find first child node with given type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageAdapter):
            return NotImplemented
        return self.language == other.language

    def __hash__(self) -> int:
        return hash(self.language)


__all__ = ["LanguageAdapter", "child_at"]
