"""
PolyglotZipper - a read-only cursor over a PolyglotTree forest.

A zipper is positioned on one node of one tree. Moving to the first child of
an evaluate call that has a linked subtree relocates the zipper to the root of
that subtree, in another tree and usually another language. Every other move
stays inside the current tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from polyglot_ast.adapters.treesitter.languages.base import child_at
from polyglot_ast.adapters.treesitter.models import CallKind, Language
from polyglot_ast.common.exceptions import InvalidArgumentError
from polyglot_ast.common.text_utils import strip_quotes

if TYPE_CHECKING:
    import tree_sitter

    from polyglot_ast.adapters.treesitter.languages import LanguageAdapter

    from .polyglot_tree import PolyglotTree

__all__ = ["Position", "PolyglotZipper"]


@dataclass(frozen=True)
class Position:
    """A node together with the tree that owns it."""

    tree: PolyglotTree
    node: tree_sitter.Node


class PolyglotZipper:
    """
    Cursor over a PolyglotTree, holding one of the tree's nodes.

    Zippers allow navigation of the tree and retrieval of node properties for
    analysis tasks. They never modify the trees and can be copied freely to
    explore several branches.
    """

    def __init__(self, tree: PolyglotTree, node: tree_sitter.Node | None = None):
        self._position = Position(tree, node if node is not None else tree.root_node)

    @classmethod
    def from_tree(cls, tree: PolyglotTree) -> PolyglotZipper:
        """Return a new zipper for the given tree, located at the root."""
        return cls(tree)

    def copy(self) -> PolyglotZipper:
        return PolyglotZipper(self.tree, self.node)

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def position(self) -> Position:
        return self._position

    @property
    def tree(self) -> PolyglotTree:
        return self._position.tree

    @property
    def node(self) -> tree_sitter.Node:
        return self._position.node

    @property
    def language(self) -> Language:
        """Language of the tree the contained node belongs to."""
        return self.tree.language

    def get_lang(self) -> LanguageAdapter:
        """Get the language adapter associated with the contained node."""
        return self.tree.adapter

    # =========================================================================
    # Node properties
    # =========================================================================

    def call_kind(self) -> CallKind:
        return self.tree.call_kind(self.node)

    def is_polyglot_eval_call(self) -> bool:
        """Returns True if the contained node is a polyglot eval call."""
        return self.call_kind() is CallKind.EVAL

    def is_polyglot_import_call(self) -> bool:
        """Returns True if the contained node is a polyglot import call."""
        return self.call_kind() is CallKind.IMPORT

    def is_polyglot_export_call(self) -> bool:
        """Returns True if the contained node is a polyglot export call."""
        return self.call_kind() is CallKind.EXPORT

    def kind(self) -> str:
        """
        Get the contained node's type as a string.

        For polyglot nodes, this is one of ``"polyglot_eval_call"``,
        ``"polyglot_import_call"`` or ``"polyglot_export_call"``.
        """
        call_kind = self.call_kind()
        if call_kind is not CallKind.NONE:
            return call_kind.value
        return self.node.type

    def code(self) -> str:
        """Get the contained node's source code."""
        return self.tree.node_to_code(self.node)

    def start_position(self) -> tree_sitter.Point:
        """Get the contained node's start position as (row, column)."""
        return self.node.start_point

    def end_position(self) -> tree_sitter.Point:
        """Get the contained node's end position as (row, column)."""
        return self.node.end_point

    def get_binding_name(self) -> str | None:
        """
        Get the name bound by an import or export call.

        Returns:
            The unquoted binding name, or None when the call has no static name

        Raises:
            InvalidArgumentError: If the node is neither an import nor an export call
        """
        if self.call_kind() not in (CallKind.IMPORT, CallKind.EXPORT):
            raise InvalidArgumentError(
                f"binding name requested on a {self.kind()!r} node; "
                "only polyglot import and export calls bind names"
            )
        binding = self.get_lang().get_binding_node(self.node, self.tree.source)
        if binding is None:
            return None
        return strip_quotes(self.tree.node_to_code(binding))

    binding_name = get_binding_name

    # =========================================================================
    # Navigation
    # =========================================================================

    def goto_first_child(self) -> bool:
        """
        Move this zipper to the first child of the contained node.

        For an evaluate call with a linked subtree, the first child is the
        root of that subtree.

        Returns:
            True if the zipper moved, False if there was no child
        """
        subtree = self.tree.get_subtree(self.node)
        if subtree is not None:
            self._position = Position(subtree, subtree.root_node)
            return True

        child = child_at(self.node, 0)
        if child is None:
            return False
        self._position = Position(self.tree, child)
        return True

    def goto_next_sibling(self) -> bool:
        """
        Move this zipper to the next sibling of the contained node.

        Returns:
            True if the zipper moved, False if there was no next sibling
        """
        sibling = self.node.next_sibling
        if sibling is None:
            return False
        self._position = Position(self.tree, sibling)
        return True

    def goto_prev_sibling(self) -> bool:
        """
        Move this zipper to the previous sibling of the contained node.

        Returns:
            True if the zipper moved, False if there was no previous sibling
        """
        sibling = self.node.prev_sibling
        if sibling is None:
            return False
        self._position = Position(self.tree, sibling)
        return True

    def child(self, i: int) -> PolyglotZipper | None:
        """
        Get the zipper for the child at the given index, zero being the first.

        For an evaluate call this is the root of the linked subtree whatever
        the index, or None when no subtree was linked.
        """
        if self.is_polyglot_eval_call():
            subtree = self.tree.get_subtree(self.node)
            if subtree is None:
                return None
            return PolyglotZipper(subtree)

        child = child_at(self.node, i)
        if child is None:
            return None
        return PolyglotZipper(self.tree, child)

    def next_sibling(self) -> PolyglotZipper | None:
        """Get the zipper for the next sibling node."""
        sibling = self.node.next_sibling
        if sibling is None:
            return None
        return PolyglotZipper(self.tree, sibling)

    def prev_sibling(self) -> PolyglotZipper | None:
        """Get the zipper for the previous sibling node."""
        sibling = self.node.prev_sibling
        if sibling is None:
            return None
        return PolyglotZipper(self.tree, sibling)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolyglotZipper):
            return NotImplemented
        return self.tree is other.tree and self.node == other.node

    def __repr__(self) -> str:
        row, column = self.start_position()
        return f"<PolyglotZipper {self.language.value} {self.kind()} at {row}:{column}>"
