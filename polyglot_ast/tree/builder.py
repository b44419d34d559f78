"""
Tree builder - links evaluate-call sites to the subtrees they evaluate.

A single pre-order pass runs over a freshly parsed tree. Each evaluate call
found on the way is resolved to a target language and payload, a subtree is
built for it, and the pair is recorded in a map keyed by the call node's id.
The children of an evaluate call are not visited: their substance lives in
the linked subtree.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from polyglot_ast.adapters.treesitter.languages import get_adapter
from polyglot_ast.adapters.treesitter.languages.base import child_at
from polyglot_ast.adapters.treesitter.models import CallKind, EvalTarget
from polyglot_ast.common.logging import DiagnosticKind
from polyglot_ast.common.text_utils import SOURCE_ENCODING

from .arguments import ArgumentResolver

if TYPE_CHECKING:
    import tree_sitter

    from .polyglot_tree import PolyglotTree

logger = logging.getLogger(__name__)

__all__ = ["TreeBuilder"]


class TreeBuilder:
    """Builds the subtree map of one PolyglotTree."""

    def __init__(self, tree: PolyglotTree):
        self.tree = tree
        self.resolver = ArgumentResolver(
            adapter=tree.adapter,
            source=tree.source,
            working_dir=tree.working_dir,
            diagnostics=tree.diagnostics,
            origin=tree.origin,
        )

    def build(self) -> dict[int, PolyglotTree]:
        """
        Walk the tree and build a subtree for every evaluate call.

        Nodes are visited first child before next sibling. An explicit stack
        replaces recursion so long sibling chains stay within Python's
        recursion limit.

        Returns:
            Mapping from call node id to the subtree built for it
        """
        links: dict[int, PolyglotTree] = {}
        stack: list[tree_sitter.Node] = [self.tree.root_node]

        while stack:
            node = stack.pop()

            sibling = node.next_sibling
            if sibling is not None:
                stack.append(sibling)

            if self.tree.call_kind(node) is CallKind.EVAL:
                subtree = self.make_subtree(node)
                if subtree is None:
                    self.tree.diagnostics.record(
                        DiagnosticKind.SUBTREE_FAILED,
                        "unable to make subtree for polyglot call",
                        position=tuple(node.start_point),
                        path=self.tree.origin,
                        language=self.tree.adapter.language_name,
                    )
                else:
                    links[node.id] = subtree
                continue

            child = child_at(node, 0)
            if child is not None:
                stack.append(child)

        logger.debug(
            "Linked %d subtree(s) in %s tree at depth %d",
            len(links),
            self.tree.adapter.language_name,
            self.tree.depth,
        )
        return links

    def make_subtree(self, node: tree_sitter.Node) -> PolyglotTree | None:
        """
        Build the subtree for one evaluate call.

        Args:
            node: The evaluate call node

        Returns:
            The subtree, or None if the call could not be resolved or built
        """
        args = self.tree.adapter.get_args(node)
        if args is None:
            return None

        target = self.resolver.resolve(args)
        if target is None:
            return None

        return self._make_subtree_for(target, node)

    def _make_subtree_for(self, target: EvalTarget, node: tree_sitter.Node) -> PolyglotTree | None:
        tree = self.tree
        position = tuple(node.start_point)

        adapter = get_adapter(target.language)
        if adapter is None:
            tree.diagnostics.record(
                DiagnosticKind.UNRECOGNIZED_LANGUAGE,
                f"could not convert argument {target.language!r} to a supported language",
                position=position,
                path=tree.origin,
                language=tree.adapter.language_name,
            )
            return None

        depth = tree.depth + 1
        if depth > tree.settings.max_depth:
            tree.diagnostics.record(
                DiagnosticKind.DEPTH_LIMIT,
                f"polyglot calls nested deeper than {tree.settings.max_depth} levels",
                position=position,
                path=tree.origin,
                language=tree.adapter.language_name,
            )
            return None

        if target.code is not None:
            return type(tree)._from_source(
                target.code.encode(SOURCE_ENCODING),
                adapter,
                tree.working_dir,
                manager=tree.manager,
                settings=tree.settings,
                diagnostics=tree.diagnostics,
                depth=depth,
                file_chain=tree.file_chain,
            )

        path = Path(target.path)
        if tree.settings.detect_cycles and path.resolve() in tree.file_chain:
            tree.diagnostics.record(
                DiagnosticKind.CYCLE,
                f"file {path} is already being evaluated higher up the tree",
                position=position,
                path=tree.origin,
                language=tree.adapter.language_name,
            )
            return None

        return type(tree)._from_file(
            path,
            adapter,
            manager=tree.manager,
            settings=tree.settings,
            diagnostics=tree.diagnostics,
            depth=depth,
            file_chain=tree.file_chain,
        )
