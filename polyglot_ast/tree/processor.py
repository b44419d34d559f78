"""
Processors consuming a PolyglotTree through a zipper.

``PolyglotTree.apply(processor)`` hands the processor a zipper located at the
root of the tree and calls ``process`` exactly once; how the processor walks
from there is its own business.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from polyglot_ast.adapters.treesitter.models import CallKind

from .zipper import PolyglotZipper

__all__ = ["PolyglotProcessor", "TreePrinter", "CallSite", "CallSiteCollector"]


class PolyglotProcessor(ABC):
    """Abstract base class for anything applied to a PolyglotTree."""

    @abstractmethod
    def process(self, zipper: PolyglotZipper) -> None:
        """Process the tree, starting from the zipper's position."""


class TreePrinter(PolyglotProcessor):
    """
    Renders a polyglot tree as indented text, one node per line.

    Leaves show their source code; the root of every tree shows its language,
    so language boundaries are visible in the output.
    """

    def __init__(self, indent: str = "  ", show_code: bool = True):
        self.indent = indent
        self.show_code = show_code
        self._lines: list[str] = []

    def process(self, zipper: PolyglotZipper) -> None:
        self._lines.clear()
        self._visit(zipper, level=0, language_changed=True)

    def get_result(self) -> str:
        return "\n".join(self._lines)

    def _visit(self, zipper: PolyglotZipper, level: int, language_changed: bool) -> None:
        line = f"{self.indent * level}{zipper.kind()}"
        if language_changed:
            line += f" [{zipper.language.value}]"

        child = zipper.copy()
        has_child = child.goto_first_child()
        if not has_child and self.show_code:
            line += f" {zipper.code()!r}"
        self._lines.append(line)

        while has_child:
            self._visit(child, level + 1, language_changed=child.tree is not zipper.tree)
            has_child = child.goto_next_sibling()


@dataclass(frozen=True)
class CallSite:
    """An interop call found while walking a polyglot tree."""

    kind: CallKind
    language: str
    position: tuple[int, int]
    depth: int
    origin: str | None = None
    binding: str | None = None
    target_language: str | None = None
    linked: bool = False


class CallSiteCollector(PolyglotProcessor):
    """Collects every interop call of a forest in traversal order."""

    def __init__(self) -> None:
        self.calls: list[CallSite] = []

    def process(self, zipper: PolyglotZipper) -> None:
        self.calls.clear()
        self._visit(zipper)

    def _visit(self, zipper: PolyglotZipper) -> None:
        kind = zipper.call_kind()
        if kind is not CallKind.NONE:
            self.calls.append(self._call_site(zipper, kind))

        child = zipper.copy()
        has_child = child.goto_first_child()
        while has_child:
            self._visit(child)
            has_child = child.goto_next_sibling()

    def _call_site(self, zipper: PolyglotZipper, kind: CallKind) -> CallSite:
        tree = zipper.tree
        binding = None
        target_language = None
        linked = False

        if kind is CallKind.EVAL:
            subtree = tree.get_subtree(zipper.node)
            if subtree is not None:
                linked = True
                target_language = subtree.language.value
        else:
            binding = zipper.get_binding_name()

        row, column = zipper.start_position()
        return CallSite(
            kind=kind,
            language=zipper.language.value,
            position=(row, column),
            depth=tree.depth,
            origin=tree.origin,
            binding=binding,
            target_language=target_language,
            linked=linked,
        )
