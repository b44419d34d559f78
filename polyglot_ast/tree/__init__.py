"""Polyglot tree - construction and navigation across language boundaries."""

from __future__ import annotations

from .arguments import ArgumentResolver, resolve_eval_target
from .builder import TreeBuilder
from .polyglot_tree import PolyglotTree
from .processor import CallSite, CallSiteCollector, PolyglotProcessor, TreePrinter
from .zipper import PolyglotZipper, Position

__all__ = [
    "ArgumentResolver",
    "CallSite",
    "CallSiteCollector",
    "PolyglotProcessor",
    "PolyglotTree",
    "PolyglotZipper",
    "Position",
    "TreeBuilder",
    "TreePrinter",
    "resolve_eval_target",
]
