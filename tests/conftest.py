"""
Shared pytest fixtures for polyglot_ast tests.

Fixtures are organized by scope:
- function: Fresh state for each test (default)
"""

from __future__ import annotations

from pathlib import Path

import pytest

from polyglot_ast.adapters.treesitter import CallKind, ParserManager
from polyglot_ast.common.logging import DiagnosticCollector
from polyglot_ast.services.config_models import PolyglotSettings
from polyglot_ast.tree import PolyglotTree, PolyglotZipper

SAMPLES_DIR = Path(__file__).parent / "samples"


def iter_nodes(node):
    """Yield a tree-sitter node and all its descendants in document order."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def samples_dir() -> Path:
    """Directory holding sample polyglot programs."""
    return SAMPLES_DIR


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture writing a file below tmp_path and returning its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Tree Fixtures
# =============================================================================


@pytest.fixture
def settings() -> PolyglotSettings:
    """Default settings, independent of the environment."""
    return PolyglotSettings(max_depth=32, detect_cycles=True, encoding="utf-8", log_level="WARNING")


@pytest.fixture
def diagnostics() -> DiagnosticCollector:
    """A collector that does not log."""
    return DiagnosticCollector(emit=False)


@pytest.fixture
def build(settings, diagnostics):
    """Factory fixture building a tree from code with the shared collector."""

    def _build(code: str, language: str, working_dir: Path | None = None) -> PolyglotTree:
        tree = PolyglotTree.from_code(
            code,
            language,
            working_dir=working_dir,
            settings=settings,
            diagnostics=diagnostics,
        )
        assert tree is not None
        return tree

    return _build


@pytest.fixture
def find_call():
    """Factory fixture returning a zipper on the n-th interop call of a kind."""

    def _find(tree: PolyglotTree, kind: CallKind = CallKind.EVAL, index: int = 0) -> PolyglotZipper:
        nodes = [node for node in iter_nodes(tree.root_node) if tree.call_kind(node) is kind]
        assert len(nodes) > index, f"no {kind.value} #{index} in tree"
        return PolyglotZipper(tree, nodes[index])

    return _find


@pytest.fixture
def parser_manager() -> ParserManager:
    """Provide a ParserManager instance for tests."""
    return ParserManager()
