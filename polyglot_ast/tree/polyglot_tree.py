"""
PolyglotTree - a syntax tree spanning several languages.

A PolyglotTree wraps one tree-sitter tree for one language. Every evaluate
call found in it (``polyglot.eval``, ``Polyglot.evalFile``,
``polyglot_eval_file``, ...) is linked to a child PolyglotTree built from the
evaluated code or file, recursively, so a whole polyglot program becomes a
forest owned by the top-level tree.

Usage:
    from polyglot_ast import PolyglotTree, TreePrinter

    tree = PolyglotTree.from_path("samples/main.py")
    printer = TreePrinter()
    tree.apply(printer)
    print(printer.get_result())

    for diagnostic in tree.diagnostics:
        print(diagnostic)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from polyglot_ast.adapters.treesitter.languages import LanguageAdapter, get_adapter
from polyglot_ast.adapters.treesitter.manager import ParserManager
from polyglot_ast.adapters.treesitter.models import CallKind, Language
from polyglot_ast.common.exceptions import InvalidArgumentError
from polyglot_ast.common.logging import DiagnosticCollector, DiagnosticKind
from polyglot_ast.common.text_utils import SOURCE_ENCODING, to_source_bytes
from polyglot_ast.services.config_models import PolyglotSettings

from .builder import TreeBuilder
from .zipper import PolyglotZipper

if TYPE_CHECKING:
    import os

    import tree_sitter

    from .processor import PolyglotProcessor

logger = logging.getLogger(__name__)

__all__ = ["PolyglotTree"]


class PolyglotTree:
    """
    An abstract syntax tree spanning across multiple languages.

    Instances are built through ``from_code`` or ``from_path``; both return
    None when the top-level source cannot be read or parsed. Problems in
    nested interop calls never prevent construction: the offending link is
    left out and a diagnostic is recorded in ``diagnostics``.

    Node ids used as keys of the subtree map only mean something inside this
    tree's own tree-sitter tree.
    """

    def __init__(
        self,
        ts_tree: tree_sitter.Tree,
        source: bytes,
        adapter: LanguageAdapter,
        working_dir: Path,
        *,
        manager: ParserManager,
        settings: PolyglotSettings,
        diagnostics: DiagnosticCollector,
        depth: int = 0,
        file_chain: tuple[Path, ...] = (),
        origin: str | None = None,
    ):
        self._ts_tree = ts_tree
        self._source = source
        self._adapter = adapter
        self._working_dir = working_dir
        self._manager = manager
        self._settings = settings
        self._diagnostics = diagnostics
        self._depth = depth
        self._file_chain = file_chain
        self._origin = origin
        self._subtrees: dict[int, PolyglotTree] = {}

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_code(
        cls,
        code: str | bytes,
        language: str | Language | LanguageAdapter,
        *,
        working_dir: str | os.PathLike[str] | None = None,
        settings: PolyglotSettings | None = None,
        diagnostics: DiagnosticCollector | None = None,
    ) -> PolyglotTree | None:
        """
        Build a PolyglotTree from a code snippet.

        Args:
            code: Source code of the snippet; bytes are read in ``settings.encoding``
            language: Language the snippet is written in
            working_dir: Directory file payloads are resolved against
                (default: the process working directory)
            settings: Construction settings (default: read from the environment)
            diagnostics: Collector receiving soft failures (default: a new one)

        Returns:
            The tree, or None if the snippet could not be parsed

        Raises:
            InvalidArgumentError: If ``language`` is not supported, or ``code``
                is bytes that are not valid in ``settings.encoding``
            ConfigurationError: If a grammar cannot be loaded
        """
        adapter = cls._resolve_adapter(language)
        settings = settings or PolyglotSettings()
        if isinstance(code, str):
            code = code.encode(SOURCE_ENCODING)
        else:
            try:
                code = to_source_bytes(code, settings.encoding)
            except UnicodeDecodeError as e:
                raise InvalidArgumentError(f"Code is not valid {settings.encoding}: {e}") from e

        return cls._from_source(
            code,
            adapter,
            Path(working_dir) if working_dir is not None else Path(),
            manager=ParserManager(),
            settings=settings,
            diagnostics=diagnostics if diagnostics is not None else DiagnosticCollector(),
        )

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        language: str | Language | LanguageAdapter | None = None,
        *,
        settings: PolyglotSettings | None = None,
        diagnostics: DiagnosticCollector | None = None,
    ) -> PolyglotTree | None:
        """
        Build a PolyglotTree from a file.

        File payloads found in the file are resolved relative to the file's
        own directory.

        Args:
            path: Path to the file
            language: Language of the file (default: detected from the extension)
            settings: Construction settings (default: read from the environment)
            diagnostics: Collector receiving soft failures (default: a new one)

        Returns:
            The tree, or None if the file could not be read or parsed

        Raises:
            InvalidArgumentError: If the language is not supported or cannot be detected
            ConfigurationError: If a grammar cannot be loaded
        """
        path = Path(path)
        if language is None:
            language = ParserManager.detect_language(path)
            if language is None:
                raise InvalidArgumentError(f"Cannot detect the language of {path}")

        return cls._from_file(
            path,
            cls._resolve_adapter(language),
            manager=ParserManager(),
            settings=settings or PolyglotSettings(),
            diagnostics=diagnostics if diagnostics is not None else DiagnosticCollector(),
        )

    @classmethod
    def _from_file(
        cls,
        path: Path,
        adapter: LanguageAdapter,
        *,
        manager: ParserManager,
        settings: PolyglotSettings,
        diagnostics: DiagnosticCollector,
        depth: int = 0,
        file_chain: tuple[Path, ...] = (),
    ) -> PolyglotTree | None:
        try:
            source = to_source_bytes(path.read_bytes(), settings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            diagnostics.record(
                DiagnosticKind.IO_ERROR,
                f"unable to create tree for file {path} due to the following error: {e}",
                path=path,
                language=adapter.language_name,
            )
            return None

        return cls._from_source(
            source,
            adapter,
            path.parent,
            manager=manager,
            settings=settings,
            diagnostics=diagnostics,
            depth=depth,
            file_chain=(*file_chain, path.resolve()),
            origin=str(path),
        )

    @classmethod
    def _from_source(
        cls,
        source: bytes,
        adapter: LanguageAdapter,
        working_dir: Path,
        *,
        manager: ParserManager,
        settings: PolyglotSettings,
        diagnostics: DiagnosticCollector,
        depth: int = 0,
        file_chain: tuple[Path, ...] = (),
        origin: str | None = None,
    ) -> PolyglotTree | None:
        ts_tree = manager.parse(source, adapter)
        if ts_tree is None:
            diagnostics.record(
                DiagnosticKind.PARSE_ERROR,
                f"the {adapter.language_name} parser did not produce a tree",
                path=origin,
                language=adapter.language_name,
            )
            return None

        tree = cls(
            ts_tree,
            source,
            adapter,
            working_dir,
            manager=manager,
            settings=settings,
            diagnostics=diagnostics,
            depth=depth,
            file_chain=file_chain,
            origin=origin,
        )
        # Published only once the whole pass is done
        tree._subtrees = TreeBuilder(tree).build()
        return tree

    @staticmethod
    def _resolve_adapter(language: str | Language | LanguageAdapter) -> LanguageAdapter:
        if isinstance(language, LanguageAdapter):
            return language
        adapter = get_adapter(language)
        if adapter is None:
            raise InvalidArgumentError(f"Unsupported language: {language!r}")
        return adapter

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def adapter(self) -> LanguageAdapter:
        return self._adapter

    @property
    def language(self) -> Language:
        return self._adapter.language

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def code(self) -> str:
        """The full source text of this tree."""
        return self._source.decode(SOURCE_ENCODING, errors="replace")

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    @property
    def ts_tree(self) -> tree_sitter.Tree:
        return self._ts_tree

    @property
    def root_node(self) -> tree_sitter.Node:
        return self._ts_tree.root_node

    @property
    def subtrees(self) -> Mapping[int, PolyglotTree]:
        """Read-only map from evaluate-call node id to linked subtree."""
        return MappingProxyType(self._subtrees)

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diagnostics

    @property
    def settings(self) -> PolyglotSettings:
        return self._settings

    @property
    def manager(self) -> ParserManager:
        return self._manager

    @property
    def depth(self) -> int:
        """Number of evaluate calls between the top-level tree and this one."""
        return self._depth

    @property
    def file_chain(self) -> tuple[Path, ...]:
        """Resolved paths of the files evaluated on the way to this tree."""
        return self._file_chain

    @property
    def origin(self) -> str | None:
        """Path of the file this tree was read from, None for inline code."""
        return self._origin

    # =========================================================================
    # Node queries
    # =========================================================================

    def node_to_code(self, node: tree_sitter.Node) -> str:
        """Get a node's source code."""
        return self._adapter.get_node_text(node, self._source)

    def call_kind(self, node: tree_sitter.Node) -> CallKind:
        return self._adapter.call_kind(node, self._source)

    def is_polyglot_eval_call(self, node: tree_sitter.Node) -> bool:
        return self.call_kind(node) is CallKind.EVAL

    def is_polyglot_import_call(self, node: tree_sitter.Node) -> bool:
        return self.call_kind(node) is CallKind.IMPORT

    def is_polyglot_export_call(self, node: tree_sitter.Node) -> bool:
        return self.call_kind(node) is CallKind.EXPORT

    def get_subtree(self, node: tree_sitter.Node) -> PolyglotTree | None:
        """Return the subtree linked to ``node``, a node of this tree."""
        return self._subtrees.get(node.id)

    def iter_subtrees(self) -> Iterator[PolyglotTree]:
        """Yield every tree of the forest below this one, depth first."""
        for subtree in self._subtrees.values():
            yield subtree
            yield from subtree.iter_subtrees()

    # =========================================================================
    # Traversal
    # =========================================================================

    def zipper(self) -> PolyglotZipper:
        """Return a zipper located at the root of this tree."""
        return PolyglotZipper(self)

    def apply(self, processor: PolyglotProcessor) -> None:
        """
        Apply a processor to the tree, starting from its root.

        The processor receives one zipper located at the root and is
        responsible for its own traversal.
        """
        processor.process(self.zipper())

    def __repr__(self) -> str:
        origin = f" {self._origin}" if self._origin else ""
        return (
            f"<PolyglotTree {self.language.value}{origin} "
            f"depth={self._depth} subtrees={len(self._subtrees)}>"
        )
