"""
Argument resolution for evaluate calls.

Turns the raw argument nodes returned by a language adapter into an
EvalTarget: the target language string plus either inline code or a file path
resolved against the working directory of the calling tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from polyglot_ast.adapters.treesitter.models import EvalArgs, EvalTarget
from polyglot_ast.common.logging import DiagnosticCollector, DiagnosticKind
from polyglot_ast.common.text_utils import strip_quotes

if TYPE_CHECKING:
    import tree_sitter

    from polyglot_ast.adapters.treesitter.languages import LanguageAdapter


__all__ = ["ArgumentResolver", "resolve_eval_target"]


@dataclass
class _NamedArguments:
    language: str | None = None
    code: str | None = None
    path: Path | None = None


@dataclass
class ArgumentResolver:
    """Resolves evaluate-call arguments for one tree."""

    adapter: LanguageAdapter
    source: bytes
    working_dir: Path
    diagnostics: DiagnosticCollector = field(default_factory=DiagnosticCollector)
    origin: str | None = None

    def resolve(self, args: EvalArgs) -> EvalTarget | None:
        """Return the target of an evaluate call, or None if it cannot be resolved."""
        if not self.adapter.positional_args:
            return self._resolve_named(args.first, args.second)

        if args.call_form is None:
            # language then code
            return self._inline(args.first, args.second)

        call_form = self._text(args.call_form)
        if call_form == self.adapter.code_eval:
            return self._inline(args.first, args.second)
        if call_form == self.adapter.code_eval_file:
            return self._file(args.first, args.second)

        self._record(
            DiagnosticKind.UNRECOGNIZED_CALL,
            f"unrecognized polyglot call form {call_form!r}",
            args.call_form,
        )
        return None

    # =========================================================================
    # Positional arguments
    # =========================================================================

    def _inline(self, lang_node: tree_sitter.Node, code_node: tree_sitter.Node) -> EvalTarget:
        return EvalTarget(
            language=strip_quotes(self._text(lang_node)),
            code=strip_quotes(self._text(code_node)),
        )

    def _file(self, lang_node: tree_sitter.Node, path_node: tree_sitter.Node) -> EvalTarget:
        return EvalTarget(
            language=strip_quotes(self._text(lang_node)),
            path=self.working_dir / strip_quotes(self._text(path_node)),
        )

    # =========================================================================
    # Name-tagged arguments
    # =========================================================================

    def _resolve_named(
        self, first: tree_sitter.Node, second: tree_sitter.Node
    ) -> EvalTarget | None:
        # The role of each argument is only known once its name is read,
        # so both are scanned before deciding what was asked for.
        found = _NamedArguments()
        for name_node in (first, second):
            if not self._process_argument(name_node, found):
                return None

        if found.language is None:
            self._record(
                DiagnosticKind.MISSING_ARGUMENT,
                "no language argument provided for polyglot call",
                first,
            )
            return None

        if found.code is not None:
            return EvalTarget(language=found.language, code=found.code)
        if found.path is not None:
            return EvalTarget(language=found.language, path=found.path)

        self._record(
            DiagnosticKind.MISSING_ARGUMENT,
            f"no {self.adapter.path_arg} or {self.adapter.code_arg} argument provided to "
            f"{self.adapter.language_name} polyglot call",
            first,
        )
        return None

    def _process_argument(self, name_node: tree_sitter.Node, found: _NamedArguments) -> bool:
        # name = value
        equals = name_node.next_sibling
        value_node = equals.next_sibling if equals is not None else None
        if value_node is None:
            return False

        value = strip_quotes(self._text(value_node))
        name = self._text(name_node)

        if name == self.adapter.path_arg:
            found.path = self.working_dir / value
        elif name == self.adapter.lang_arg:
            found.language = value
        elif name == self.adapter.code_arg:
            found.code = value
        else:
            self._record(
                DiagnosticKind.UNRECOGNIZED_ARGUMENT,
                f"unable to handle polyglot call argument {name!r}",
                name_node,
            )
            return False
        return True

    # =========================================================================
    # Helpers
    # =========================================================================

    def _text(self, node: tree_sitter.Node) -> str:
        return self.adapter.get_node_text(node, self.source)

    def _record(self, kind: DiagnosticKind, message: str, node: tree_sitter.Node) -> None:
        self.diagnostics.record(
            kind,
            message,
            position=tuple(node.start_point),
            path=self.origin,
            language=self.adapter.language_name,
        )


def resolve_eval_target(
    adapter: LanguageAdapter,
    args: EvalArgs,
    source: bytes,
    working_dir: Path,
    diagnostics: DiagnosticCollector | None = None,
) -> EvalTarget | None:
    """
    Resolve the arguments of an evaluate call.

    Args:
        adapter: Adapter of the language the call is written in
        args: Argument nodes returned by ``adapter.get_args``
        source: Source bytes the nodes belong to
        working_dir: Directory relative file payloads are resolved against
        diagnostics: Collector for unrecognized content (a fresh one if omitted)

    Returns:
        EvalTarget, or None when the call cannot be resolved
    """
    resolver = ArgumentResolver(
        adapter=adapter,
        source=source,
        working_dir=working_dir,
        diagnostics=diagnostics if diagnostics is not None else DiagnosticCollector(),
    )
    return resolver.resolve(args)
