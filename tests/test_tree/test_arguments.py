"""Tests for tree.arguments module."""

from __future__ import annotations

from pathlib import Path

from conftest import iter_nodes

from polyglot_ast.adapters.treesitter import EvalTarget, get_adapter
from polyglot_ast.common.logging import DiagnosticKind
from polyglot_ast.tree.arguments import ArgumentResolver, resolve_eval_target

WORKING_DIR = Path("/work")


def first_call(parser_manager, code: str, language: str, call_type: str):
    adapter = get_adapter(language)
    source = code.encode("utf-8")
    tree = parser_manager.parse(source, adapter)
    node = next(n for n in iter_nodes(tree.root_node) if n.type == call_type)
    return adapter, source, node


def resolve(parser_manager, diagnostics, code, language, call_type):
    adapter, source, node = first_call(parser_manager, code, language, call_type)
    args = adapter.get_args(node)
    assert args is not None
    resolver = ArgumentResolver(adapter, source, WORKING_DIR, diagnostics, origin="main")
    return resolver.resolve(args)


class TestPositionalArguments:
    """Tests for languages passing language and payload positionally."""

    def test_javascript_inline(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'Polyglot.eval("python", "print(1)");', "javascript", "call_expression"
        )
        assert target == EvalTarget(language="python", code="print(1)")
        assert not diagnostics

    def test_javascript_file(self, parser_manager, diagnostics):
        """Should resolve the path against the working directory."""
        target = resolve(
            parser_manager, diagnostics, "Polyglot.evalFile('c', 'lib/a.c');", "javascript", "call_expression"
        )
        assert target == EvalTarget(language="c", path=WORKING_DIR / "lib/a.c")
        assert target.is_file

    def test_c_inline(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'int main() { polyglot_eval("js", "1 + 1"); }', "c", "call_expression"
        )
        assert target == EvalTarget(language="js", code="1 + 1")

    def test_c_file(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager,
            diagnostics,
            'int main() { polyglot_eval_file("llvm", "hello.ll"); }',
            "c",
            "call_expression",
        )
        assert target == EvalTarget(language="llvm", path=WORKING_DIR / "hello.ll")

    def test_java_is_always_inline(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager,
            diagnostics,
            'class A { void f(Context c) { c.eval("js", "42"); } }',
            "java",
            "method_invocation",
        )
        assert target == EvalTarget(language="js", code="42")

    def test_unrecognized_call_form(self, parser_manager, diagnostics):
        """Should record a diagnostic for a call form that is neither inline nor file."""
        target = resolve(
            parser_manager,
            diagnostics,
            'int main() { polyglot_eval_string("js", "1"); }',
            "c",
            "call_expression",
        )
        assert target is None
        [entry] = diagnostics.of_kind(DiagnosticKind.UNRECOGNIZED_CALL)
        assert "polyglot_eval_string" in entry.message
        assert entry.path == "main"
        assert entry.position == (0, 13)


class TestNamedArguments:
    """Tests for GraalPy keyword arguments."""

    def test_inline(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'polyglot.eval(language="js", string="1")\n', "python", "call"
        )
        assert target == EvalTarget(language="js", code="1")

    def test_order_does_not_matter(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'polyglot.eval(string="1", language="js")\n', "python", "call"
        )
        assert target == EvalTarget(language="js", code="1")

    def test_file(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'polyglot.eval(path="b.js", language="js")\n', "python", "call"
        )
        assert target == EvalTarget(language="js", path=WORKING_DIR / "b.js")

    def test_unrecognized_argument_name(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'polyglot.eval(language="js", source="1")\n', "python", "call"
        )
        assert target is None
        [entry] = diagnostics.of_kind(DiagnosticKind.UNRECOGNIZED_ARGUMENT)
        assert "'source'" in entry.message

    def test_missing_language(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'polyglot.eval(string="1", path="a.js")\n', "python", "call"
        )
        assert target is None
        assert len(diagnostics.of_kind(DiagnosticKind.MISSING_ARGUMENT)) == 1

    def test_missing_payload(self, parser_manager, diagnostics):
        target = resolve(
            parser_manager, diagnostics, 'polyglot.eval(language="js", language="c")\n', "python", "call"
        )
        assert target is None
        [entry] = diagnostics.of_kind(DiagnosticKind.MISSING_ARGUMENT)
        assert "path or string" in entry.message


class TestResolveEvalTarget:
    """Tests for the resolve_eval_target helper."""

    def test_uses_fresh_collector_by_default(self, parser_manager):
        adapter, source, node = first_call(
            parser_manager, 'Polyglot.eval("python", "1");', "javascript", "call_expression"
        )
        target = resolve_eval_target(adapter, adapter.get_args(node), source, WORKING_DIR)
        assert target == EvalTarget(language="python", code="1")
