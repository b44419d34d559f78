"""Tests for tree.zipper module."""

from __future__ import annotations

import pytest

from polyglot_ast.adapters.treesitter import CallKind, Language
from polyglot_ast.common.exceptions import InvalidArgumentError
from polyglot_ast.tree import PolyglotZipper

THREE_LEVELS = (
    'polyglot.eval(language="js", string="Polyglot.eval(\'c\', \'int x = 1;\');")\n'
    "y = 2\n"
)


class TestPosition:
    """Tests for zipper construction and node properties."""

    def test_starts_at_root(self, build):
        tree = build("x = 1\n", "python")
        zipper = PolyglotZipper.from_tree(tree)

        assert zipper.node == tree.root_node
        assert zipper.tree is tree
        assert zipper.kind() == "module"
        assert zipper.language is Language.PYTHON
        assert zipper.get_lang() is tree.adapter

    def test_tree_zipper_shortcut(self, build):
        tree = build("x = 1\n", "python")
        assert tree.zipper() == PolyglotZipper(tree)

    def test_code_and_positions(self, build):
        tree = build("x = 1\ny = 2\n", "python")
        zipper = tree.zipper()
        zipper.goto_first_child()
        zipper.goto_next_sibling()

        assert zipper.code() == "y = 2"
        assert tuple(zipper.start_position()) == (1, 0)
        assert tuple(zipper.end_position()) == (1, 5)

    @pytest.mark.parametrize(
        "code,kind",
        [
            ('Polyglot.eval("python", "1");', CallKind.EVAL),
            ('Polyglot.import("x");', CallKind.IMPORT),
            ('Polyglot.export("x", 1);', CallKind.EXPORT),
        ],
    )
    def test_synthetic_kind(self, build, find_call, code, kind):
        """Interop calls report their synthetic kind instead of the grammar's."""
        zipper = find_call(build(code, "javascript"), kind)

        assert zipper.kind() == kind.value
        assert zipper.call_kind() is kind
        assert zipper.is_polyglot_eval_call() is (kind is CallKind.EVAL)
        assert zipper.is_polyglot_import_call() is (kind is CallKind.IMPORT)
        assert zipper.is_polyglot_export_call() is (kind is CallKind.EXPORT)

    def test_copy_is_independent(self, build):
        tree = build("x = 1\n", "python")
        zipper = tree.zipper()
        copy = zipper.copy()

        assert copy == zipper
        copy.goto_first_child()
        assert copy != zipper
        assert zipper.node == tree.root_node


class TestNavigation:
    """Tests for moving the zipper."""

    def test_goto_first_child(self, build):
        tree = build("x = 1\n", "python")
        zipper = tree.zipper()

        assert zipper.goto_first_child()
        assert zipper.kind() == "expression_statement"

    def test_goto_first_child_on_leaf(self, build):
        tree = build("x = 1\n", "python")
        zipper = tree.zipper()
        while zipper.goto_first_child():
            pass

        assert zipper.code() == "x"
        assert not zipper.goto_first_child()
        assert zipper.code() == "x"

    def test_siblings(self, build):
        tree = build("x = 1\ny = 2\n", "python")
        zipper = tree.zipper()
        zipper.goto_first_child()

        assert not zipper.goto_prev_sibling()
        assert zipper.goto_next_sibling()
        assert zipper.code() == "y = 2"
        assert not zipper.goto_next_sibling()
        assert zipper.goto_prev_sibling()
        assert zipper.code() == "x = 1"

    def test_sibling_zippers(self, build):
        tree = build("x = 1\ny = 2\n", "python")
        first = tree.zipper().child(0)

        second = first.next_sibling()
        assert second.code() == "y = 2"
        assert second.prev_sibling() == first
        assert first.prev_sibling() is None
        assert second.next_sibling() is None

    def test_child_by_index(self, build):
        tree = build("x = 1\ny = 2\n", "python")
        zipper = tree.zipper()

        assert zipper.child(1).code() == "y = 2"
        assert zipper.child(2) is None


class TestCrossingLanguages:
    """Tests for descending into linked subtrees."""

    def test_first_child_of_linked_call_is_subtree_root(self, build, find_call):
        tree = build('Polyglot.eval("python", "x = 1");', "javascript")
        zipper = find_call(tree)
        subtree = tree.get_subtree(zipper.node)

        assert zipper.goto_first_child()
        assert zipper.tree is subtree
        assert zipper.node == subtree.root_node
        assert zipper.language is Language.PYTHON

    def test_child_index_is_ignored_on_linked_call(self, build, find_call):
        tree = build('Polyglot.eval("python", "x = 1");', "javascript")
        zipper = find_call(tree)
        subtree = tree.get_subtree(zipper.node)

        assert zipper.child(0) == PolyglotZipper(subtree)
        assert zipper.child(5) == PolyglotZipper(subtree)

    def test_unlinked_call(self, build, find_call):
        """An evaluate call without a subtree has no child, but stays navigable."""
        tree = build('Polyglot.eval("go", "x");', "javascript")
        zipper = find_call(tree)

        assert zipper.child(0) is None
        assert zipper.goto_first_child()
        assert zipper.tree is tree
        assert zipper.code() == "Polyglot.eval"

    def test_siblings_never_cross(self, build, find_call):
        """A subtree root has no siblings, even though its call site does."""
        tree = build('Polyglot.eval("python", "x = 1");\nlet y = 2;\n', "javascript")
        zipper = find_call(tree)
        zipper.goto_first_child()

        assert not zipper.goto_next_sibling()
        assert not zipper.goto_prev_sibling()
        assert zipper.language is Language.PYTHON

    def test_three_level_forest(self, build):
        """Python reaches C through JavaScript in exactly two crossings."""
        tree = build(THREE_LEVELS, "python")
        zipper = tree.zipper()

        crossings = 0
        languages = [zipper.language]
        while True:
            current = zipper.tree
            if not zipper.goto_first_child():
                break
            if zipper.tree is not current:
                crossings += 1
                languages.append(zipper.language)

        assert crossings == 2
        assert languages == [Language.PYTHON, Language.JAVASCRIPT, Language.C]

    def test_three_level_forest_step_by_step(self, build):
        tree = build(THREE_LEVELS, "python")
        zipper = tree.zipper()

        zipper.goto_first_child()  # expression_statement
        zipper.goto_first_child()  # call
        assert zipper.kind() == "polyglot_eval_call"

        zipper.goto_first_child()
        assert zipper.kind() == "program"
        assert zipper.language is Language.JAVASCRIPT

        zipper.goto_first_child()  # expression_statement
        zipper.goto_first_child()  # call_expression
        assert zipper.kind() == "polyglot_eval_call"

        zipper.goto_first_child()
        assert zipper.kind() == "translation_unit"
        assert zipper.language is Language.C
        assert zipper.code() == "int x = 1;"


class TestBindingName:
    """Tests for binding names of import and export calls."""

    @pytest.mark.parametrize(
        "lang,code,kind,expected",
        [
            ("python", 'polyglot.export_value(name="x", value=1)\n', CallKind.EXPORT, "x"),
            ("python", 'polyglot.import_value(name="y")\n', CallKind.IMPORT, "y"),
            ("javascript", 'Polyglot.import("y");', CallKind.IMPORT, "y"),
            (
                "java",
                'class A { void f(Context c) { c.getBindings("python").putMember("z", 1); } }',
                CallKind.EXPORT,
                "z",
            ),
            (
                "java",
                'class A { void f(Context c) { c.getBindings("python").getMember("z"); } }',
                CallKind.IMPORT,
                "z",
            ),
            ("c", 'int main() { polyglot_export("x", x); }', CallKind.EXPORT, "x"),
        ],
    )
    def test_static_name(self, build, find_call, lang, code, kind, expected):
        zipper = find_call(build(code, lang), kind)
        assert zipper.get_binding_name() == expected
        assert zipper.binding_name() == expected

    def test_computed_name(self, build, find_call):
        zipper = find_call(build("Polyglot.import(name);", "javascript"), CallKind.IMPORT)
        assert zipper.get_binding_name() is None

    def test_rejects_other_nodes(self, build, find_call):
        tree = build('Polyglot.eval("python", "1");', "javascript")

        with pytest.raises(InvalidArgumentError):
            tree.zipper().get_binding_name()
        with pytest.raises(InvalidArgumentError):
            find_call(tree).get_binding_name()
