"""
Unit tests for the explorer tree.
"""

from depviz.core.types import SymbolRef
from depviz.graph.explorer import (
    ExplorerNode,
    ExplorerNodeKind,
    build_explorer_tree,
    flatten_tree,
    search_explorer_tree,
)

from ..helpers import file, manifest, sym


def names(node: ExplorerNode) -> list:
    return [child.display_name for child in node.children.values()]


class TestBuildExplorerTree:
    def test_single_chain_is_flattened(self):
        """src/pkg/mod.ts collapses its folders; the file leaf stays selectable."""
        tree = build_explorer_tree(manifest(file("src/pkg/mod.ts", symbols=[sym("f")])))

        assert tree.display_name == "Project/src/pkg"
        (leaf,) = tree.children.values()
        assert leaf.kind is ExplorerNodeKind.FILE
        assert leaf.display_name == "mod.ts"
        assert leaf.file_id == "src/pkg/mod.ts"
        assert [c.id for c in leaf.children.values()] == ["src/pkg/mod.ts#f"]
        assert leaf.children["src/pkg/mod.ts#f"].kind is ExplorerNodeKind.SYMBOL

    def test_folders_before_files(self):
        m = manifest(
            file("README.ts"),
            file("src/a.ts"),
            file("lib/b.ts"),
        )
        tree = build_explorer_tree(m)

        assert tree.id == "root"
        assert tree.display_name == "Project"
        assert names(tree) == ["src", "lib", "README.ts"]

    def test_sibling_folders_stop_merging(self):
        m = manifest(file("src/a/x.ts"), file("src/b/y.ts"))
        tree = build_explorer_tree(m)

        # root -> src is merged, src has two folder children
        assert tree.display_name == "Project/src"
        assert names(tree) == ["a", "b"]

    def test_empty_manifest_without_filter_returns_root(self):
        tree = build_explorer_tree(manifest())

        assert tree is not None
        assert tree.children == {}

    def test_empty_filter_is_the_no_match_sentinel(self):
        m = manifest(file("a.ts", symbols=[sym("f")]))
        assert build_explorer_tree(m, frozenset()) is None

    def test_filter_keeps_only_listed_symbols(self):
        m = manifest(
            file("a.ts", symbols=[sym("f"), sym("g")]),
            file("b.ts", symbols=[sym("h")]),
        )
        tree = build_explorer_tree(m, {SymbolRef("a.ts", "g")})

        assert names(tree) == ["a.ts"]
        assert names(tree.children["a.ts"]) == ["g"]

    def test_filter_with_unknown_refs_matches_nothing(self):
        m = manifest(file("a.ts", symbols=[sym("f")]))
        assert build_explorer_tree(m, {SymbolRef("zzz.ts", "f")}) is None


class TestFlattenTree:
    def test_idempotent(self):
        m = manifest(
            file("src/pkg/a.ts", symbols=[sym("f")]),
            file("src/pkg/sub/b.ts"),
            file("docs/x/y/z.ts"),
            file("top.ts"),
        )
        once = build_explorer_tree(m)
        twice = flatten_tree(once)

        assert twice == once

    def test_does_not_modify_input(self):
        folder = ExplorerNode(id="a", display_name="a")
        inner = ExplorerNode(id="b", display_name="b")
        inner.children["c.ts"] = ExplorerNode(id="c.ts", display_name="c.ts", file_id="a/b/c.ts")
        folder.children["b"] = inner

        flattened = flatten_tree(folder)

        assert flattened.display_name == "a/b"
        assert folder.display_name == "a"
        assert list(folder.children) == ["b"]

    def test_file_with_single_symbol_is_kept(self):
        leaf = ExplorerNode(id="a.ts", display_name="a.ts", file_id="a.ts")
        leaf.children["a.ts#f"] = ExplorerNode(id="a.ts#f", display_name="f", file_id="a.ts", symbol_id="f")

        assert flatten_tree(leaf) == leaf


class TestSearchExplorerTree:
    def test_empty_term_returns_full_tree(self):
        m = manifest(file("a.ts", symbols=[sym("f")]))
        assert search_explorer_tree(m, "") == build_explorer_tree(m)

    def test_matches_symbol_case_insensitively(self):
        m = manifest(
            file("a.ts", symbols=[sym("UserService"), sym("helper")]),
            file("b.ts", symbols=[sym("other")]),
        )
        tree = search_explorer_tree(m, "userserv")

        assert names(tree) == ["a.ts"]
        assert names(tree.children["a.ts"]) == ["UserService"]

    def test_file_name_match_keeps_file_without_symbols(self):
        m = manifest(file("src/auth.ts", symbols=[sym("login")]))
        tree = search_explorer_tree(m, "AUTH")

        (leaf,) = tree.children.values()
        assert leaf.file_id == "src/auth.ts"
        assert leaf.children == {}

    def test_no_match_returns_none(self):
        m = manifest(file("a.ts", symbols=[sym("f")]))
        assert search_explorer_tree(m, "zzz") is None
