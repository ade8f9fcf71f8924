# python
"""
tests/test_builder.py
Unit tests for materializing tree literals into linked Node trees.
"""
import dataclasses
from collections import OrderedDict

import pytest

from treeshell.builder import TreeBuilder, build_tree, split_literal
from treeshell.resolver import PathResolver
from treeshell.tree import NodeKind, Tree


def test_root_is_synthetic_directory(docs_tree) -> None:
    root = docs_tree.root
    assert root.name == ""
    assert root.path == "/"
    assert root.parent is None
    assert root.kind is NodeKind.DIRECTORY


def test_paths_follow_parent_chain(docs_tree) -> None:
    for node in docs_tree:
        if node.is_root:
            continue
        prefix = "" if node.parent.is_root else node.parent.path
        assert node.path == prefix + "/" + node.name


def test_direct_children_of_root_have_single_slash(docs_tree) -> None:
    assert [child.path for child in docs_tree.root.childnodes] == ["/home", "/etc"]


def test_children_and_childnodes_correspond(docs_tree) -> None:
    for node in docs_tree:
        assert node.children == tuple(child.name for child in node.childnodes)
        for child in node.childnodes:
            assert child.parent is node


def test_child_order_follows_literal_order() -> None:
    literal = OrderedDict(
        [
            ("zeta", {"_META_TYPE": "file"}),
            ("alpha", {"_META_TYPE": "dir"}),
            ("mid", {"_META_TYPE": "file"}),
        ]
    )
    tree = build_tree(literal)
    assert tree.root.children == ("zeta", "alpha", "mid")


def test_file_contents_and_metadata_are_copied() -> None:
    tree = build_tree(
        {"a.txt": {"_META_TYPE": "file", "_META_FILE_CONTENTS": "body", "_META_OWNER": "bob"}}
    )
    (node,) = tree.root.childnodes
    assert node.is_file
    assert node.contents == "body"
    assert node.meta == {
        "_META_TYPE": "file",
        "_META_FILE_CONTENTS": "body",
        "_META_OWNER": "bob",
    }
    assert node.children == ()


def test_meta_prefix_keys_are_never_children() -> None:
    tree = build_tree({"_METADATA_extra": {"_META_TYPE": "dir"}, "_meta": {"_META_TYPE": "dir"}})
    # prefix match is case-sensitive: "_meta" is an ordinary child
    assert tree.root.children == ("_meta",)
    assert tree.root.meta == {"_METADATA_extra": {"_META_TYPE": "dir"}}


def test_missing_type_is_untyped_and_not_recursed() -> None:
    tree = build_tree({"box": {"inner": {"_META_TYPE": "file"}}})
    (box,) = tree.root.childnodes
    assert box.kind is NodeKind.UNTYPED
    assert box.childnodes == ()
    assert len(tree) == 2


def test_unknown_type_value_is_untyped() -> None:
    tree = build_tree({"link": {"_META_TYPE": "symlink"}})
    assert tree.root.childnodes[0].kind is NodeKind.UNTYPED


def test_non_mapping_child_value_is_untyped() -> None:
    tree = build_tree({"odd": "just a string", "list": [1, 2]})
    kinds = [child.kind for child in tree.root.childnodes]
    assert kinds == [NodeKind.UNTYPED, NodeKind.UNTYPED]


def test_contents_ignored_on_directories() -> None:
    tree = build_tree({"d": {"_META_TYPE": "dir", "_META_FILE_CONTENTS": "nope"}})
    assert tree.root.childnodes[0].contents is None


def test_empty_literal_builds_bare_root() -> None:
    tree = build_tree({})
    assert len(tree) == 1
    assert tree.root.childnodes == ()


def test_build_returns_parent_and_attaches_children() -> None:
    tree = Tree()
    root = tree.add_node(name="", path="", kind=NodeKind.DIRECTORY)
    builder = TreeBuilder(tree)
    result = builder.build(root, {"x": {"_META_TYPE": "dir", "y": {"_META_TYPE": "file"}}})
    assert result is root
    (x,) = root.childnodes
    assert x.path == "/x"
    assert x.childnodes[0].path == "/x/y"


def test_split_literal_partitions_keys() -> None:
    meta, children = split_literal({"_META_TYPE": "dir", "a": {}, "b": {}})
    assert meta == {"_META_TYPE": "dir"}
    assert list(children) == ["a", "b"]


def test_walk_is_preorder(docs_tree) -> None:
    paths = [node.path for node in docs_tree.walk()]
    assert paths == [
        "/",
        "/home",
        "/home/docs",
        "/home/docs/readme.txt",
        "/home/docs/drafts",
        "/home/notes.txt",
        "/etc",
        "/etc/hosts",
    ]


def test_nodes_are_read_only(docs_tree) -> None:
    node = docs_tree.root.childnodes[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.kind = NodeKind.FILE
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.path = "/elsewhere"


def test_non_string_contents_become_text() -> None:
    tree = build_tree({"n.txt": {"_META_TYPE": "file", "_META_FILE_CONTENTS": 42}})
    node = tree.root.childnodes[0]
    assert node.contents == "42"
    assert node.meta["_META_FILE_CONTENTS"] == 42


def test_names_that_cannot_round_trip_are_built_verbatim() -> None:
    # the builder stays total; scenario validation rejects these names
    tree = build_tree({"a/b": {"_META_TYPE": "file"}, "..": {"_META_TYPE": "file"}})
    assert tree.root.children == ("a/b", "..")
    assert [child.path for child in tree.root.childnodes] == ["/a/b", "/.."]
    resolver = PathResolver(tree)
    assert not resolver.resolve_now(tree.root, "/a/b")
    assert not resolver.resolve_now(tree.root, "/..")
