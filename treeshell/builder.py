# python
"""
treeshell/builder.py
Materialize a nested tree literal into a Tree.

A literal is a mapping. Keys starting with META_PREFIX are metadata
(`_META_TYPE` is "dir" or "file", `_META_FILE_CONTENTS` holds file contents);
every other key names a child whose value is itself a literal:

    {
        "home": {
            "_META_TYPE": "dir",
            "notes.txt": {"_META_TYPE": "file", "_META_FILE_CONTENTS": "hi"},
        }
    }
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from .tree import ROOT_PATH, Node, NodeKind, Tree

logger = logging.getLogger(__name__)

META_PREFIX = "_META"
META_TYPE = "_META_TYPE"
META_FILE_CONTENTS = "_META_FILE_CONTENTS"


def is_meta_key(key: Any) -> bool:
    return isinstance(key, str) and key.startswith(META_PREFIX)


def split_literal(literal: Any) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Partition a literal into (metadata, children), preserving key order.
    Non-mapping literals have neither.
    """
    if not isinstance(literal, Mapping):
        return {}, {}
    meta: Dict[str, Any] = {}
    children: Dict[str, Any] = {}
    for key, value in literal.items():
        if is_meta_key(key):
            meta[key] = value
        else:
            children[str(key)] = value
    return meta, children


def child_path(parent: Node, name: str) -> str:
    # the root contributes an empty prefix so its children get "/name"
    prefix = "" if parent.is_root else parent.path
    return prefix + "/" + name


def _file_contents(meta: Dict[str, Any]) -> Optional[str]:
    contents = meta.get(META_FILE_CONTENTS)
    if contents is None or isinstance(contents, str):
        return contents
    return str(contents)


class TreeBuilder:
    def __init__(self, tree: Optional[Tree] = None):
        self.tree = tree if tree is not None else Tree()

    def build(self, parent: Node, literal: Any) -> Node:
        """
        Attach the children described by `literal` under `parent`, recursing
        into every child typed as a directory. Returns `parent`.
        """
        _, children = split_literal(literal)
        for name, child_literal in children.items():
            child_meta, _ = split_literal(child_literal)
            kind = NodeKind.from_marker(child_meta.get(META_TYPE))
            path = child_path(parent, name)
            if kind is NodeKind.UNTYPED:
                logger.debug("untyped node at %s", path)
            contents = _file_contents(child_meta) if kind is NodeKind.FILE else None
            child = self.tree.add_node(
                name=name,
                path=path,
                kind=kind,
                parent=parent,
                contents=contents,
                meta=child_meta,
            )
            if kind is NodeKind.DIRECTORY:
                self.build(child, child_literal)
        return parent


def build_tree(literal: Any) -> Tree:
    """
    Build a complete Tree from a top-level literal. The root is a directory
    named "" whose path is "/".
    """
    builder = TreeBuilder()
    root_meta, _ = split_literal(literal)
    root = builder.tree.add_node(name="", path=ROOT_PATH, kind=NodeKind.DIRECTORY, meta=root_meta)
    builder.build(root, literal)
    logger.debug("built tree with %d nodes", len(builder.tree))
    return builder.tree
