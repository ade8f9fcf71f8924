# python
"""
treeshell/tree.py
Node and Tree types. A Tree owns every node in a flat list; nodes refer to
their parent and children by id and resolve them through the owning tree.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

ROOT_ID = 0
ROOT_PATH = "/"


class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "dir"
    UNTYPED = "untyped"

    @classmethod
    def from_marker(cls, value: Any) -> "NodeKind":
        """
        Map a literal type marker to a kind. Anything other than "file" or
        "dir" is untyped.
        """
        if value == cls.FILE.value:
            return cls.FILE
        if value == cls.DIRECTORY.value:
            return cls.DIRECTORY
        return cls.UNTYPED


@dataclass(eq=False, frozen=True)
class Node:
    tree: "Tree" = field(repr=False)
    node_id: int
    name: str
    path: str
    kind: NodeKind
    parent_id: Optional[int] = None
    contents: Optional[str] = field(default=None, repr=False)
    meta: Dict[str, Any] = field(default_factory=dict, repr=False)
    child_ids: List[int] = field(default_factory=list, repr=False)

    @property
    def parent(self) -> Optional["Node"]:
        if self.parent_id is None:
            return None
        return self.tree.get(self.parent_id)

    @property
    def childnodes(self) -> Tuple["Node", ...]:
        return tuple(self.tree.get(child_id) for child_id in self.child_ids)

    @property
    def children(self) -> Tuple[str, ...]:
        return tuple(self.tree.get(child_id).name for child_id in self.child_ids)

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


class Tree:
    """
    Arena of nodes. Node 0 is the root.

    Nodes are only added through `add_node` while a TreeBuilder is running;
    nothing removes or re-parents a node afterwards.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    @property
    def root(self) -> Node:
        return self._nodes[ROOT_ID]

    def get(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def add_node(
        self,
        name: str,
        path: str,
        kind: NodeKind,
        parent: Optional[Node] = None,
        contents: Optional[str] = None,
        meta: Optional[Dict[str, Any]] = None,
    ) -> Node:
        node = Node(
            tree=self,
            node_id=len(self._nodes),
            name=name,
            path=path,
            kind=kind,
            parent_id=parent.node_id if parent is not None else None,
            contents=contents,
            meta=dict(meta or {}),
        )
        self._nodes.append(node)
        if parent is not None:
            parent.child_ids.append(node.node_id)
        return node

    def walk(self, start: Optional[Node] = None) -> Iterator[Node]:
        """Depth-first, pre-order, children in tree order."""
        stack = [start or self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.childnodes))
