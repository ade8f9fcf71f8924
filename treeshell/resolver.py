# python
"""
treeshell/resolver.py
Path resolution over a Tree.

Paths are opaque slash-delimited strings. A leading "/" anchors at the root of
the origin's own tree, anything else is relative to the origin node. "." stays
put and ".." moves to the parent; ".." at the root fails rather than clamping.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Union

from .tree import Node, Tree

SEPARATOR = "/"
SELF_SEGMENT = "."
PARENT_SEGMENT = ".."


@dataclass(frozen=True)
class Found:
    node: Node

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    path: object
    segment: Optional[str] = None

    @property
    def node(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False


Resolution = Union[Found, NotFound]


class NodeSource(Protocol):
    """
    What a host needs from a resolver. A remote-backed implementation only has
    to provide these two coroutines.
    """

    async def resolve(self, origin: Node, path: Optional[str]) -> Resolution: ...

    async def list_children(self, node: Node) -> List[Node]: ...


def split_path(path: str) -> List[str]:
    return [segment for segment in path.split(SEPARATOR) if segment]


def find_node(start: Node, segments: Sequence[str]) -> Optional[Node]:
    """
    Consume `segments` from `start`. Returns None as soon as a segment cannot
    be followed.
    """
    current: Optional[Node] = start
    for segment in segments:
        if segment == SELF_SEGMENT:
            continue
        if segment == PARENT_SEGMENT:
            current = current.parent
        else:
            # first match wins if names repeat
            current = next(
                (child for child in current.childnodes if child.name == segment), None
            )
        if current is None:
            return None
    return current


class PathResolver:
    def __init__(self, tree: Tree):
        self.tree = tree

    @property
    def root(self) -> Node:
        return self.tree.root

    def resolve_now(self, origin: Node, path: Optional[str]) -> Resolution:
        """Synchronous form of `resolve`."""
        if not path:
            return Found(origin)
        if not isinstance(path, str):
            return NotFound(path)
        start = origin.tree.root if path.startswith(SEPARATOR) else origin
        segments = split_path(path)
        current: Optional[Node] = start
        for index, segment in enumerate(segments):
            current = find_node(current, (segment,))
            if current is None:
                return NotFound(path, segments[index])
        return Found(current)

    async def resolve(self, origin: Node, path: Optional[str]) -> Resolution:
        return self.resolve_now(origin, path)

    async def list_children(self, node: Node) -> List[Node]:
        if not node.is_dir:
            return []
        return list(node.childnodes)
