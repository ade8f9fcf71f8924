# python
"""
treeshell/router.py
Command router that dispatches shell lines to path handlers backed by the
session's tree.
"""
import logging
import shlex
import pathlib
from typing import Tuple, List, Optional

from .builder import build_tree
from .handlers import cat, cd, ls, pwd
from .resolver import PathResolver, SEPARATOR
from .scenario import ScenarioManager
from .session import Session
from .tree import Tree

logger = logging.getLogger(__name__)

HANDLERS = {
    "cat": cat.run,
    "cd": cd.run,
    "ls": ls.run,
    "pwd": pwd.run,
}


class Router:
    def __init__(
        self,
        scenarios_root: Optional[pathlib.Path] = None,
        max_output: int = 16_384,
        tree: Optional[Tree] = None,
    ):
        self.scenario_mgr = ScenarioManager(scenarios_root)
        self.max_output = int(max_output)
        # a fixed tree overrides scenario loading for every session
        self.tree = tree

    async def dispatch(self, session: Session, line: str) -> Tuple[str, bool]:
        """
        Dispatch a single input line and return (output, truncated_flag).
        """
        line = (line or "").strip()

        if not line:
            return ("", False)

        try:
            argv: List[str] = shlex.split(line)
        except ValueError:
            # unbalanced quotes
            argv = line.split()

        cmd = argv[0] if argv else ""
        handler = HANDLERS.get(cmd)
        if handler is None:
            return (f"sh: {cmd}: command not found", False)

        resolver = self.resolver_for(session)
        out = await handler(session, resolver, argv)
        return self._truncate(out)

    def _truncate(self, out: str) -> Tuple[str, bool]:
        encoded = out.encode()
        if len(encoded) <= self.max_output:
            return (out, False)
        # drop any multi-byte character split at the limit
        return (encoded[: self.max_output].decode("utf-8", errors="ignore"), True)

    async def complete(self, session: Session, partial: str) -> List[str]:
        """
        Path completion candidates for `partial`, as full replacement strings.
        Directories carry a trailing separator.
        """
        resolver = self.resolver_for(session)
        partial = partial or ""
        if SEPARATOR in partial:
            base, _, prefix = partial.rpartition(SEPARATOR)
            base_path = base + SEPARATOR
        else:
            prefix, base_path = partial, ""
        result = await resolver.resolve(session.current, base_path)
        if not result:
            return []
        children = await resolver.list_children(result.node)
        candidates = []
        for child in children:
            if not child.name.startswith(prefix):
                continue
            suffix = SEPARATOR if child.is_dir else ""
            candidates.append(f"{base_path}{child.name}{suffix}")
        return candidates

    def resolver_for(self, session: Session) -> PathResolver:
        tree = self._get_tree(session)
        return PathResolver(tree)

    def _get_tree(self, session: Session) -> Tree:
        if session.tree is not None and session.current is not None:
            return session.tree
        tree = self.tree or self.scenario_mgr.load_tree(session)
        if tree is None:
            logger.warning("no tree literal for scenario %s; using an empty root", session.scenario_id)
            tree = build_tree({})
        start = PathResolver(tree).resolve_now(tree.root, session.home)
        if not start or not start.node.is_dir:
            logger.warning("start path %s is not a directory; starting at /", session.home)
            session.attach_tree(tree)
        else:
            session.attach_tree(tree, start.node)
        return tree
