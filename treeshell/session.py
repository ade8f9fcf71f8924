# python
"""
treeshell/session.py
Session dataclass: the host-held current node, command history and JSONL
event logging.
"""
from dataclasses import dataclass, field
import asyncio
import datetime
import json
import pathlib
import uuid
from typing import Optional, Any, List

from .tree import Node, Tree, ROOT_PATH

_EVENT_LOCK = asyncio.Lock()


def iso_ts():
    """
    Return a timezone-aware UTC ISO timestamp (Z suffix) for logging.
    """
    dt = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
    return dt.isoformat().replace("+00:00", "Z")


def ensure_dir(path: pathlib.Path):
    path.mkdir(parents=True, exist_ok=True)


def new_session_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Session:
    session_id: str
    started_ts: str
    username: str = "guest"
    scenario_id: str = "default"
    home: str = ROOT_PATH
    _events_file: str = "logs/events.jsonl"
    tree: Optional[Tree] = field(default=None, repr=False)
    current: Optional[Node] = field(default=None, repr=False)
    history: List[str] = field(default_factory=list, repr=False)

    @property
    def cwd(self) -> str:
        return self.current.path if self.current is not None else ROOT_PATH

    async def log(self, event: str, phase: str, **fields: Any) -> None:
        rec = {
            "ts": iso_ts(),
            "session_id": self.session_id,
            "event": event,
            "phase": phase,
            "version": "0.1",
            "payload": fields or {}
        }
        async with _EVENT_LOCK:
            ensure_dir(pathlib.Path(self._events_file).parent)
            with open(self._events_file, "a", encoding="utf-8") as f:
                f.write(json.dumps(rec, ensure_ascii=False) + "\n")

    def attach_tree(self, tree: Tree, current: Optional[Node] = None) -> None:
        self.tree = tree
        self.current = current if current is not None else tree.root

    def change_directory(self, node: Node) -> None:
        """
        Move the current-node pointer. Callers check the node is a directory.
        """
        self.current = node

    def record_command(self, command: str) -> None:
        if command:
            self.history.append(command)
