import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from .builder import build_tree
from .tree import Tree

logger = logging.getLogger(__name__)

# Metadata keys may hold anything except file contents, which must be text;
# every other key must itself be a literal whose name resolves back to it.
TREE_LITERAL_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {"_META_FILE_CONTENTS": {"type": "string"}},
    "propertyNames": {"not": {"anyOf": [{"enum": ["", ".", ".."]}, {"pattern": "/"}]}},
    "patternProperties": {"^_META": {}},
    "additionalProperties": {"$ref": "#"},
}


def validate_literal(obj: Any) -> bool:
    try:
        jsonschema.validate(instance=obj, schema=TREE_LITERAL_SCHEMA)
    except jsonschema.ValidationError as e:
        logger.debug("tree literal failed validation: %s", e.message)
        return False
    return True


class ScenarioManager:
    """
    Locate scenario tree literals under a scenarios root.

    Layout:
      scenarios/{scenario_id}/fs.json

    Public API:
      load_fs(session) -> Dict | None
      load_tree(session) -> Tree | None
    """

    def __init__(self, scenarios_root: Optional[Path] = None):
        self.scenarios_root = Path(scenarios_root or Path("scenarios")).resolve()

    def _scenario_dir(self, scenario_id: str) -> Path:
        return self.scenarios_root / scenario_id

    def _candidates(self, session: Any) -> List[Path]:
        candidates = []
        scenario_id = getattr(session, "scenario_id", None)
        if scenario_id and scenario_id != "default":
            candidates.append(self._scenario_dir(scenario_id) / "fs.json")
        candidates.append(self._scenario_dir("default") / "fs.json")
        return candidates

    def load_fs(self, session: Any) -> Optional[Dict[str, Any]]:
        """
        Load scenarios/{scenario_id}/fs.json if present and valid, otherwise
        scenarios/default/fs.json. Returns the parsed literal or None.
        """
        for p in self._candidates(session):
            if not p.exists():
                continue
            try:
                obj = json.loads(p.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("could not read %s: %s", p, exc)
                continue
            if not validate_literal(obj):
                logger.warning("ignoring %s: not a tree literal", p)
                continue
            return obj
        return None

    def load_tree(self, session: Any) -> Optional[Tree]:
        literal = self.load_fs(session)
        if literal is None:
            return None
        return build_tree(literal)

    def list_scenarios(self) -> List[str]:
        if not self.scenarios_root.is_dir():
            return []
        return sorted(p.parent.name for p in self.scenarios_root.glob("*/fs.json"))
