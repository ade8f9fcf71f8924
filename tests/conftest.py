# Add project root to sys.path so pytest can import the treeshell package
import sys
from pathlib import Path

import pytest

# This makes `import treeshell` work when running `pytest` from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from treeshell.builder import build_tree  # noqa: E402

DOCS_LITERAL = {
    "home": {
        "_META_TYPE": "dir",
        "docs": {
            "_META_TYPE": "dir",
            "readme.txt": {"_META_TYPE": "file", "_META_FILE_CONTENTS": "hi"},
            "drafts": {"_META_TYPE": "dir"},
        },
        "notes.txt": {"_META_TYPE": "file", "_META_FILE_CONTENTS": "todo"},
    },
    "etc": {"_META_TYPE": "dir", "hosts": {"_META_TYPE": "file", "_META_FILE_CONTENTS": "127.0.0.1 localhost"}},
}


@pytest.fixture
def docs_tree():
    return build_tree(DOCS_LITERAL)
