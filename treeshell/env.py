"""
Utilities for loading environment variables from a .env file.
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@lru_cache(maxsize=1)
def load_env() -> Optional[Path]:
    """
    Load the nearest .env (searching upward from the working directory, then
    the repository root) once. Existing environment variables take precedence.
    Returns the path that was loaded, or None when no .env exists.
    """
    found = find_dotenv(usecwd=True)
    if found:
        dotenv_path = Path(found)
    else:
        dotenv_path = Path(__file__).resolve().parents[1] / ".env"
        if not dotenv_path.exists():
            return None
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return dotenv_path
