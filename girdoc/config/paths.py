from __future__ import annotations

from pathlib import Path
from typing import Optional

# Single source of truth for config file discovery.
CFG_FILE = "girdoc.yaml"


def default_config_path(root: Path) -> Path:
    """Path to ./girdoc.yaml relative to the given directory."""
    return (root / CFG_FILE).resolve()


def find_config(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    """
    An explicit path always wins (even if missing, so the loader can report it);
    otherwise girdoc.yaml in `root` if present.
    """
    if explicit is not None:
        return explicit
    p = default_config_path(root)
    return p if p.is_file() else None
