from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigLoadError
from .model import FormatCfg
from .paths import find_config

_yaml = YAML(typ="safe")
logger = logging.getLogger(__name__)


def load_config(path: Path) -> FormatCfg:
    """Reads and validates a girdoc.yaml file."""
    if not path.is_file():
        raise ConfigLoadError(f"Config file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise ConfigLoadError(f"Failed to parse config file {path}: {e}") from e
    cfg = FormatCfg.from_dict(raw)
    logger.debug("loaded config from %s", path)
    return cfg


def resolve_config(root: Path, explicit: Optional[Path] = None) -> FormatCfg:
    """
    Config for a run: explicit file, else ./girdoc.yaml, else defaults.
    """
    path = find_config(root, explicit)
    if path is None:
        return FormatCfg()
    return load_config(path)


__all__ = ["load_config", "resolve_config"]
