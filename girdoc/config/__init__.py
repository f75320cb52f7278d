from .load import load_config, resolve_config
from .model import CodeBlockCfg, FormatCfg
from .paths import CFG_FILE

__all__ = ["CFG_FILE", "CodeBlockCfg", "FormatCfg", "load_config", "resolve_config"]
