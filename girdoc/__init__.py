from .config import FormatCfg
from .diagnostics import CollectingSink, LoggingSink
from .errors import GirdocUserError
from .format import Translator, translate
from .index import SymbolIndex, load_index

__all__ = [
    "CollectingSink",
    "FormatCfg",
    "GirdocUserError",
    "LoggingSink",
    "SymbolIndex",
    "Translator",
    "load_index",
    "translate",
]
