from .load import index_from_dict, load_index
from .model import (
    ConstantInfo,
    EnumInfo,
    FunctionInfo,
    MemberInfo,
    ObjectInfo,
    RecordInfo,
    SymbolIndex,
)

__all__ = [
    "ConstantInfo",
    "EnumInfo",
    "FunctionInfo",
    "MemberInfo",
    "ObjectInfo",
    "RecordInfo",
    "SymbolIndex",
    "index_from_dict",
    "load_index",
]
