from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import IndexLoadError
from .model import (
    ConstantInfo,
    EnumInfo,
    FunctionInfo,
    MemberInfo,
    ObjectInfo,
    RecordInfo,
    SymbolIndex,
)

# JSON is a subset of YAML, so one safe loader reads both formats.
_yaml = YAML(typ="safe")
logger = logging.getLogger(__name__)

_TOP_KEYS = ("objects", "records", "enumerations", "flags", "functions", "constants")
_FUNCTION_KINDS = ("method", "function", "constructor")


# --- helpers ---------------------------------------------------------------

def _assert_only_keys(d: Mapping[str, Any], allowed: Iterable[str], *, ctx: str) -> None:
    extra = set(d.keys()) - set(allowed)
    if extra:
        raise IndexLoadError(f"{ctx}: unknown key(s): {', '.join(sorted(map(str, extra)))}")


def _mapping(node: Any, ctx: str) -> Mapping[str, Any]:
    if not isinstance(node, dict):
        raise IndexLoadError(f"{ctx}: must be a mapping")
    return node


def _seq(node: Any, ctx: str) -> List[Any]:
    if node is None:
        return []
    if not isinstance(node, list):
        raise IndexLoadError(f"{ctx}: must be a list")
    return node


def _str(d: Mapping[str, Any], key: str, ctx: str, *, required: bool = True) -> Optional[str]:
    val = d.get(key)
    if val is None:
        if required:
            raise IndexLoadError(f"{ctx}.{key}: required")
        return None
    if not isinstance(val, str) or not val:
        raise IndexLoadError(f"{ctx}.{key}: must be a non-empty string")
    return val


def _bool(d: Mapping[str, Any], key: str, ctx: str) -> bool:
    val = d.get(key, False)
    if not isinstance(val, bool):
        raise IndexLoadError(f"{ctx}.{key}: must be a boolean")
    return val


# --- entries ---------------------------------------------------------------

def _function(node: Any, ctx: str, *, default_kind: str) -> FunctionInfo:
    d = _mapping(node, ctx)
    _assert_only_keys(d, ["name", "c_identifier", "kind"], ctx=ctx)
    kind = d.get("kind", default_kind)
    if kind not in _FUNCTION_KINDS:
        raise IndexLoadError(f"{ctx}.kind: must be one of {'|'.join(_FUNCTION_KINDS)}, got: {kind!r}")
    return FunctionInfo(
        name=_str(d, "name", ctx),
        c_identifier=_str(d, "c_identifier", ctx),
        kind=kind,
    )


def _functions(d: Mapping[str, Any], ctx: str, *, default_kind: str) -> Tuple[FunctionInfo, ...]:
    return tuple(
        _function(f, f"{ctx}.functions[{i}]", default_kind=default_kind)
        for i, f in enumerate(_seq(d.get("functions"), f"{ctx}.functions"))
    )


def _object(node: Any, ctx: str) -> ObjectInfo:
    d = _mapping(node, ctx)
    _assert_only_keys(
        d,
        ["name", "c_type", "full_name", "crate", "final", "trait_name", "parents", "functions"],
        ctx=ctx,
    )
    parents = _seq(d.get("parents"), f"{ctx}.parents")
    if not all(isinstance(p, str) for p in parents):
        raise IndexLoadError(f"{ctx}.parents: must be a list of strings")
    return ObjectInfo(
        name=_str(d, "name", ctx),
        c_type=_str(d, "c_type", ctx),
        full_name=_str(d, "full_name", ctx, required=False) or "",
        crate=_str(d, "crate", ctx, required=False),
        final=_bool(d, "final", ctx),
        trait_name=_str(d, "trait_name", ctx, required=False),
        parents=tuple(parents),
        functions=_functions(d, ctx, default_kind="method"),
    )


def _record(node: Any, ctx: str) -> RecordInfo:
    d = _mapping(node, ctx)
    _assert_only_keys(d, ["name", "c_type", "crate", "functions"], ctx=ctx)
    return RecordInfo(
        name=_str(d, "name", ctx),
        c_type=_str(d, "c_type", ctx),
        crate=_str(d, "crate", ctx, required=False),
        functions=_functions(d, ctx, default_kind="method"),
    )


def _member(node: Any, ctx: str) -> MemberInfo:
    d = _mapping(node, ctx)
    _assert_only_keys(d, ["name", "c_identifier", "ignored"], ctx=ctx)
    return MemberInfo(
        name=_str(d, "name", ctx),
        c_identifier=_str(d, "c_identifier", ctx),
        ignored=_bool(d, "ignored", ctx),
    )


def _enum(node: Any, ctx: str) -> EnumInfo:
    d = _mapping(node, ctx)
    _assert_only_keys(d, ["name", "c_type", "crate", "members"], ctx=ctx)
    members = _seq(d.get("members"), f"{ctx}.members")
    return EnumInfo(
        name=_str(d, "name", ctx),
        c_type=_str(d, "c_type", ctx),
        crate=_str(d, "crate", ctx, required=False),
        members=tuple(_member(m, f"{ctx}.members[{i}]") for i, m in enumerate(members)),
    )


def _constant(node: Any, ctx: str) -> ConstantInfo:
    d = _mapping(node, ctx)
    _assert_only_keys(d, ["name", "c_identifier", "crate"], ctx=ctx)
    return ConstantInfo(
        name=_str(d, "name", ctx),
        c_identifier=_str(d, "c_identifier", ctx),
        crate=_str(d, "crate", ctx, required=False),
    )


# --- public API --------------------------------------------------------------

def index_from_dict(raw: Optional[Dict[str, Any]]) -> SymbolIndex:
    """
    Builds a SymbolIndex from the parsed index document.
    Errors carry the path of the offending entry: `objects[2].functions[0].kind: ...`.
    """
    if not raw:
        return SymbolIndex()
    d = _mapping(raw, "index")
    _assert_only_keys(d, _TOP_KEYS, ctx="index")

    def _table(key: str, build) -> tuple:
        return tuple(build(node, f"{key}[{i}]") for i, node in enumerate(_seq(d.get(key), key)))

    return SymbolIndex(
        objects=_table("objects", _object),
        records=_table("records", _record),
        enumerations=_table("enumerations", _enum),
        flags=_table("flags", _enum),
        functions=_table("functions", lambda n, c: _function(n, c, default_kind="function")),
        constants=_table("constants", _constant),
    )


def load_index(path: Path) -> SymbolIndex:
    """Loads a YAML or JSON index file."""
    if not path.is_file():
        raise IndexLoadError(f"Index file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise IndexLoadError(f"Failed to parse index file {path}: {e}") from e
    index = index_from_dict(raw)
    logger.debug(
        "loaded index from %s: %d objects, %d records, %d enums, %d flags",
        path, len(index.objects), len(index.records), len(index.enumerations), len(index.flags),
    )
    return index


__all__ = ["index_from_dict", "load_index"]
