from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Literal, Optional, Tuple, TypeVar, Union

FunctionKind = Literal["method", "function", "constructor"]


@dataclass(frozen=True)
class FunctionInfo:
    name: str                          # target-language name ("show")
    c_identifier: str                  # "gtk_widget_show"
    kind: FunctionKind = "method"


@dataclass(frozen=True)
class MemberInfo:
    name: str                          # short member name ("fill")
    c_identifier: str                  # "GTK_ALIGN_FILL"
    ignored: bool = False


def _rust_path(crate: Optional[str], name: str) -> str:
    return f"{crate}::{name}" if crate else name


@dataclass(frozen=True)
class ObjectInfo:
    """
    Class or interface.

    `parents` lists ancestor classes and implemented interfaces by public
    name, nearest first. Methods of non-final types live on the extension
    trait (`trait_name`, defaults to `<name>Ext`).
    """
    name: str
    c_type: str
    full_name: str = ""
    crate: Optional[str] = None
    final: bool = False
    trait_name: Optional[str] = None
    parents: Tuple[str, ...] = ()
    functions: Tuple[FunctionInfo, ...] = ()

    @property
    def rust_path(self) -> str:
        return _rust_path(self.crate, self.name)

    @property
    def ext_trait(self) -> str:
        return self.trait_name or f"{self.name}Ext"

    def function_by_c_identifier(self, c_identifier: str) -> Optional[FunctionInfo]:
        return next((f for f in self.functions if f.c_identifier == c_identifier), None)

    def function_by_name(self, name: str) -> Optional[FunctionInfo]:
        return next((f for f in self.functions if f.name == name), None)


@dataclass(frozen=True)
class RecordInfo:
    name: str
    c_type: str
    crate: Optional[str] = None
    functions: Tuple[FunctionInfo, ...] = ()

    @property
    def rust_path(self) -> str:
        return _rust_path(self.crate, self.name)

    def function_by_c_identifier(self, c_identifier: str) -> Optional[FunctionInfo]:
        return next((f for f in self.functions if f.c_identifier == c_identifier), None)

    def function_by_name(self, name: str) -> Optional[FunctionInfo]:
        return next((f for f in self.functions if f.name == name), None)


@dataclass(frozen=True)
class EnumInfo:
    """Enumeration or flags type; both share the same shape."""
    name: str
    c_type: str
    crate: Optional[str] = None
    members: Tuple[MemberInfo, ...] = ()

    @property
    def rust_path(self) -> str:
        return _rust_path(self.crate, self.name)

    def member_by_c_identifier(self, c_identifier: str) -> Optional[MemberInfo]:
        """Non-ignored member with the given C identifier."""
        return next((m for m in self.members if m.c_identifier == c_identifier and not m.ignored), None)


@dataclass(frozen=True)
class ConstantInfo:
    name: str
    c_identifier: str
    crate: Optional[str] = None

    @property
    def rust_path(self) -> str:
        return _rust_path(self.crate, self.name)


TypeInfo = Union[ObjectInfo, RecordInfo, EnumInfo]
_T = TypeVar("_T")


def _first_wins(items: Iterable[_T], key) -> Dict[str, _T]:
    out: Dict[str, _T] = {}
    for it in items:
        k = key(it)
        if k:
            out.setdefault(k, it)
    return out


@dataclass(frozen=True)
class SymbolIndex:
    """
    Read-only symbol index.

    Tables are tuples in declaration order; lookup dicts are built once
    in __post_init__ (first declaration wins on duplicate keys). Nothing
    mutates the index afterwards, so one instance can be shared between
    concurrent translations.
    """
    objects: Tuple[ObjectInfo, ...] = ()
    records: Tuple[RecordInfo, ...] = ()
    enumerations: Tuple[EnumInfo, ...] = ()
    flags: Tuple[EnumInfo, ...] = ()
    functions: Tuple[FunctionInfo, ...] = ()
    constants: Tuple[ConstantInfo, ...] = ()

    _objects_by_name: Dict[str, ObjectInfo] = field(init=False, repr=False, compare=False)
    _objects_by_c_type: Dict[str, ObjectInfo] = field(init=False, repr=False, compare=False)
    _objects_by_full_name: Dict[str, ObjectInfo] = field(init=False, repr=False, compare=False)
    _records_by_c_type: Dict[str, RecordInfo] = field(init=False, repr=False, compare=False)
    _enums_by_c_type: Dict[str, EnumInfo] = field(init=False, repr=False, compare=False)
    _flags_by_c_type: Dict[str, EnumInfo] = field(init=False, repr=False, compare=False)
    _functions_by_c_id: Dict[str, FunctionInfo] = field(init=False, repr=False, compare=False)
    _constants_by_c_id: Dict[str, ConstantInfo] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tables = {
            "_objects_by_name": _first_wins(self.objects, lambda o: o.name),
            "_objects_by_c_type": _first_wins(self.objects, lambda o: o.c_type),
            "_objects_by_full_name": _first_wins(self.objects, lambda o: o.full_name),
            "_records_by_c_type": _first_wins(self.records, lambda r: r.c_type),
            "_enums_by_c_type": _first_wins(self.enumerations, lambda e: e.c_type),
            "_flags_by_c_type": _first_wins(self.flags, lambda f: f.c_type),
            "_functions_by_c_id": _first_wins(self.functions, lambda f: f.c_identifier),
            "_constants_by_c_id": _first_wins(self.constants, lambda c: c.c_identifier),
        }
        for attr, table in tables.items():
            object.__setattr__(self, attr, table)

    # --- types -----------------------------------------------------------

    def object_by_name(self, name: str) -> Optional[ObjectInfo]:
        return self._objects_by_name.get(name)

    def object_by_c_type(self, c_type: str) -> Optional[ObjectInfo]:
        return self._objects_by_c_type.get(c_type)

    def object_by_any_name(self, name: str) -> Optional[ObjectInfo]:
        """C type first, then public name, then dotted full name ('Gtk.Widget')."""
        return (
            self._objects_by_c_type.get(name)
            or self._objects_by_name.get(name)
            or self._objects_by_full_name.get(name)
        )

    def record_by_c_type(self, c_type: str) -> Optional[RecordInfo]:
        return self._records_by_c_type.get(c_type)

    def enum_by_c_type(self, c_type: str) -> Optional[EnumInfo]:
        return self._enums_by_c_type.get(c_type)

    def flags_by_c_type(self, c_type: str) -> Optional[EnumInfo]:
        return self._flags_by_c_type.get(c_type)

    # --- members / globals -----------------------------------------------

    def flags_member(self, c_identifier: str) -> Optional[Tuple[EnumInfo, MemberInfo]]:
        return _find_member(self.flags, c_identifier)

    def enum_member(self, c_identifier: str) -> Optional[Tuple[EnumInfo, MemberInfo]]:
        return _find_member(self.enumerations, c_identifier)

    def function_by_c_identifier(self, c_identifier: str) -> Optional[FunctionInfo]:
        return self._functions_by_c_id.get(c_identifier)

    def constant_by_c_identifier(self, c_identifier: str) -> Optional[ConstantInfo]:
        return self._constants_by_c_id.get(c_identifier)

    # --- methods -----------------------------------------------------------

    def object_function(self, c_identifier: str) -> Optional[Tuple[ObjectInfo, FunctionInfo]]:
        """First object (declaration order) declaring a function with this C identifier."""
        for obj in self.objects:
            fn = obj.function_by_c_identifier(c_identifier)
            if fn is not None:
                return obj, fn
        return None

    def record_function(self, c_identifier: str) -> Optional[Tuple[RecordInfo, FunctionInfo]]:
        for rec in self.records:
            fn = rec.function_by_c_identifier(c_identifier)
            if fn is not None:
                return rec, fn
        return None

    def iter_ancestry(self, obj: ObjectInfo) -> Iterator[ObjectInfo]:
        """
        The object itself, then its parents breadth-first, nearest first.
        Unknown parent names are skipped; each type is visited once.
        """
        seen = {obj.name}
        queue = deque([obj])
        while queue:
            cur = queue.popleft()
            yield cur
            for parent_name in cur.parents:
                if parent_name in seen:
                    continue
                seen.add(parent_name)
                parent = self._objects_by_name.get(parent_name)
                if parent is not None:
                    queue.append(parent)

    def find_method(self, obj: ObjectInfo, name: str) -> Optional[Tuple[ObjectInfo, FunctionInfo]]:
        """
        Method `name` as seen on `obj`: own methods first, then inherited ones.
        Returns the DECLARING type together with the function.
        """
        for owner in self.iter_ancestry(obj):
            fn = owner.function_by_name(name)
            if fn is not None:
                return owner, fn
        return None


def _find_member(types: Iterable[EnumInfo], c_identifier: str) -> Optional[Tuple[EnumInfo, MemberInfo]]:
    for t in types:
        m = t.member_by_c_identifier(c_identifier)
        if m is not None:
            return t, m
    return None


__all__ = [
    "FunctionKind",
    "FunctionInfo",
    "MemberInfo",
    "ObjectInfo",
    "RecordInfo",
    "EnumInfo",
    "ConstantInfo",
    "TypeInfo",
    "SymbolIndex",
]
