"""
Symbol resolution against the index.

Every public method tries a fixed sequence of lookups and commits to the
first one that produces a link. Misses are not errors: they come back as
an unresolved Outcome carrying diagnostics, and the caller decides how to
render and report them.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from ..config.model import (
    DEFAULT_EXPECTED_ABSENT_FUNCTIONS,
    DEFAULT_IGNORED_C_TYPES,
    FormatCfg,
)
from ..index.model import SymbolIndex, TypeInfo
from ..types import Diagnostic, Outcome, Severity
from .links import LinkFormatter

Lookup = Callable[[], Optional[str]]


def _first_hit(lookups: Iterable[Lookup]) -> Optional[str]:
    for lookup in lookups:
        link = lookup()
        if link is not None:
            return link
    return None


def _info(message: str, token: str) -> Diagnostic:
    return Diagnostic(Severity.INFO, message, token)


def _warn(message: str, token: str) -> Diagnostic:
    return Diagnostic(Severity.WARNING, message, token)


class SymbolResolver:
    """
    Resolves C-level names to links.

    Args:
        index: read-only symbol index
        links: link formatter
        ignored_c_types: C types that never resolve and are not reported
        expected_absent_functions: functions whose absence is only reported at info level
    """

    def __init__(
        self,
        index: SymbolIndex,
        links: Optional[LinkFormatter] = None,
        *,
        ignored_c_types: Iterable[str] = DEFAULT_IGNORED_C_TYPES,
        expected_absent_functions: Iterable[str] = DEFAULT_EXPECTED_ABSENT_FUNCTIONS,
    ):
        self.index = index
        self.links = links or LinkFormatter()
        self.ignored_c_types = frozenset(ignored_c_types)
        self.expected_absent_functions = frozenset(expected_absent_functions)

    @classmethod
    def from_config(cls, index: SymbolIndex, cfg: FormatCfg) -> SymbolResolver:
        return cls(
            index,
            LinkFormatter.from_config(cfg),
            ignored_c_types=cfg.ignored_c_types,
            expected_absent_functions=cfg.expected_absent_functions,
        )

    # ------------------------------------------------------------------ #
    # Functions
    # ------------------------------------------------------------------ #

    def resolve_function(self, identifier: str, scope: Optional[str] = None, *, text: Optional[str] = None) -> Outcome:
        """
        `identifier()` with an optional scope prefix (`GtkWidget.show()`).

        The scoped method is tried first; then object methods, record
        methods and global functions, all keyed by C identifier.
        """
        text = text or f"{identifier}()"
        lookups: list[Lookup] = []
        if scope:
            lookups.append(lambda: self._method_link(scope, identifier))
        lookups += [
            lambda: self._object_function_link(identifier),
            lambda: self._record_function_link(identifier),
            lambda: self._global_function_link(identifier),
        ]
        link = _first_hit(lookups)
        if link is not None:
            return Outcome.hit(link, text)

        diagnostics = [_info(f"Function not found, falling back to symbol name `{identifier}`", text)]
        if identifier not in self.expected_absent_functions:
            diagnostics.append(_warn(f"Function `{identifier}` was not found", text))
        return Outcome.miss(text, *diagnostics)

    def _object_function_link(self, c_identifier: str) -> Optional[str]:
        found = self.index.object_function(c_identifier)
        if found is None:
            return None
        obj, fn = found
        parent, visible = self.links.object_parent(obj, fn)
        return self.links.function_link(fn, parent, visible)

    def _record_function_link(self, c_identifier: str) -> Optional[str]:
        found = self.index.record_function(c_identifier)
        if found is None:
            return None
        rec, fn = found
        return self.links.function_link(fn, rec.rust_path)

    def _global_function_link(self, c_identifier: str) -> Optional[str]:
        fn = self.index.function_by_c_identifier(c_identifier)
        if fn is None:
            return None
        return self.links.function_link(fn)

    # ------------------------------------------------------------------ #
    # Types and methods
    # ------------------------------------------------------------------ #

    def resolve_type_or_method(
        self,
        type_name: str,
        member_name: Optional[str] = None,
        *,
        text: Optional[str] = None,
    ) -> Outcome:
        """`#Type` or `#Type.method`."""
        if member_name is None:
            return self.resolve_type(type_name, text=text)
        text = text or f"{type_name}.{member_name}"
        link = self._method_link(type_name, member_name)
        if link is not None:
            return Outcome.hit(link, text)
        return Outcome.miss(text, _warn(f"Method `{member_name}` of type `{type_name}` was not found", text))

    def _method_link(self, type_name: str, method: str) -> Optional[str]:
        return _first_hit([
            lambda: self._object_method_link(type_name, method),
            lambda: self._record_method_link(type_name, method),
        ])

    def _object_method_link(self, type_name: str, method: str) -> Optional[str]:
        obj = self.index.object_by_any_name(type_name)
        if obj is None:
            return None
        found = self.index.find_method(obj, method)
        if found is None:
            return None
        # link the type that declares the method, not the receiver
        declaring, fn = found
        parent, visible = self.links.object_parent(declaring, fn)
        return self.links.function_link(fn, parent, visible)

    def _record_method_link(self, type_name: str, method: str) -> Optional[str]:
        rec = self.index.record_by_c_type(type_name)
        if rec is None:
            return None
        fn = rec.function_by_name(method)
        if fn is None:
            return None
        return self.links.function_link(fn, rec.rust_path)

    def resolve_type(self, type_name: str, *, text: Optional[str] = None) -> Outcome:
        """
        Object, record, enumeration or flags by C type name.

        A miss falls back to constants and enum/flags members; a hit there
        is kept but reported as a classification mismatch.
        """
        text = text or type_name
        if type_name in self.ignored_c_types:
            return Outcome.miss(text)

        link = _first_hit([
            lambda: self._type_link(self.index.object_by_c_type(type_name)),
            lambda: self._type_link(self.index.record_by_c_type(type_name)),
            lambda: self._type_link(self.index.enum_by_c_type(type_name)),
            lambda: self._type_link(self.index.flags_by_c_type(type_name)),
        ])
        if link is not None:
            return Outcome.hit(link, text)

        link = self._constant_or_member_link(type_name)
        if link is not None:
            return Outcome.hit(
                link,
                text,
                _warn(f"`{type_name}` should be a type (`#`) but was parsed as constant or variant (`%`)", text),
            )
        return Outcome.miss(text, _warn(f"Object/Interface/Record `{type_name}` was not found", text))

    def _type_link(self, info: Optional[TypeInfo]) -> Optional[str]:
        if info is None:
            return None
        return self.links.type_link(info.rust_path)

    # ------------------------------------------------------------------ #
    # Constants and members
    # ------------------------------------------------------------------ #

    def resolve_constant_or_member(self, symbol: str, *, text: Optional[str] = None) -> Outcome:
        """`%SYMBOL`: flags member, enum member, then global constant."""
        text = text or symbol
        link = self._constant_or_member_link(symbol)
        if link is not None:
            return Outcome.hit(link, text)
        return Outcome.miss(text, _warn(f"Constant/Flag variant/Enum member `{symbol}` was not found", text))

    def _constant_or_member_link(self, symbol: str) -> Optional[str]:
        return _first_hit([
            lambda: self._flags_member_link(symbol),
            lambda: self._enum_member_link(symbol),
            lambda: self._constant_link(symbol),
        ])

    def _flags_member_link(self, symbol: str) -> Optional[str]:
        found = self.index.flags_member(symbol)
        return self.links.flags_member_link(*found) if found else None

    def _enum_member_link(self, symbol: str) -> Optional[str]:
        found = self.index.enum_member(symbol)
        return self.links.enum_member_link(*found) if found else None

    def _constant_link(self, symbol: str) -> Optional[str]:
        const = self.index.constant_by_c_identifier(symbol)
        return self.links.constant_link(const) if const else None


__all__ = ["SymbolResolver"]
