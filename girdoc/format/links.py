from __future__ import annotations

from typing import Dict, Optional

from ..config.model import FormatCfg, MemberStyle
from ..index.model import ConstantInfo, EnumInfo, MemberInfo, ObjectInfo, FunctionInfo
from ..naming import bitfield_member_name, enum_member_name

# Fixed links for C literals, independent of the index.
LITERAL_LINKS: Dict[str, str] = {
    "TRUE": "[`true`]",
    "FALSE": "[`false`]",
    "NULL": "[`None`]",
}


class LinkFormatter:
    """
    Renders resolved symbols as intra-doc links:

        [`Widget`][crate::Widget]
        [`Align::Fill`][crate::Align::Fill]
        [`Widget::show()`][crate::prelude::WidgetExt::show()]
    """

    def __init__(
        self,
        prefix: str = "crate",
        trait_module: str = "prelude",
        flags_member_style: MemberStyle = "camel",
    ):
        self.prefix = prefix
        self.trait_module = trait_module
        self.flags_member_style = flags_member_style

    @classmethod
    def from_config(cls, cfg: FormatCfg) -> LinkFormatter:
        return cls(
            prefix=cfg.link_prefix,
            trait_module=cfg.trait_module,
            flags_member_style=cfg.flags_member_style,
        )

    def _link(self, visible: str, target: str) -> str:
        return f"[`{visible}`][{self.prefix}::{target}]"

    # --- types / values --------------------------------------------------------

    def type_link(self, rust_path: str) -> str:
        return self._link(rust_path, rust_path)

    def enum_member_link(self, owner: EnumInfo, member: MemberInfo) -> str:
        path = f"{owner.rust_path}::{enum_member_name(member.name)}"
        return self._link(path, path)

    def flags_member_link(self, owner: EnumInfo, member: MemberInfo) -> str:
        if self.flags_member_style == "upper":
            name = bitfield_member_name(member.name)
        else:
            name = enum_member_name(member.name)
        path = f"{owner.rust_path}::{name}"
        return self._link(path, path)

    def constant_link(self, const: ConstantInfo) -> str:
        return self._link(const.rust_path, const.rust_path)

    def literal_link(self, literal: str) -> Optional[str]:
        return LITERAL_LINKS.get(literal)

    # --- functions -------------------------------------------------------------

    def object_parent(self, obj: ObjectInfo, fn: FunctionInfo) -> tuple[str, str]:
        """
        (link parent, visible parent) for a function declared on `obj`.

        Methods of non-final types are implemented on the extension trait,
        so the link targets `prelude::<Trait>` while the visible text keeps
        the type name.
        """
        if fn.kind == "method" and not obj.final:
            trait_path = f"{self.trait_module}::{obj.ext_trait}"
            parent = f"{obj.crate}::{trait_path}" if obj.crate else trait_path
            return parent, obj.name
        return obj.rust_path, obj.name

    def function_link(
        self,
        fn: FunctionInfo,
        parent: Optional[str] = None,
        visible_parent: Optional[str] = None,
    ) -> str:
        if parent is None:
            return self._link(f"{fn.name}()", f"{fn.name}()")
        visible = visible_parent or parent
        return self._link(f"{visible}::{fn.name}()", f"{parent}::{fn.name}()")


__all__ = ["LITERAL_LINKS", "LinkFormatter"]
