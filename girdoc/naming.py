from __future__ import annotations

import re

_SPLIT = re.compile(r"[_\-]+")


def to_camel(name: str) -> str:
    """'flag_one' → 'FlagOne'. Empty parts (leading/double underscores) are dropped."""
    return "".join(part[:1].upper() + part[1:].lower() for part in _SPLIT.split(name) if part)


def enum_member_name(name: str) -> str:
    """
    Enum variant name for a C member short name.
    Names that do not start with a letter get a leading '_' ('2d' → '_2d').
    """
    camel = to_camel(name)
    if name[:1].isalpha():
        return camel
    return f"_{camel}"


def bitfield_member_name(name: str) -> str:
    """Bitflags constant name: upper-cased, same '_' rule as enum members."""
    upper = name.upper()
    if name[:1].isalpha():
        return upper
    return f"_{upper}"


__all__ = ["to_camel", "enum_member_name", "bitfield_member_name"]
