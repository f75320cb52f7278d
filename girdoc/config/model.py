from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Literal, Optional

from ..errors import ConfigLoadError

MemberStyle = Literal["camel", "upper"]

DEFAULT_IGNORED_C_TYPES: tuple[str, ...] = (
    "gconstpointer",
    "guint16",
    "guint",
    "gunicode",
    "gchararray",
    "GList",
)

DEFAULT_EXPECTED_ABSENT_FUNCTIONS: tuple[str, ...] = (
    "g_object_unref",
    "g_object_ref",
    "g_free",
    "g_list_free",
    "g_strfreev",
    "printf",
)

DEFAULT_BARE_TYPE_PREFIXES: tuple[str, ...] = ("Gdk", "Gsk", "Gtk", "Pango")


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigLoadError(f"{ctx}: unknown key(s): {', '.join(sorted(map(str, extra)))}")


def _str_list(val: Any, *, ctx: str) -> List[str]:
    if not isinstance(val, (list, tuple)) or not all(isinstance(x, str) and x for x in val):
        raise ConfigLoadError(f"{ctx}: must be a list of non-empty strings")
    return list(val)


def _non_empty_str(val: Any, *, ctx: str) -> str:
    if not isinstance(val, str) or not val.strip():
        raise ConfigLoadError(f"{ctx}: must be a non-empty string")
    return val.strip()


@dataclass
class CodeBlockCfg:
    """
    Code block handling.
    """
    default_language: str = "text"
    # keys are compared after strip/lower-casing
    language_aliases: Dict[str, str] = field(default_factory=dict)
    # False → block bodies are copied verbatim
    scan_contents: bool = True

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> CodeBlockCfg:
        if not d:
            return CodeBlockCfg()
        if not isinstance(d, dict):
            raise ConfigLoadError("code_blocks: must be a mapping")
        _assert_only_keys(d, ["default_language", "language_aliases", "scan_contents"], ctx="code_blocks")
        default_language = _non_empty_str(d.get("default_language", "text"), ctx="code_blocks.default_language")
        aliases_raw = d.get("language_aliases", {}) or {}
        if not isinstance(aliases_raw, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in aliases_raw.items()
        ):
            raise ConfigLoadError("code_blocks.language_aliases: must be a mapping of strings")
        scan_contents = d.get("scan_contents", True)
        if not isinstance(scan_contents, bool):
            raise ConfigLoadError("code_blocks.scan_contents: must be a boolean")
        return CodeBlockCfg(
            default_language=default_language.lower(),
            language_aliases={k.strip().lower(): v.strip() for k, v in aliases_raw.items()},
            scan_contents=scan_contents,
        )

    def normalize_language(self, raw: Optional[str]) -> str:
        """Fence tag for a `<!-- language="X" -->` value (None → default language)."""
        if raw is None:
            return self.default_language
        lang = raw.strip().lower()
        if not lang:
            return self.default_language
        return self.language_aliases.get(lang, lang)


@dataclass
class FormatCfg:
    """
    Translation settings: link rendering, lookup exclusions and code blocks.
    """
    link_prefix: str = "crate"
    trait_module: str = "prelude"
    flags_member_style: MemberStyle = "camel"
    bare_type_prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_BARE_TYPE_PREFIXES))
    ignored_c_types: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_C_TYPES))
    expected_absent_functions: List[str] = field(default_factory=lambda: list(DEFAULT_EXPECTED_ABSENT_FUNCTIONS))
    code_blocks: CodeBlockCfg = field(default_factory=CodeBlockCfg)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> FormatCfg:
        if not d:
            return FormatCfg()
        if not isinstance(d, dict):
            raise ConfigLoadError("config: must be a mapping")
        _assert_only_keys(
            d,
            [
                "link_prefix", "trait_module", "flags_member_style",
                "bare_type_prefixes", "ignored_c_types", "expected_absent_functions",
                "code_blocks",
            ],
            ctx="config",
        )
        cfg = FormatCfg()
        if "link_prefix" in d:
            cfg.link_prefix = _non_empty_str(d["link_prefix"], ctx="link_prefix")
        if "trait_module" in d:
            cfg.trait_module = _non_empty_str(d["trait_module"], ctx="trait_module")
        style = d.get("flags_member_style", cfg.flags_member_style)
        if style not in ("camel", "upper"):
            raise ConfigLoadError(f"flags_member_style: must be one of 'camel'|'upper', got: {style!r}")
        cfg.flags_member_style = style
        # Lists replace the defaults entirely; an explicit [] disables the list.
        if "bare_type_prefixes" in d:
            cfg.bare_type_prefixes = _str_list(d["bare_type_prefixes"] or [], ctx="bare_type_prefixes")
        if "ignored_c_types" in d:
            cfg.ignored_c_types = _str_list(d["ignored_c_types"] or [], ctx="ignored_c_types")
        if "expected_absent_functions" in d:
            cfg.expected_absent_functions = _str_list(
                d["expected_absent_functions"] or [], ctx="expected_absent_functions"
            )
        cfg.code_blocks = CodeBlockCfg.from_dict(d.get("code_blocks"))
        return cfg


__all__ = [
    "MemberStyle",
    "CodeBlockCfg",
    "FormatCfg",
    "DEFAULT_IGNORED_C_TYPES",
    "DEFAULT_EXPECTED_ABSENT_FUNCTIONS",
    "DEFAULT_BARE_TYPE_PREFIXES",
]
