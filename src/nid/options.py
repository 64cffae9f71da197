"""Functional options for building :class:`Nid` policies.

Each option is a callable taking a policy and returning a new one. Options
built from ``None`` or an empty value leave the policy untouched, so callers
can pass optional overrides straight through.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Callable, Mapping, Optional

from .models import Nid, PatternLike, build_table, compile_pattern
from .transliterations import TRANSLITERATIONS_WITH_AAO

Option = Callable[[Nid], Nid]

VALID_PATTERN_WITH_AAO = r"[0-9a-zåäö-]*"  # Note: allows empty nids
STRIP_PATTERN_WITH_AAO = r"[^0-9a-zåäö-]"


def new(*options: Option) -> Nid:
    """Return a strict policy with ``options`` applied in order."""

    nid = Nid.strict()
    for option in options:
        nid = option(nid)
    return nid


def set_valid_pattern(pattern: Optional[PatternLike]) -> Option:
    return _pattern_option("valid_pattern", pattern)


def set_strip_pattern(pattern: Optional[PatternLike]) -> Option:
    return _pattern_option("strip_pattern", pattern)


def set_squish_pattern(pattern: Optional[PatternLike]) -> Option:
    return _pattern_option("squish_pattern", pattern)


def set_dash_pattern(pattern: Optional[PatternLike]) -> Option:
    return _pattern_option("dash_pattern", pattern)


def set_transliterations(table: Optional[Mapping[str, str]]) -> Option:
    return _table_option("transliterations", table)


def set_separators(table: Optional[Mapping[str, str]]) -> Option:
    return _table_option("separators", table)


def allow_aao(nid: Nid) -> Nid:
    """Allow å, ä and ö in nids (æ and ø become ä and ö)."""

    nid = set_valid_pattern(VALID_PATTERN_WITH_AAO)(nid)
    nid = set_strip_pattern(STRIP_PATTERN_WITH_AAO)(nid)
    return set_transliterations(TRANSLITERATIONS_WITH_AAO)(nid)


def _pattern_option(field: str, pattern: Optional[PatternLike]) -> Option:
    # Compiled eagerly so a bad pattern fails where the option is built.
    compiled = compile_pattern(pattern, field) if pattern else None

    def apply(nid: Nid) -> Nid:
        if compiled is None:
            return nid
        return replace(nid, **{field: compiled})

    return apply


def _table_option(field: str, table: Optional[Mapping[str, str]]) -> Option:
    built = build_table(table, field) if table else None

    def apply(nid: Nid) -> Nid:
        if built is None:
            return nid
        return replace(nid, **{field: built})

    return apply
