"""The immutable policy object shared by the normalizer and the validator."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from .errors import ErrorCode, NidError
from .normalization import normalize
from .transliterations import SEPARATORS, TRANSLITERATIONS
from .validation import is_possible

PatternLike = Union[str, re.Pattern[str]]
TranslateTable = Mapping[int, str]

VALID_PATTERN = r"[0-9a-z-]*"  # Note: allows empty nids
SQUISH_PATTERN = r"\s+"
STRIP_PATTERN = r"[^0-9a-z-]"
DASH_PATTERN = r"-+"


@dataclass(frozen=True, slots=True)
class Nid:
    """Patterns and character tables used to create and validate nids."""

    valid_pattern: re.Pattern[str]
    squish_pattern: re.Pattern[str]
    strip_pattern: re.Pattern[str]
    dash_pattern: re.Pattern[str]
    separators: TranslateTable = field(hash=False)
    transliterations: TranslateTable = field(hash=False)

    @classmethod
    def strict(cls) -> "Nid":
        return cls(
            valid_pattern=compile_pattern(VALID_PATTERN, "valid_pattern"),
            squish_pattern=compile_pattern(SQUISH_PATTERN, "squish_pattern"),
            strip_pattern=compile_pattern(STRIP_PATTERN, "strip_pattern"),
            dash_pattern=compile_pattern(DASH_PATTERN, "dash_pattern"),
            separators=build_table(SEPARATORS, "separators"),
            transliterations=build_table(TRANSLITERATIONS, "transliterations"),
        )

    def case(self, text: str) -> str:
        """Return a nid based on the input text."""

        return normalize(text, self)

    def possible(self, candidate: str) -> bool:
        """Check if a candidate string is a possible nid.

        The empty string is a possible nid; callers that need a non-empty
        value must check the length themselves.
        """

        return is_possible(candidate, self)


def compile_pattern(value: PatternLike, name: str) -> re.Pattern[str]:
    if isinstance(value, re.Pattern):
        return value
    try:
        return re.compile(value)
    except (re.error, TypeError) as exc:
        raise NidError(
            ErrorCode.PATTERN_ERROR,
            f"{name} is not a valid regular expression: {exc}",
            context={"field": name, "pattern": value},
        ) from exc


def build_table(mapping: Mapping[str, str], name: str) -> TranslateTable:
    """Turn a character -> replacement mapping into a read-only translate table."""

    table = {}
    for source, replacement in mapping.items():
        if not isinstance(source, str) or len(source) != 1:
            raise NidError(
                ErrorCode.TABLE_ERROR,
                f"{name} keys must be single characters, got {source!r}",
                context={"field": name, "key": source},
            )
        if not isinstance(replacement, str):
            raise NidError(
                ErrorCode.TABLE_ERROR,
                f"{name}[{source!r}] must be a string",
                context={"field": name, "key": source},
            )
        table[ord(source)] = replacement
    return MappingProxyType(table)
