"""Predicate deciding whether a string is a possible nid."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import Nid

DOUBLE_DASH = "--"


def is_possible(candidate: str, nid: "Nid") -> bool:
    # Repeated dashes are rejected here so valid patterns only describe the alphabet.
    if DOUBLE_DASH in candidate:
        return False
    return nid.valid_pattern.fullmatch(candidate) is not None
