"""Text -> nid pipeline."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import Nid


def normalize(text: str, nid: "Nid") -> str:
    """Return the nid for ``text`` under the given policy.

    Steps run in a fixed order: lower-case, separators to spaces, trim and
    squish whitespace, transliterate (spaces become dashes), strip characters
    outside the alphabet, collapse dash runs, trim edge dashes. Tables only
    need lower-case keys because folding always happens first.
    """

    if not text:
        return ""
    return _strip(nid, _transliterate(nid, _squish(nid, _prepare(nid, text))))


def _prepare(nid: "Nid", text: str) -> str:
    return text.lower().translate(nid.separators).strip()


def _squish(nid: "Nid", text: str) -> str:
    return nid.squish_pattern.sub(" ", text)


def _transliterate(nid: "Nid", text: str) -> str:
    return text.translate(nid.transliterations)


def _strip(nid: "Nid", text: str) -> str:
    stripped = nid.strip_pattern.sub("", text)
    return nid.dash_pattern.sub("-", stripped).strip("-")
