"""Create and validate nids (slugs/tags).

    >>> import nid
    >>> nid.case("Let's_Dance ")
    'lets-dance'
    >>> nid.possible("lets-dance")
    True
    >>> nid.WITH_AAO.case("Fångarna på fortet")
    'fångarna-på-fortet'

Note that ``possible("")`` is ``True``: check the length yourself when an
empty nid is not acceptable.
"""

from .errors import ErrorCode, NidError
from .models import Nid
from .options import (
    allow_aao,
    new,
    set_dash_pattern,
    set_separators,
    set_squish_pattern,
    set_strip_pattern,
    set_transliterations,
    set_valid_pattern,
)

# Default is the policy used by nid.case and nid.possible
DEFAULT = new()

# WITH_AAO allows åäö in nids (and replaces æ/ø with ä/ö)
WITH_AAO = new(allow_aao)


def case(text: str) -> str:
    """Return a nid based on the input text, using :data:`DEFAULT`."""

    return DEFAULT.case(text)


def possible(candidate: str) -> bool:
    """Check if a candidate string is a possible nid under :data:`DEFAULT`."""

    return DEFAULT.possible(candidate)


__all__ = [
    "DEFAULT",
    "WITH_AAO",
    "ErrorCode",
    "Nid",
    "NidError",
    "allow_aao",
    "case",
    "new",
    "possible",
    "set_dash_pattern",
    "set_separators",
    "set_squish_pattern",
    "set_strip_pattern",
    "set_transliterations",
    "set_valid_pattern",
]
