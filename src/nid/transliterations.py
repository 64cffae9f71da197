"""Character tables used by the nid normalization pipeline.

Every key is a single lower-case character; input is lower-cased before any
table is applied, so upper-case entries are never needed.
"""
from __future__ import annotations

from typing import Dict

SEPARATORS: Dict[str, str] = {
    "-": " ",
    "_": " ",
    "–": " ",  # en dash
    "—": " ",  # em dash
}

TRANSLITERATIONS: Dict[str, str] = {
    " ": "-",
    "_": "-",
    "×": "x",
    "ß": "ss",
    "à": "a",
    "á": "a",
    "â": "a",
    "ã": "a",
    "ä": "a",
    "å": "a",
    "æ": "a",
    "ç": "c",
    "è": "e",
    "é": "e",
    "ê": "e",
    "ë": "e",
    "ì": "i",
    "í": "i",
    "î": "i",
    "ï": "i",
    "ð": "d",
    "ñ": "n",
    "ò": "o",
    "ó": "o",
    "ô": "o",
    "õ": "o",
    "ö": "o",
    "ø": "o",
    "ù": "u",
    "ú": "u",
    "û": "u",
    "ü": "u",
    "ý": "y",
    "þ": "th",
    "ÿ": "y",
    "ā": "a",
    "ă": "a",
    "ą": "a",
    "ć": "c",
    "ĉ": "c",
    "ċ": "c",
    "č": "c",
    "ď": "d",
    "đ": "d",
    "ē": "e",
    "ĕ": "e",
    "ė": "e",
    "ę": "e",
    "ě": "e",
    "ĝ": "g",
    "ğ": "g",
    "ġ": "g",
    "ģ": "g",
    "ĥ": "h",
    "ħ": "h",
    "ĩ": "i",
    "ī": "i",
    "ĭ": "i",
    "į": "i",
    "ı": "i",
    "ĳ": "ij",
    "ĵ": "j",
    "ķ": "k",
    "ĸ": "k",
    "ĺ": "l",
    "ļ": "l",
    "ľ": "l",
    "ŀ": "l",
    "ł": "l",
    "ń": "n",
    "ņ": "n",
    "ň": "n",
    "ŉ": "'n",
    "ŋ": "ng",
    "ō": "o",
    "ŏ": "o",
    "ő": "o",
    "œ": "oe",
    "ŕ": "r",
    "ŗ": "r",
    "ř": "r",
    "ś": "s",
    "ŝ": "s",
    "ş": "s",
    "š": "s",
    "ţ": "t",
    "ť": "t",
    "ŧ": "t",
    "ũ": "u",
    "ū": "u",
    "ŭ": "u",
    "ů": "u",
    "ű": "u",
    "ų": "u",
    "ŵ": "w",
    "ŷ": "y",
    "ź": "z",
    "ż": "z",
    "ž": "z",
}

# Swedish letters survive; the Danish/Norwegian ones fold into them.
TRANSLITERATIONS_WITH_AAO: Dict[str, str] = {
    **TRANSLITERATIONS,
    "å": "å",
    "ä": "ä",
    "ö": "ö",
    "æ": "ä",
    "ø": "ö",
}
