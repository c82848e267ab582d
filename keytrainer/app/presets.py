from __future__ import annotations

"""Curated alphabets for practice sessions.

Presets help users pick a sensible set of keys without typing them out.
"""

from typing import Dict

ALPHABET_PRESETS: Dict[str, str] = {
    "lowercase": "abcdefghijklmnopqrstuvwxyz",
    "home_row": "asdfghjkl",
    "top_row": "qwertyuiop",
    "bottom_row": "zxcvbnm",
    "digits": "0123456789",
}

DEFAULT_PRESET = "lowercase"


def resolve_alphabet(value: str | None) -> str:
    """Return the characters of a preset, or the literal characters given.

    Whitespace is dropped and repeated characters keep their first position.
    """
    if not value:
        return ALPHABET_PRESETS[DEFAULT_PRESET]
    name = value.strip().lower()
    if name in ALPHABET_PRESETS:
        return ALPHABET_PRESETS[name]
    seen: Dict[str, None] = {}
    for ch in value:
        if not ch.isspace():
            seen.setdefault(ch, None)
    return "".join(seen)
