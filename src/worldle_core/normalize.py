"""Canonical form used to compare country names."""

from __future__ import annotations

import re
import unicodedata

_STRIPPED_RE = re.compile(r"[- '’()]")


def normalize_name(text: str) -> str:
    """Lowercase, then drop accents, hyphens, apostrophes, parentheses and spaces.

    Two names refer to the same country iff their normalized forms are equal.
    """
    if not text:
        return ""
    # Lowercase first: some capitals (e.g. "İ") lowercase into combining sequences.
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _STRIPPED_RE.sub("", stripped)
