"""
Slug derivation for recipe titles.
"""

from __future__ import annotations

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """
    Lowercase ASCII slug: accents folded away, every run of other characters
    collapsed into one "-", no leading/trailing "-".

    "The Future" -> "the-future", "Café Roast!!" -> "cafe-roast".
    """
    folded = unicodedata.normalize("NFKD", title or "").encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", folded.lower()).strip("-")
