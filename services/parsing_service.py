"""Recipe name parsing - turns handwritten names into canonical form."""

import re
from typing import Optional


def normalize_name(raw: str) -> Optional[str]:
    """
    Normalize a handwritten recipe name.

    Hyphens and underscores separate words, everything other than letters and
    whitespace is dropped, whitespace collapses to single spaces and each word
    is capitalized. Returns None when nothing is left.

    Example:
        >>> normalize_name("-burger-_bun")
        'Burger Bun'
    """
    s = re.sub(r"[-_]", " ", raw)
    s = re.sub(r"[^A-Za-z\s]", "", s)
    s = re.sub(r"\s+", " ", s).strip()
    if not s:
        return None
    return " ".join(word[:1].upper() + word[1:].lower() for word in s.split(" "))
