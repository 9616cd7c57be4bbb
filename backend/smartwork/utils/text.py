from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(value: str | None) -> str:
    """Trim, collapse whitespace runs to one space and lowercase."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value.strip()).lower()


def unique_keywords(values: list[str] | None) -> list[str]:
    """Strip keywords and drop blanks and repeats, keeping first occurrence order."""
    result: list[str] = []
    for value in values or []:
        if not isinstance(value, str):
            continue
        keyword = value.strip()
        if keyword and keyword not in result:
            result.append(keyword)
    return result
