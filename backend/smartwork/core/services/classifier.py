from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field

from smartwork.core.models.base import AppBaseModel
from smartwork.core.models.note import Label, dedupe_labels
from smartwork.utils.text import normalize_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

# Built-in heuristics: label -> words that trigger it.
HEURISTIC_LABEL_WORDS: dict[str, tuple[str, ...]] = {
    Label.ISSUE.value: ("문제", "에러", "버그"),
    Label.IDEA.value: ("아이디어", "제안"),
}


class ClassificationResult(AppBaseModel):
    labels: list[str] = Field(default_factory=list)
    sub_tag: str | None = None


def detect_keyword_labels(
    text: str,
    keywords: Sequence[str],
    existing_labels: Iterable[str] = (),
) -> list[str]:
    """Return every configured keyword found in `text` that is not already a label."""
    normalized = normalize_text(text)
    existing = set(existing_labels)
    detected: list[str] = []
    for keyword in keywords:
        needle = normalize_text(keyword)
        if not needle or keyword in existing or keyword in detected:
            continue
        if needle in normalized:
            detected.append(keyword)
    return detected


def detect_heuristic_labels(text: str, already_present: Iterable[str] = ()) -> list[str]:
    normalized = normalize_text(text)
    present = set(already_present)
    detected: list[str] = []
    for label, words in HEURISTIC_LABEL_WORDS.items():
        if label in present:
            continue
        if any(word in normalized for word in words):
            detected.append(label)
    return detected


def detect_sub_tag(text: str, keywords: Sequence[str]) -> str | None:
    """First configured keyword (in configured order) contained in `text`."""
    normalized = normalize_text(text)
    for keyword in keywords:
        needle = normalize_text(keyword)
        if needle and needle in normalized:
            return keyword
    return None


def classify(
    content: str,
    category: str,
    category_keywords: Mapping[str, Sequence[str]] | None = None,
    existing_labels: Iterable[str] | None = None,
    summary: str | None = None,
) -> ClassificationResult:
    """Derive labels and a subTag for a note in `category`.

    Only the keywords configured for `category` are considered; a missing or
    empty list leaves the built-in heuristics as the only signal.

    Labels are matched against the content joined with the optional summary;
    the subTag is matched against the content alone. The result is fully
    determined by the arguments.
    """
    keywords = list((category_keywords or {}).get(category) or [])
    existing = dedupe_labels(list(existing_labels or []))

    label_text = f"{content} {summary}" if summary else content
    keyword_labels = detect_keyword_labels(label_text, keywords, existing)
    heuristic_labels = detect_heuristic_labels(label_text, [*existing, *keyword_labels])

    return ClassificationResult(
        labels=dedupe_labels([*existing, *keyword_labels, *heuristic_labels]),
        sub_tag=detect_sub_tag(content, keywords),
    )
