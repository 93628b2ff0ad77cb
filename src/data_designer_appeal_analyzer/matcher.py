from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from data_designer_appeal_analyzer.catalog import IssueCategory
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Snippet:
    """A window of text around one match; ``start``/``end`` locate the match inside ``text``."""

    text: str
    term: str
    start: int
    end: int

    def highlighted(self, open_mark: str = "**", close_mark: str = "**") -> str:
        return self.text[: self.start] + open_mark + self.text[self.start : self.end] + close_mark + self.text[self.end :]

    def to_payload(self) -> dict[str, object]:
        return {"text": self.text, "term": self.term, "start": self.start, "end": self.end}


@dataclass(frozen=True)
class CategoryMatch:
    count: int
    snippets: tuple[Snippet, ...]
    terms: tuple[str, ...]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@lru_cache(maxsize=512)
def keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive pattern; inner spaces match any whitespace run."""
    body = r"\s+".join(re.escape(part) for part in keyword.split())
    return re.compile(r"(?<!\w)" + body + r"(?!\w)", re.IGNORECASE)


def count_matches(text: str, terms: Iterable[str]) -> int:
    return sum(len(keyword_pattern(t).findall(text)) for t in terms)


def count_distinct(text: str, terms: Iterable[str]) -> int:
    return sum(1 for t in terms if keyword_pattern(t).search(text))


def _snippet(text: str, term: str, start: int, end: int, hp: Hyperparameters) -> Snippet:
    radius = hp.context_radius_chars
    s = max(0, start - radius)
    e = min(len(text), end + radius)
    prefix = "..." if s > 0 else ""
    window = text[s:e].replace("\n", " ")
    suffix = "..." if e < len(text) else ""
    offset = len(prefix) + (start - s)
    return Snippet(prefix + window + suffix, term, offset, offset + (end - start))


def _pick_snippets(hits: list[tuple[int, int, str]], cap: int) -> list[tuple[int, int, str]]:
    # First occurrence of every distinct term, then the remaining hits, all in text order.
    ordered = sorted(hits)
    seen: set[str] = set()
    first, rest = [], []
    for hit in ordered:
        key = hit[2].lower()
        (rest if key in seen else first).append(hit)
        seen.add(key)
    return sorted(first[:cap] + rest[: max(0, cap - len(first))])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def match(
    text: str,
    categories: Iterable[IssueCategory],
    hyperparameters: Hyperparameters | None = None,
) -> dict[str, CategoryMatch]:
    """Scan text for every category's keywords.

    Args:
        text: The statement to scan.
        categories: Categories to look for.
        hyperparameters: Optional tuning overrides (snippet radius and cap).

    Returns:
        Dict keyed by category id. Categories without a single match are left
        out. ``count`` includes matches beyond the snippet cap.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if not text or not text.strip():
        return {}

    result: dict[str, CategoryMatch] = {}
    for category in categories:
        hits: list[tuple[int, int, str]] = []
        for keyword in category.keywords:
            for m in keyword_pattern(keyword).finditer(text):
                hits.append((m.start(), m.end(), m.group(0)))
        if not hits:
            continue
        picked = _pick_snippets(hits, hp.snippet_cap)
        terms = tuple(dict.fromkeys(h[2].lower() for h in sorted(hits)))
        result[category.id] = CategoryMatch(
            count=len(hits),
            snippets=tuple(_snippet(text, term, s, e, hp) for s, e, term in picked),
            terms=terms,
        )
    return result
