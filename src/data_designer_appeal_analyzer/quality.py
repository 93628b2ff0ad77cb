# Heuristic quality metrics for appeal drafts.
#
# Four sub-scores (clarity, persuasiveness, professionalism, relevance) on a
# 1-5 scale feed a weighted overall score. Assertiveness is reported next to
# them and only drives advice. Text issues point at specific passages.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from data_designer_appeal_analyzer.catalog import AppealType
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_appeal_analyzer.labels import DEFAULT_LOCALE, render
from data_designer_appeal_analyzer.matcher import count_matches, keyword_pattern
from data_designer_appeal_analyzer.scoring import clamp

IssueSeverity = Literal["warning", "error", "suggestion"]

# ---------------------------------------------------------------------------
# Term lists and compiled patterns
# ---------------------------------------------------------------------------

_PERSUASIVE_TERMS = [
    "because", "therefore", "consequently", "evidence", "proof", "demonstrates",
    "clearly", "shows", "indicates", "proves", "according to", "law", "regulation",
    "incorrect", "error", "mistake", "request", "appeal",
]
_CONFIDENT_TERMS = [
    "certainly", "definitely", "clearly", "undoubtedly", "without a doubt",
    "confident", "firmly", "strongly", "assert", "maintain", "emphasize",
]
_HEDGE_TERMS = [
    "maybe", "perhaps", "possibly", "might", "could be", "sort of",
    "kind of", "i think", "i believe", "in my opinion", "not sure",
]
_PASSIVE_MARKERS = [
    "was done", "were made", "have been", "has been", "was given",
    "is being", "was being", "be made", "be given",
]
_WEAK_PHRASES = [
    "kind of", "sort of", "pretty much", "basically", "for the most part",
    "more or less", "probably", "maybe", "perhaps",
]

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_GREETING_RE = re.compile(r"\bdear\s+\w+|\bto whom it may concern\b", re.IGNORECASE)
_CLOSING_RE = re.compile(r"\b(sincerely|respectfully|thank you for your consideration)\b", re.IGNORECASE)
_SLANG_RE = re.compile(r"\b(gonna|wanna|gotta|ya|u r|lol|omg|kinda|dunno)\b", re.IGNORECASE)
_DATE_RE = re.compile(
    r"\b\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}\b"
    r"|\b(january|february|march|april|may|june|july|august|september|october|november|december)\s+\d{1,2},\s+\d{4}\b",
    re.IGNORECASE,
)
_EXCLAMATION_RE = re.compile(r"!")

# (words-per-sentence upper bound, score); the last band is open-ended.
_CLARITY_BANDS = ((10, 3.5), (15, 4.0), (25, 5.0), (35, 4.0), (45, 3.0))
_CLARITY_FLOOR = 2.0

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextIssue:
    severity: IssueSeverity
    code: str
    text: str
    reason: str
    replacement: str

    def to_payload(self) -> dict[str, object]:
        return {
            "severity": self.severity,
            "code": self.code,
            "text": self.text,
            "reason": self.reason,
            "replacement": self.replacement,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def _paragraph_count(text: str) -> int:
    return sum(1 for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip())


def _shouting_re(hp: Hyperparameters) -> re.Pattern[str]:
    # Uppercase letters in a row, allowing spaces and light punctuation between them.
    return re.compile(r"[A-Z](?:[ \t,'\-]*[A-Z]){%d,}" % (hp.shouting_run_letters - 1))


def _is_heading(line: str, hp: Hyperparameters) -> bool:
    # Subject lines such as "RE: PARKING CITATION 1234" end without sentence punctuation.
    stripped = line.strip()
    return bool(stripped) and stripped[-1] not in ".!?" and len(stripped.split()) <= hp.heading_max_words


def _shouts(text: str, hp: Hyperparameters) -> bool:
    pattern = _shouting_re(hp)
    return any(pattern.search(line) for line in text.splitlines() if not _is_heading(line, hp))


def _starts_word(text: str, term: str) -> bool:
    return re.search(r"(?<!\w)" + re.escape(term), text, re.IGNORECASE) is not None


def score_label(score: float) -> str:
    if score >= 4.5:
        return "excellent"
    if score >= 4.0:
        return "very_good"
    if score >= 3.5:
        return "good"
    if score >= 3.0:
        return "fair"
    if score >= 2.0:
        return "needs_work"
    return "poor"


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------


def clarity(text: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
    sentences = _sentences(text)
    if not sentences:
        return hp.quality_min
    avg_words = sum(len(s.split()) for s in sentences) / len(sentences)
    score = _CLARITY_FLOOR
    for upper, band_score in _CLARITY_BANDS:
        if avg_words < upper:
            score = band_score
            break
    paragraphs = _paragraph_count(text)
    if paragraphs > 1:
        score += hp.paragraph_bonus_step
    if paragraphs > 3:
        score += hp.paragraph_bonus_step
    return clamp(score, hp.quality_min, hp.quality_max)


def persuasiveness(text: str, appeal_type: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
    count = count_matches(text, _PERSUASIVE_TERMS)
    score = hp.persuasive_base + count / hp.persuasive_divisor
    lower = text.lower()
    if appeal_type == "legal" and "code" in lower and "section" in lower:
        score += hp.appeal_type_bonus
    if appeal_type == "factual" and ("evidence" in lower or "proof" in lower):
        score += hp.appeal_type_bonus
    return clamp(score, hp.quality_min, hp.quality_max)


def professionalism(text: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
    score = hp.professionalism_base
    if _GREETING_RE.search(text):
        score += hp.professionalism_bonus
    if _CLOSING_RE.search(text):
        score += hp.professionalism_bonus
    if not _SLANG_RE.search(text):
        score += hp.professionalism_bonus
    if _DATE_RE.search(text):
        score += hp.professionalism_bonus
    if _shouts(text, hp):
        score -= hp.shouting_penalty
    if len(_EXCLAMATION_RE.findall(text)) > hp.exclamation_max:
        score -= hp.exclamation_penalty
    return clamp(score, hp.quality_min, hp.quality_max)


def relevance(text: str, appeal_type: AppealType, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
    if appeal_type.category_groups:
        represented = sum(
            1 for _, terms in appeal_type.category_groups if any(_starts_word(text, t) for t in terms)
        )
        bonus = min(hp.relevance_bonus_cap, represented * hp.comprehensive_category_bonus)
    else:
        hits = sum(1 for t in appeal_type.relevance_terms if _starts_word(text, t))
        bonus = min(hp.relevance_bonus_cap, hits / hp.relevance_divisor)
    return clamp(hp.relevance_base + bonus, hp.quality_min, hp.quality_max)


def assertiveness(text: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float:
    score = hp.assertiveness_base
    score += sum(1 for t in _CONFIDENT_TERMS if keyword_pattern(t).search(text)) * hp.confident_term_bonus
    score -= sum(1 for t in _HEDGE_TERMS if keyword_pattern(t).search(text)) * hp.hedge_term_penalty
    score -= sum(1 for t in _PASSIVE_MARKERS if keyword_pattern(t).search(text)) * hp.passive_marker_penalty
    return clamp(score, hp.quality_min, hp.quality_max)


# ---------------------------------------------------------------------------
# Text issues
# ---------------------------------------------------------------------------


def _sentence_around(text: str, start: int, end: int) -> str:
    s = text.rfind(".", 0, start) + 1
    e = text.find(".", end)
    return text[s : e + 1 if e >= 0 else len(text)].strip()


def identify_text_issues(
    text: str,
    appeal_type: str,
    locale: str = DEFAULT_LOCALE,
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> list[TextIssue]:
    """Passages worth revising, in the order: long sentences, passive voice, weak phrases, missing references."""
    issues: list[TextIssue] = []

    for sentence in _sentences(text):
        if len(sentence) > hp.long_sentence_chars:
            issues.append(TextIssue(
                "warning", "long_sentence", sentence.strip(),
                render("issue_long_sentence", locale), render("fix_long_sentence", locale),
            ))

    for marker in _PASSIVE_MARKERS:
        for m in keyword_pattern(marker).finditer(text):
            issues.append(TextIssue(
                "suggestion", "passive_voice", _sentence_around(text, m.start(), m.end()),
                render("issue_passive_voice", locale), render("fix_passive_voice", locale),
            ))

    width = hp.issue_context_chars
    for phrase in _WEAK_PHRASES:
        for m in keyword_pattern(phrase).finditer(text):
            context = text[max(0, m.start() - width) : min(len(text), m.end() + width)]
            issues.append(TextIssue(
                "suggestion", "weak_phrase", context,
                render("issue_weak_phrase", locale), render("fix_weak_phrase", locale, phrase=phrase),
            ))

    lower = text.lower()
    if appeal_type == "legal" and "section" not in lower and "code" not in lower:
        issues.append(TextIssue(
            "error", "missing_legal_references", "",
            render("issue_missing_legal_references", locale), render("fix_missing_legal_references", locale),
        ))
    if appeal_type == "factual" and "evidence" not in lower and "proof" not in lower:
        issues.append(TextIssue(
            "error", "missing_evidence_reference", "",
            render("issue_missing_evidence_reference", locale), render("fix_missing_evidence_reference", locale),
        ))
    return issues
