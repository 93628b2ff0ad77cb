# Threshold rules that turn scores into ordered, capped advice lists.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

from data_designer_appeal_analyzer.catalog import AppealDimension, Factor, Option, ViolationProfile
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_appeal_analyzer.labels import DEFAULT_LOCALE, label, render
from data_designer_appeal_analyzer.scoring import ScoredCategory

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Advice:
    code: str
    message: str

    def to_payload(self) -> dict[str, object]:
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class SubScores:
    clarity: float
    persuasiveness: float
    professionalism: float
    relevance: float
    assertiveness: float


_Rule = Callable[[SubScores], bool]

_CLOSING_RE = re.compile(r"\b(sincerely|respectfully)\b", re.IGNORECASE)
_PROCEDURAL_KINDS = frozenset({"procedural", "omission"})


def _dedupe(items: list[Advice]) -> list[Advice]:
    seen: set[str] = set()
    out: list[Advice] = []
    for item in items:
        if item.code not in seen:
            seen.add(item.code)
            out.append(item)
    return out


# ---------------------------------------------------------------------------
# Statement analysis
# ---------------------------------------------------------------------------


def statement_advice(
    scored: Sequence[ScoredCategory],
    potential: str,
    locale: str = DEFAULT_LOCALE,
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> tuple[list[Advice], list[Advice], list[Advice]]:
    """Strengths, weaknesses, and recommendations for an analyzed statement."""
    if not scored:
        return [], [], [Advice("recommend_none", render("recommend_none", locale))]

    def issue_name(s: ScoredCategory) -> str:
        return label("category", s.category.id, locale=locale)

    strengths: list[Advice] = []
    for s in scored:
        if s.category.impact == "high":
            strengths.append(Advice("strength_high_impact_issue", render("strength_high_impact_issue", locale, issue=issue_name(s))))
            break
    if len(scored) >= hp.several_issues_min:
        strengths.append(Advice("strength_several_issues", render("strength_several_issues", locale, count=len(scored))))
    for s in scored:
        if s.confidence >= hp.well_supported_confidence:
            strengths.append(Advice("strength_well_supported", render("strength_well_supported", locale, issue=issue_name(s))))
            break

    weaknesses: list[Advice] = []
    if len(scored) == 1:
        weaknesses.append(Advice("weakness_single_issue", render("weakness_single_issue", locale)))
    if all(s.category.impact == "low" for s in scored):
        weaknesses.append(Advice("weakness_only_minor_issues", render("weakness_only_minor_issues", locale)))
    if not any(s.category.kind in _PROCEDURAL_KINDS for s in scored):
        weaknesses.append(Advice("weakness_no_procedural_issue", render("weakness_no_procedural_issue", locale)))

    code = f"recommend_{potential}"
    recommendations = [
        Advice(code, render(code, locale)),
        Advice("recommend_lead_with", render("recommend_lead_with", locale, issue=issue_name(scored[0]))),
        Advice("recommend_respectful", render("recommend_respectful", locale)),
    ]
    cap = hp.analysis_list_cap
    return strengths[:cap], weaknesses[:cap], recommendations[:cap]


# ---------------------------------------------------------------------------
# Success prediction
# ---------------------------------------------------------------------------


def prediction_advice(
    profile: ViolationProfile,
    factors: Sequence[Factor],
    options: Sequence[tuple[AppealDimension, Option]],
    locale: str = DEFAULT_LOCALE,
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> tuple[list[Advice], list[Advice]]:
    """Partition the selections by the sign of their delta.

    Unselected positive factors of the profile are appended to the weaknesses
    as missed opportunities. Zero-delta selections are neutral.
    """
    helps: list[tuple[float, Advice]] = []
    hurts: list[tuple[float, Advice]] = []

    for f in factors:
        name = label("factor", f.id, locale=locale)
        if f.delta > 0:
            helps.append((f.delta, Advice(f.id, render("factor_helps", locale, factor=name))))
        elif f.delta < 0:
            hurts.append((f.delta, Advice(f.id, render("factor_hurts", locale, factor=name))))

    for dimension, option in options:
        dim_name = label("dimension", dimension.id, locale=locale)
        opt_name = label("option", dimension.id, option.value, locale=locale)
        code = f"{dimension.id}.{option.value}"
        if option.delta > 0:
            helps.append((option.delta, Advice(code, render("option_helps", locale, dimension=dim_name, option=opt_name))))
        elif option.delta < 0:
            hurts.append((option.delta, Advice(code, render("option_hurts", locale, dimension=dim_name, option=opt_name))))

    selected = {f.id for f in factors}
    missed = [
        (f.delta, Advice(f"missing.{f.id}", render("missing_opportunity", locale, factor=label("factor", f.id, locale=locale))))
        for f in profile.factors
        if f.delta > 0 and f.id not in selected
    ]

    def by_magnitude(entries: list[tuple[float, Advice]]) -> list[Advice]:
        return [a for _, a in sorted(entries, key=lambda e: -abs(e[0]))]

    cap = hp.prediction_list_cap
    strengths = by_magnitude(helps)
    weaknesses = by_magnitude(hurts) + by_magnitude(missed)
    return strengths[:cap], weaknesses[:cap]


# ---------------------------------------------------------------------------
# Text quality
# ---------------------------------------------------------------------------


def _relevance_code(prefix: str, appeal_type: str) -> str:
    return f"{prefix}_{appeal_type}"


def quality_advice(
    text: str,
    appeal_type: str,
    scores: SubScores,
    locale: str = DEFAULT_LOCALE,
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> tuple[list[Advice], list[Advice]]:
    """Suggestions and strengths, each evaluated in priority order and capped."""
    low = hp.suggestion_threshold
    high = hp.strength_threshold

    suggestion_rules: list[tuple[_Rule, str]] = [
        (lambda s: s.clarity < low, "suggest_formatting"),
        (lambda s: s.persuasiveness < low, "suggest_persuasive"),
        (lambda s: s.professionalism < low, "suggest_formal"),
        (lambda s: s.professionalism < low and not _CLOSING_RE.search(text), "suggest_closing"),
        (lambda s: s.assertiveness < low, "suggest_confidence"),
        (lambda s: s.relevance < hp.relevance_suggestion_threshold, _relevance_code("suggest", appeal_type)),
        (lambda s: appeal_type == "factual" and s.relevance < hp.relevance_suggestion_threshold, "suggest_evidence"),
        (lambda s: len(text) < hp.short_text_chars, "suggest_more_detail"),
    ]
    strength_rules: list[tuple[_Rule, str]] = [
        (lambda s: s.clarity >= high, "strength_clarity"),
        (lambda s: s.persuasiveness >= high, "strength_persuasive"),
        (lambda s: s.professionalism >= high, "strength_professional"),
        (lambda s: s.assertiveness >= high, "strength_confidence"),
        (lambda s: s.relevance >= high, _relevance_code("strength", appeal_type)),
    ]

    suggestions = _dedupe([Advice(code, render(code, locale)) for rule, code in suggestion_rules if rule(scores)])
    strengths = _dedupe([Advice(code, render(code, locale)) for rule, code in strength_rules if rule(scores)])
    cap = hp.quality_list_cap
    return suggestions[:cap], strengths[:cap]
