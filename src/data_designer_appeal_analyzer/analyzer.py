# Public call surface: statement analysis, success prediction, draft quality
# scoring, and draft comparison. Every call is pure and returns a fresh,
# immutable result; unknown ids degrade to defaults and are reported in
# ``diagnostics`` instead of raising.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from data_designer_appeal_analyzer import quality
from data_designer_appeal_analyzer.catalog import (
    DEFAULT_APPEAL_TYPE,
    categories_for,
    resolve_appeal_type,
    resolve_factors,
    resolve_options,
    resolve_violation_profile,
)
from data_designer_appeal_analyzer.diff import DiffRun, diff_texts
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_appeal_analyzer.labels import DEFAULT_LOCALE, render, resolve_locale
from data_designer_appeal_analyzer.matcher import Snippet, match
from data_designer_appeal_analyzer.recommendations import (
    Advice,
    SubScores,
    prediction_advice,
    quality_advice,
    statement_advice,
)
from data_designer_appeal_analyzer.scoring import (
    aggregate_probability,
    combine,
    probability_tier,
    round_half_up,
    score_categories,
    statement_potential,
    success_probability,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AnalysisResult",
    "DetectedIssue",
    "DiffRun",
    "PredictionResult",
    "QualityMetrics",
    "analyze_statement",
    "diff_texts",
    "predict_success",
    "score_quality",
]

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


def _advice_payload(items: tuple[Advice, ...]) -> list[dict[str, object]]:
    return [a.to_payload() for a in items]


@dataclass(frozen=True)
class DetectedIssue:
    category_id: str
    impact: str
    kind: str
    description: str
    match_count: int
    snippets: tuple[Snippet, ...]
    confidence: int

    def to_payload(self) -> dict[str, object]:
        return {
            "category_id": self.category_id,
            "impact": self.impact,
            "kind": self.kind,
            "description": self.description,
            "match_count": self.match_count,
            "snippets": [s.to_payload() for s in self.snippets],
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class AnalysisResult:
    violation_type: str
    issues: tuple[DetectedIssue, ...]
    probability: float | None
    potential: str
    strengths: tuple[Advice, ...]
    weaknesses: tuple[Advice, ...]
    recommendations: tuple[Advice, ...]
    diagnostics: tuple[str, ...] = ()

    @property
    def issues_found(self) -> bool:
        return bool(self.issues)

    def to_payload(self) -> dict[str, object]:
        return {
            "violation_type": self.violation_type,
            "issues": [i.to_payload() for i in self.issues],
            "probability": self.probability,
            "potential": self.potential,
            "strengths": _advice_payload(self.strengths),
            "weaknesses": _advice_payload(self.weaknesses),
            "recommendations": _advice_payload(self.recommendations),
            "diagnostics": list(self.diagnostics),
        }


@dataclass(frozen=True)
class PredictionResult:
    violation_type: str
    base_rate: float
    probability: float
    tier: str
    strengths: tuple[Advice, ...]
    weaknesses: tuple[Advice, ...]
    diagnostics: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "violation_type": self.violation_type,
            "base_rate": self.base_rate,
            "probability": self.probability,
            "tier": self.tier,
            "strengths": _advice_payload(self.strengths),
            "weaknesses": _advice_payload(self.weaknesses),
            "diagnostics": list(self.diagnostics),
        }


@dataclass(frozen=True)
class QualityMetrics:
    appeal_type: str
    clarity: float
    persuasiveness: float
    professionalism: float
    relevance: float
    assertiveness: float
    overall: float
    label: str
    label_text: str
    suggestions: tuple[Advice, ...]
    strengths: tuple[Advice, ...]
    issues: tuple[quality.TextIssue, ...]
    analyzed: bool = True
    diagnostics: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "appeal_type": self.appeal_type,
            "clarity": self.clarity,
            "persuasiveness": self.persuasiveness,
            "professionalism": self.professionalism,
            "relevance": self.relevance,
            "assertiveness": self.assertiveness,
            "overall": self.overall,
            "label": self.label,
            "label_text": self.label_text,
            "suggestions": _advice_payload(self.suggestions),
            "strengths": _advice_payload(self.strengths),
            "issues": [i.to_payload() for i in self.issues],
            "analyzed": self.analyzed,
            "diagnostics": list(self.diagnostics),
        }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_statement(
    text: str | None,
    violation_type: str,
    locale: str = DEFAULT_LOCALE,
    hyperparameters: Hyperparameters | None = None,
) -> AnalysisResult:
    """Find weaknesses in an officer's statement.

    Args:
        text: The statement as written on the citation.
        violation_type: Violation profile id selecting the categories to look for.
        locale: Locale for the advice messages.
        hyperparameters: Optional tuning overrides.

    Returns:
        AnalysisResult with issues sorted by descending confidence. When no
        category matches, ``probability`` is ``None`` and ``potential`` is
        ``"none"``.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    diagnostics: list[str] = []
    locale = resolve_locale(locale, diagnostics)
    profile = resolve_violation_profile(violation_type, diagnostics)
    categories = categories_for(profile)

    matches = match(text or "", categories, hp)
    scored = score_categories(matches, categories, hp)
    probability = aggregate_probability(scored, hp)
    potential = statement_potential(probability, hp)
    strengths, weaknesses, recommendations = statement_advice(scored, potential, locale, hp)
    logger.debug(f"Statement analysis for {profile.id!r}: {len(scored)} categories matched, probability={probability}")

    return AnalysisResult(
        violation_type=profile.id,
        issues=tuple(
            DetectedIssue(
                category_id=s.category.id,
                impact=s.category.impact,
                kind=s.category.kind,
                description=s.category.description,
                match_count=s.match.count,
                snippets=s.match.snippets,
                confidence=s.confidence,
            )
            for s in scored
        ),
        probability=probability,
        potential=potential,
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        recommendations=tuple(recommendations),
        diagnostics=tuple(diagnostics),
    )


def predict_success(
    violation_type: str,
    selected_factor_ids: Iterable[str] = (),
    dimension_selections: Mapping[str, str] | None = None,
    locale: str = DEFAULT_LOCALE,
    hyperparameters: Hyperparameters | None = None,
) -> PredictionResult:
    """Estimate the chance an appeal succeeds from the selected circumstances.

    ``probability = clamp(base_rate + sum(factor deltas) + sum(option deltas), 0.05, 0.95)``.
    Each appeal dimension contributes exactly one option; dimensions missing
    from ``dimension_selections`` use their zero-delta default.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    diagnostics: list[str] = []
    locale = resolve_locale(locale, diagnostics)
    profile = resolve_violation_profile(violation_type, diagnostics)
    factors = resolve_factors(profile, selected_factor_ids, diagnostics)
    options = resolve_options(dimension_selections, diagnostics)

    probability = success_probability(profile.base_rate, factors, [o for _, o in options], hp)
    strengths, weaknesses = prediction_advice(profile, factors, options, locale, hp)

    return PredictionResult(
        violation_type=profile.id,
        base_rate=profile.base_rate,
        probability=probability,
        tier=probability_tier(probability, hp),
        strengths=tuple(strengths),
        weaknesses=tuple(weaknesses),
        diagnostics=tuple(diagnostics),
    )


def score_quality(
    text: str | None,
    appeal_type: str = DEFAULT_APPEAL_TYPE,
    locale: str = DEFAULT_LOCALE,
    hyperparameters: Hyperparameters | None = None,
) -> QualityMetrics:
    """Score an appeal draft on clarity, persuasiveness, professionalism, and relevance.

    Args:
        text: The draft.
        appeal_type: ``procedural``, ``factual``, ``legal``, or ``comprehensive``.
        locale: Locale for the advice messages.
        hyperparameters: Optional tuning overrides.

    Returns:
        QualityMetrics; ``overall`` is the weighted recombination of the four
        sub-scores rounded to one decimal. Blank drafts come back with
        ``analyzed=False`` and every score at the lower bound.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    diagnostics: list[str] = []
    locale = resolve_locale(locale, diagnostics)
    resolved = resolve_appeal_type(appeal_type, diagnostics)
    text = text or ""

    if not text.strip():
        floor = hp.quality_min
        label = quality.score_label(floor)
        return QualityMetrics(
            appeal_type=resolved.id, clarity=floor, persuasiveness=floor, professionalism=floor,
            relevance=floor, assertiveness=floor, overall=floor, label=label,
            label_text=render(f"score_{label}", locale),
            suggestions=(), strengths=(), issues=(), analyzed=False, diagnostics=tuple(diagnostics),
        )

    scores = SubScores(
        clarity=quality.clarity(text, hp),
        persuasiveness=quality.persuasiveness(text, resolved.id, hp),
        professionalism=quality.professionalism(text, hp),
        relevance=quality.relevance(text, resolved, hp),
        assertiveness=quality.assertiveness(text, hp),
    )
    overall = round_half_up(
        combine(
            [scores.clarity, scores.persuasiveness, scores.professionalism, scores.relevance],
            hp.quality_weights,
            lower=hp.quality_min,
            upper=hp.quality_max,
        ),
        1,
    )
    label = quality.score_label(overall)
    suggestions, strengths = quality_advice(text, resolved.id, scores, locale, hp)
    issues = quality.identify_text_issues(text, resolved.id, locale, hp)

    return QualityMetrics(
        appeal_type=resolved.id,
        clarity=scores.clarity,
        persuasiveness=scores.persuasiveness,
        professionalism=scores.professionalism,
        relevance=scores.relevance,
        assertiveness=scores.assertiveness,
        overall=overall,
        label=label,
        label_text=render(f"score_{label}", locale),
        suggestions=tuple(suggestions),
        strengths=tuple(strengths),
        issues=tuple(issues),
        diagnostics=tuple(diagnostics),
    )
