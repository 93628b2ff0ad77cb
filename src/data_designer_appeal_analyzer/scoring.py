"""Numeric models: the shared weighted-combination utility, the statement
confidence/severity model, and the additive success-probability model.

Every function here is a pure function of its arguments.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from data_designer_appeal_analyzer.catalog import Factor, IssueCategory, Option
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_appeal_analyzer.matcher import CategoryMatch


def clamp(value: float, lower: float, upper: float) -> float:
    if math.isnan(value):
        return lower
    return max(lower, min(upper, value))


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def combine(
    scores: Sequence[float],
    weights: Sequence[float] | None = None,
    *,
    base: float = 0.0,
    lower: float = -math.inf,
    upper: float = math.inf,
) -> float:
    """``clamp(base + sum(weight * score), lower, upper)``; weights default to 1."""
    if weights is None:
        weights = [1.0] * len(scores)
    if len(weights) != len(scores):
        raise ValueError(f"{len(scores)} scores but {len(weights)} weights")
    total = base + sum(w * s for w, s in zip(weights, scores))
    return clamp(total, lower, upper)


# ---------------------------------------------------------------------------
# Confidence / severity model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoredCategory:
    category: IssueCategory
    match: CategoryMatch
    confidence: int


def category_confidence(match_count: int, impact: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> int:
    raw = match_count * hp.impact_factor(impact) * hp.confidence_scale
    return int(clamp(round_half_up(raw), 0, hp.confidence_max))


def score_categories(
    matches: dict[str, CategoryMatch],
    categories: Iterable[IssueCategory],
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> list[ScoredCategory]:
    """Matched categories with their confidence, highest confidence first."""
    scored = [
        ScoredCategory(c, matches[c.id], category_confidence(matches[c.id].count, c.impact, hp))
        for c in categories
        if c.id in matches
    ]
    # Stable sort keeps catalog order among equal confidences.
    return sorted(scored, key=lambda s: -s.confidence)


def aggregate_probability(scored: Sequence[ScoredCategory], hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> float | None:
    """Appeal potential in [0, 95]; ``None`` when nothing matched."""
    if not scored:
        return None
    return combine(
        [s.confidence / 100 for s in scored],
        [hp.impact_value(s.category.impact) for s in scored],
        base=hp.aggregate_base,
        lower=hp.aggregate_min,
        upper=hp.aggregate_max,
    )


# ---------------------------------------------------------------------------
# Additive linear model
# ---------------------------------------------------------------------------


def success_probability(
    base_rate: float,
    factors: Iterable[Factor],
    options: Iterable[Option],
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> float:
    deltas = [f.delta for f in factors] + [o.delta for o in options]
    probability = combine(deltas, base=base_rate, lower=hp.probability_floor, upper=hp.probability_ceiling)
    return round(probability, hp.probability_precision)


def probability_tier(probability: float, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> str:
    if probability >= hp.tier_high_min:
        return "high"
    if probability >= hp.tier_moderate_min:
        return "moderate"
    return "low"


def statement_potential(probability: float | None, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> str:
    if probability is None:
        return "none"
    if probability > hp.potential_strong_above:
        return "strong"
    if probability > hp.potential_moderate_above:
        return "moderate"
    return "limited"
