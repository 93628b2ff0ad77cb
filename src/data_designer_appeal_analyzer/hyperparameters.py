from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable thresholds, caps, weights, and bounds used by the analyzers."""

    # Pattern matcher
    context_radius_chars: int = 25
    snippet_cap: int = 3

    # Confidence / severity model
    high_impact_factor: float = 1.5
    medium_impact_factor: float = 1.0
    low_impact_factor: float = 0.5
    confidence_scale: float = 20.0
    confidence_max: int = 100
    high_impact_value: float = 15.0
    medium_impact_value: float = 10.0
    low_impact_value: float = 5.0
    aggregate_base: float = 25.0
    aggregate_min: float = 0.0
    aggregate_max: float = 95.0
    potential_strong_above: float = 70.0
    potential_moderate_above: float = 40.0
    well_supported_confidence: int = 60
    several_issues_min: int = 3
    analysis_list_cap: int = 5

    # Additive linear model
    probability_floor: float = 0.05
    probability_ceiling: float = 0.95
    probability_precision: int = 4
    tier_moderate_min: float = 0.40
    tier_high_min: float = 0.70
    prediction_list_cap: int = 5

    # Text quality
    quality_min: float = 1.0
    quality_max: float = 5.0
    clarity_weight: float = 0.25
    persuasiveness_weight: float = 0.30
    professionalism_weight: float = 0.20
    relevance_weight: float = 0.25
    paragraph_bonus_step: float = 0.5
    persuasive_base: float = 2.0
    persuasive_divisor: float = 5.0
    appeal_type_bonus: float = 0.5
    professionalism_base: float = 3.0
    professionalism_bonus: float = 0.5
    shouting_run_letters: int = 10
    shouting_penalty: float = 1.0
    heading_max_words: int = 8
    exclamation_max: int = 3
    exclamation_penalty: float = 0.5
    relevance_base: float = 3.0
    relevance_divisor: float = 3.0
    relevance_bonus_cap: float = 2.0
    comprehensive_category_bonus: float = 1.0
    assertiveness_base: float = 3.0
    confident_term_bonus: float = 0.3
    hedge_term_penalty: float = 0.4
    passive_marker_penalty: float = 0.3
    suggestion_threshold: float = 3.5
    strength_threshold: float = 4.0
    relevance_suggestion_threshold: float = 4.0
    short_text_chars: int = 200
    long_sentence_chars: int = 200
    issue_context_chars: int = 30
    quality_list_cap: int = 3

    # Fine estimator
    late_period_days: int = 30
    late_period_rate: float = 0.05

    # Regulation search
    regulation_match_boost: int = 20

    def impact_factor(self, impact: str) -> float:
        return {
            "high": self.high_impact_factor,
            "medium": self.medium_impact_factor,
            "low": self.low_impact_factor,
        }.get(impact, self.low_impact_factor)

    def impact_value(self, impact: str) -> float:
        return {
            "high": self.high_impact_value,
            "medium": self.medium_impact_value,
            "low": self.low_impact_value,
        }.get(impact, self.low_impact_value)

    @property
    def quality_weights(self) -> tuple[float, float, float, float]:
        return (
            self.clarity_weight,
            self.persuasiveness_weight,
            self.professionalism_weight,
            self.relevance_weight,
        )


DEFAULT_HYPERPARAMETERS = Hyperparameters()
