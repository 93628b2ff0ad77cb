import itertools

import pytest

from data_designer_appeal_analyzer.catalog import (
    APPEAL_DIMENSIONS,
    ISSUE_CATEGORIES_BY_ID,
    VIOLATION_PROFILES,
    VIOLATION_PROFILES_BY_ID,
    IssueCategory,
)
from data_designer_appeal_analyzer.matcher import CategoryMatch
from data_designer_appeal_analyzer.scoring import (
    aggregate_probability,
    category_confidence,
    clamp,
    combine,
    probability_tier,
    score_categories,
    statement_potential,
    success_probability,
)


def _match(count: int) -> CategoryMatch:
    return CategoryMatch(count=count, snippets=(), terms=())


class TestCombine:
    def test_weighted_sum_with_base(self):
        assert combine([1.0, 2.0], [0.5, 0.5], base=1.0) == pytest.approx(2.5)

    def test_default_weights(self):
        assert combine([0.1, 0.2], base=0.3) == pytest.approx(0.6)

    def test_bounds(self):
        assert combine([10.0], lower=0.0, upper=5.0) == 5.0
        assert combine([-10.0], lower=0.0, upper=5.0) == 0.0

    def test_mismatched_weights(self):
        with pytest.raises(ValueError):
            combine([1.0, 2.0], [1.0])

    def test_clamp_nan(self):
        assert clamp(float("nan"), 0.0, 1.0) == 0.0


class TestConfidenceModel:
    def test_impact_factors(self):
        assert category_confidence(1, "high") == 30
        assert category_confidence(1, "medium") == 20
        assert category_confidence(1, "low") == 10

    def test_confidence_caps_at_100(self):
        assert category_confidence(4, "high") == 100
        assert category_confidence(50, "low") == 100

    def test_sorted_by_descending_confidence(self):
        cats = [ISSUE_CATEGORIES_BY_ID[c] for c in ("subjective_opinion", "visual_estimation", "vague_language")]
        matches = {"subjective_opinion": _match(1), "visual_estimation": _match(2), "vague_language": _match(2)}
        scored = score_categories(matches, cats)
        assert [s.category.id for s in scored] == ["vague_language", "visual_estimation", "subjective_opinion"]
        assert [s.confidence for s in scored] == [60, 40, 10]

    def test_aggregate_probability(self):
        cat = ISSUE_CATEGORIES_BY_ID["vague_language"]
        scored = score_categories({cat.id: _match(1)}, [cat])
        assert aggregate_probability(scored) == pytest.approx(25 + 15 * 0.3)

    def test_aggregate_caps_at_95(self):
        cats = [IssueCategory(f"c{i}", ("x",), "high", "vague", "") for i in range(6)]
        scored = score_categories({c.id: _match(10) for c in cats}, cats)
        assert aggregate_probability(scored) == 95

    def test_no_matches_means_no_aggregate(self):
        assert aggregate_probability([]) is None
        assert statement_potential(None) == "none"

    def test_potential_bands(self):
        assert statement_potential(70.5) == "strong"
        assert statement_potential(70.0) == "moderate"
        assert statement_potential(40.5) == "moderate"
        assert statement_potential(40.0) == "limited"


class TestLinearModel:
    def test_clamps_high_and_low(self):
        profile = VIOLATION_PROFILES_BY_ID["speeding"]
        helpful = [f for f in profile.factors if f.delta > 0]
        harmful = [f for f in profile.factors if f.delta < 0]
        assert success_probability(0.9, helpful, []) == 0.95
        assert success_probability(0.1, harmful, []) == 0.05

    def test_sums_deltas(self):
        profile = VIOLATION_PROFILES_BY_ID["parking"]
        assert success_probability(profile.base_rate, [profile.factor("signage")], []) == pytest.approx(0.90)

    def test_tiers(self):
        assert probability_tier(0.70) == "high"
        assert probability_tier(0.40) == "moderate"
        assert probability_tier(0.39) == "low"

    def test_every_selection_stays_in_bounds(self):
        extremes = [
            [min(d.options, key=lambda o: o.delta) for d in APPEAL_DIMENSIONS],
            [max(d.options, key=lambda o: o.delta) for d in APPEAL_DIMENSIONS],
            [d.default_option for d in APPEAL_DIMENSIONS],
        ]
        for profile in VIOLATION_PROFILES:
            for r in range(len(profile.factors) + 1):
                for factors in itertools.combinations(profile.factors, r):
                    for options in extremes:
                        p = success_probability(profile.base_rate, factors, options)
                        assert 0.05 <= p <= 0.95
