import pytest

from data_designer_appeal_analyzer import analyze_statement, predict_success
from data_designer_appeal_analyzer.catalog import APPEAL_DIMENSIONS, VIOLATION_PROFILES

SCENARIO_STATEMENT = "The officer estimated the vehicle was going approximately 45 mph"

RADAR_STATEMENT = "Using radar I observed the car at approximately 50 mph. The radar reading was final."

STATEMENTS = [
    SCENARIO_STATEMENT,
    RADAR_STATEMENT,
    "It was dark and raining. I lost sight of the vehicle, a similar vehicle turned the corner. " * 5,
    "The sign was posted at the curb. No record of the meter. I believe it appeared to be expired.",
    "Nothing notable happened.",
]


class TestAnalyzeStatement:
    def test_vague_estimate_scenario(self):
        result = analyze_statement(SCENARIO_STATEMENT, "speeding")
        assert [i.category_id for i in result.issues] == ["vague_language"]
        issue = result.issues[0]
        assert issue.match_count == 2
        assert issue.confidence == 60
        snippet_text = " ".join(s.text for s in issue.snippets)
        assert "estimated" in snippet_text
        assert "approximately" in snippet_text
        assert result.probability == pytest.approx(34.0)
        assert result.potential == "limited"

    def test_vague_estimate_advice(self):
        result = analyze_statement(SCENARIO_STATEMENT, "speeding")
        assert [a.code for a in result.strengths] == ["strength_high_impact_issue", "strength_well_supported"]
        assert [a.code for a in result.weaknesses] == ["weakness_single_issue", "weakness_no_procedural_issue"]
        assert result.recommendations[0].code == "recommend_limited"
        assert "Vague language" in result.recommendations[1].message

    def test_issues_sorted_by_confidence(self):
        result = analyze_statement(RADAR_STATEMENT, "speeding")
        assert [i.category_id for i in result.issues] == ["equipment_reliability", "vague_language", "visual_estimation"]
        assert [i.confidence for i in result.issues] == [60, 30, 20]
        assert result.probability == pytest.approx(40.5)
        assert result.potential == "moderate"

    def test_bounds(self):
        for text in STATEMENTS:
            for profile in VIOLATION_PROFILES:
                result = analyze_statement(text, profile.id)
                for issue in result.issues:
                    assert 0 <= issue.confidence <= 100
                    assert len(issue.snippets) <= 3
                    assert issue.match_count > 0
                if result.probability is not None:
                    assert 0 <= result.probability <= 95
                assert len(result.strengths) <= 5
                assert len(result.weaknesses) <= 5

    def test_no_issues_found(self):
        for text in ("", "   ", None, "Nothing notable happened."):
            result = analyze_statement(text, "speeding")
            assert result.issues == ()
            assert result.probability is None
            assert result.potential == "none"
            assert not result.issues_found
            assert [a.code for a in result.recommendations] == ["recommend_none"]

    def test_unknown_violation_type(self):
        result = analyze_statement(SCENARIO_STATEMENT, "jaywalking")
        assert result.violation_type == "other"
        assert result.diagnostics
        assert result.issues

    def test_payload_shape(self):
        payload = analyze_statement(RADAR_STATEMENT, "speeding").to_payload()
        expected_keys = {
            "violation_type", "issues", "probability", "potential", "strengths", "weaknesses",
            "recommendations", "diagnostics",
        }
        assert expected_keys == set(payload.keys())
        assert payload["issues"][0]["snippets"][0]["term"] == "radar"


class TestPredictSuccess:
    def test_parking_signage_scenario(self):
        result = predict_success("parking", ["signage"], {})
        assert result.probability == pytest.approx(0.90)
        assert result.tier == "high"
        assert result.diagnostics == ()
        assert [a.code for a in result.strengths] == ["signage"]
        assert [a.code for a in result.weaknesses] == [
            "missing.valid_permit_displayed",
            "missing.meter_malfunction",
            "missing.ticket_details_wrong",
            "missing.loading_in_progress",
        ]

    def test_empty_selection_is_base_rate(self):
        for profile in VIOLATION_PROFILES:
            result = predict_success(profile.id)
            assert result.probability == pytest.approx(profile.base_rate)
            assert result.strengths == ()

    def test_all_factors_stay_in_bounds(self):
        for profile in VIOLATION_PROFILES:
            for pick in (min, max):
                selections = {d.id: pick(d.options, key=lambda o: o.delta).value for d in APPEAL_DIMENSIONS}
                result = predict_success(profile.id, [f.id for f in profile.factors], selections)
                assert 0.05 <= result.probability <= 0.95
                assert len(result.strengths) <= 5
                assert len(result.weaknesses) <= 5

    def test_floor(self):
        selections = {
            "evidence_strength": "none",
            "appeal_timeliness": "late",
            "prior_record": "repeat",
            "jurisdiction": "strict",
        }
        result = predict_success("handicapped", ["no_placard"], selections)
        assert result.probability == 0.05
        assert result.tier == "low"
        assert [a.code for a in result.weaknesses] == [
            "no_placard",
            "appeal_timeliness.late",
            "evidence_strength.none",
            "prior_record.repeat",
            "jurisdiction.strict",
        ]

    def test_options_add_their_delta(self):
        result = predict_success("speeding", [], {"evidence_strength": "strong", "jurisdiction": "lenient"})
        assert result.probability == pytest.approx(0.60)
        assert [a.code for a in result.strengths] == ["evidence_strength.strong", "jurisdiction.lenient"]

    def test_unknown_ids_are_soft(self):
        result = predict_success("parking", ["signage", "moon_phase"], {"weather": "rain", "prior_record": "perfect"})
        assert result.probability == pytest.approx(0.90)
        assert len(result.diagnostics) == 3

    def test_unknown_violation_type(self):
        result = predict_success("jaywalking", ["signage"])
        assert result.violation_type == "other"
        assert result.probability == pytest.approx(0.50)
        assert len(result.diagnostics) == 2

    def test_duplicate_factor_counts_once(self):
        result = predict_success("parking", ["signage", "signage"])
        assert result.probability == pytest.approx(0.90)

    def test_localized(self):
        result = predict_success("parking", ["signage"], locale="es")
        assert result.strengths[0].message == "Señalización confusa o ausente juega a su favor."

    def test_unknown_locale_is_reported(self):
        result = predict_success("parking", ["signage"], locale="fr")
        assert result.strengths[0].message == "Unclear or missing signage works in your favor."
        assert result.diagnostics == ("Unknown locale 'fr'; using 'en'.",)
