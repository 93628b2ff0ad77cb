from data_designer_appeal_analyzer import find_regulations, legal_arguments
from data_designer_appeal_analyzer.labels import MESSAGES
from data_designer_appeal_analyzer.references import ARGUMENT_TEMPLATES, REGULATIONS


def ids(search):
    return [h.regulation.id for h in search.hits]


class TestFindRegulations:
    def test_empty_query_sorts_by_relevance(self):
        search = find_regulations()
        assert ids(search) == ["ca-park-1", "il-red-1", "tx-speed-1", "ny-park-1", "fl-speed-1", "fed-proc-1"]
        assert [h.score for h in search.hits] == [95, 94, 92, 90, 88, 80]
        assert search.diagnostics == ()

    def test_title_match_outranks_body_match(self):
        # Only il-red-1 has "traffic" in its title; the others match in the description or text.
        search = find_regulations("traffic")
        assert ids(search) == ["il-red-1", "ca-park-1", "ny-park-1", "fed-proc-1"]
        assert [h.score for h in search.hits] == [114, 95, 90, 80]

    def test_code_match_is_boosted(self):
        search = find_regulations("22500")
        assert ids(search) == ["ca-park-1"]
        assert search.hits[0].score == 115

    def test_query_is_case_insensitive(self):
        assert ids(find_regulations("TRAFFIC")) == ids(find_regulations("traffic"))
        assert ids(find_regulations("  Crosswalk ")) == ["ca-park-1", "ny-park-1"]

    def test_violation_type_narrows(self):
        assert ids(find_regulations(violation_type="parking")) == ["ca-park-1", "ny-park-1"]
        assert ids(find_regulations(violation_type="speeding")) == ["tx-speed-1", "fl-speed-1"]

    def test_known_type_without_excerpts_searches_everything(self):
        search = find_regulations(violation_type="stop_sign")
        assert len(search.hits) == len(REGULATIONS)
        assert search.diagnostics == ()

    def test_unknown_type_searches_everything_with_diagnostic(self):
        search = find_regulations(violation_type="jaywalking")
        assert len(search.hits) == len(REGULATIONS)
        assert len(search.diagnostics) == 1

    def test_jurisdiction_filter(self):
        assert ids(find_regulations(jurisdiction="texas")) == ["tx-speed-1"]
        assert ids(find_regulations(jurisdiction="texas", violation_type="parking")) == []
        assert ids(find_regulations(jurisdiction="pennsylvania")) == []

    def test_unknown_jurisdiction_is_reported(self):
        search = find_regulations(jurisdiction="atlantis")
        assert search.hits == ()
        assert search.diagnostics == ("Unknown jurisdiction 'atlantis'.",)

    def test_no_match(self):
        assert find_regulations("zeppelin").hits == ()

    def test_localized_search(self):
        search = find_regulations("velocidad", locale="es")
        assert ids(search) == ["tx-speed-1", "fl-speed-1"]
        assert search.hits[0].title == "Límites de Velocidad Prima Facie"

    def test_payload_shape(self):
        payload = find_regulations("speed").to_payload()
        assert payload["query"] == "speed"
        assert payload["hits"][0]["code"] == "TTC §545.352"
        assert payload["hits"][0]["score"] == 112


class TestLegalArguments:
    def test_arguments_for_violation_type(self):
        result = legal_arguments("parking")
        assert result.group == "parking"
        assert [a.id for a in result.arguments] == ["p1", "p2"]
        assert result.arguments[0].title == "Inadequate Signage"
        assert result.arguments[0].precedent_case == "Martinez v. City of Los Angeles (2018)"
        assert result.arguments[1].precedent_case is None
        assert result.arguments[1].success_rate == 82
        assert result.diagnostics == ()

    def test_known_type_without_arguments_uses_general(self):
        result = legal_arguments("stop_sign")
        assert result.group == "general"
        assert [a.id for a in result.arguments] == ["g1"]
        assert result.diagnostics == ()

    def test_unknown_type_falls_back_to_general(self):
        result = legal_arguments("jaywalking")
        assert result.violation_type == "jaywalking"
        assert [a.id for a in result.arguments] == ["g1"]
        assert result.diagnostics == ("Unknown violation type 'jaywalking'; using 'general' arguments.",)
        assert legal_arguments(None).group == "general"

    def test_localized(self):
        result = legal_arguments("red_light", locale="es")
        assert result.arguments[0].title == "Tiempo de Luz Amarilla"
        assert result.arguments[0].legal_reference == "Estándares de la Administración Federal de Carreteras 4D.26"

    def test_every_template_has_text_in_every_locale(self):
        for template in ARGUMENT_TEMPLATES:
            for field in ("title", "description", "reference", "appeal_text"):
                for table in MESSAGES.values():
                    assert f"argument.{template.id}.{field}" in table
        for regulation in REGULATIONS:
            for field in ("title", "description", "full_text"):
                for table in MESSAGES.values():
                    assert f"regulation.{regulation.id}.{field}" in table
