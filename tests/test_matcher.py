from data_designer_appeal_analyzer.catalog import IssueCategory
from data_designer_appeal_analyzer.hyperparameters import Hyperparameters
from data_designer_appeal_analyzer.matcher import count_matches, match

SIGN = IssueCategory("signage", ("sign",), "high", "omission", "Signs.")
RADAR = IssueCategory("equipment", ("radar",), "high", "omission", "Radar.")
VAGUE = IssueCategory("vague", ("approximately", "estimated"), "high", "vague", "Vague wording.")
SPEED_PHRASE = IssueCategory("speed", ("high rate of speed",), "medium", "vague", "Speed wording.")


class TestMatch:
    def test_whole_word_only(self):
        assert match("Please see the signature line and the design.", [SIGN]) == {}

    def test_case_insensitive(self):
        result = match("The SIGN was missing.", [SIGN])
        assert result["signage"].count == 1

    def test_empty_and_whitespace_text(self):
        assert match("", [SIGN, RADAR]) == {}
        assert match("   \n\t ", [SIGN, RADAR]) == {}

    def test_unmatched_categories_are_omitted(self):
        result = match("The radar reading was 52.", [SIGN, RADAR])
        assert set(result) == {"equipment"}

    def test_counts_beyond_snippet_cap(self):
        text = "radar one, radar two, radar three, radar four, radar five"
        result = match(text, [RADAR])
        assert result["equipment"].count == 5
        assert len(result["equipment"].snippets) == 3

    def test_custom_snippet_cap(self):
        text = "radar one, radar two, radar three"
        result = match(text, [RADAR], Hyperparameters(snippet_cap=1))
        assert result["equipment"].count == 3
        assert len(result["equipment"].snippets) == 1

    def test_snippet_marks_the_match(self):
        text = "The officer estimated the vehicle was going approximately 45 mph"
        result = match(text, [VAGUE])
        snippets = result["vague"].snippets
        assert result["vague"].count == 2
        assert {s.text[s.start : s.end].lower() for s in snippets} == {"estimated", "approximately"}
        for s in snippets:
            assert s.term in s.text.lower()

    def test_snippet_window_is_bounded(self):
        text = "x" * 100 + " radar " + "y" * 100
        snippet = match(text, [RADAR])["equipment"].snippets[0]
        assert snippet.text.startswith("...")
        assert snippet.text.endswith("...")
        # 25 chars on each side of the five-letter match, plus the ellipses.
        assert len(snippet.text) == 3 + 25 + 5 + 25 + 3

    def test_highlighted(self):
        snippet = match("the sign fell", [SIGN])["signage"].snippets[0]
        assert snippet.highlighted() == "the **sign** fell"
        assert snippet.highlighted("<mark>", "</mark>") == "the <mark>sign</mark> fell"

    def test_every_distinct_term_gets_a_snippet(self):
        text = "approximately approximately approximately approximately, then estimated"
        result = match(text, [VAGUE])
        terms = {s.term.lower() for s in result["vague"].snippets}
        assert terms == {"approximately", "estimated"}
        assert result["vague"].terms == ("approximately", "estimated")

    def test_phrase_spans_any_whitespace(self):
        result = match("traveling at a high  rate of\nspeed", [SPEED_PHRASE])
        assert result["speed"].count == 1


class TestCountMatches:
    def test_counts_every_occurrence(self):
        assert count_matches("because, because and because", ["because"]) == 3

    def test_ignores_partial_words(self):
        assert count_matches("lawful lawyers", ["law"]) == 0
