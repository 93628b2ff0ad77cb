from data_designer_appeal_analyzer.diff import DiffRun, diff_texts, reconstruct

PAIRS = [
    ("the quick brown fox", "the slow brown fox"),
    ("please dismiss the ticket", "please kindly dismiss the ticket"),
    ("I was parked legally on Main Street", "I was parked on Main Street near the corner"),
    ("a a a b", "b a a a"),
    ("x y z", "z y x"),
    ("one two three", "four five six"),
    ("the the the", "the"),
    ("", "new text"),
    ("old text", ""),
]


class TestDiffTexts:
    def test_identical_texts(self):
        text = "I respectfully request dismissal of this citation."
        assert diff_texts(text, text) == [DiffRun(text, "unchanged")]

    def test_against_empty(self):
        assert diff_texts("keep this", "") == [DiffRun("keep this", "removed")]
        assert diff_texts("", "add this") == [DiffRun("add this", "added")]
        assert diff_texts("", "") == []
        assert diff_texts(None, None) == []

    def test_insertion(self):
        assert diff_texts("please dismiss the ticket", "please kindly dismiss the ticket") == [
            DiffRun("please", "unchanged"),
            DiffRun("kindly", "added"),
            DiffRun("dismiss the ticket", "unchanged"),
        ]

    def test_deletion(self):
        assert diff_texts("please kindly dismiss", "please dismiss") == [
            DiffRun("please", "unchanged"),
            DiffRun("kindly", "removed"),
            DiffRun("dismiss", "unchanged"),
        ]

    def test_substitution(self):
        assert diff_texts("the quick brown fox", "the slow brown fox") == [
            DiffRun("the", "unchanged"),
            DiffRun("slow", "added"),
            DiffRun("quick", "removed"),
            DiffRun("brown fox", "unchanged"),
        ]

    def test_tie_prefers_removal(self):
        assert diff_texts("x y", "y x") == [
            DiffRun("x", "removed"),
            DiffRun("y", "unchanged"),
            DiffRun("x", "added"),
        ]

    def test_adjacent_runs_are_merged(self):
        runs = diff_texts("one two three", "four five six")
        kinds = [r.kind for r in runs]
        assert all(a != b for a, b in zip(kinds, kinds[1:]))

    def test_whitespace_is_normalized(self):
        assert diff_texts("a  b\n c", "a b c") == [DiffRun("a b c", "unchanged")]

    def test_reconstruction(self):
        for original, modified in PAIRS:
            runs = diff_texts(original, modified)
            assert reconstruct(runs, "original") == " ".join(original.split())
            assert reconstruct(runs, "modified") == " ".join(modified.split())

    def test_payload(self):
        assert DiffRun("a", "added").to_payload() == {"text": "a", "kind": "added"}
