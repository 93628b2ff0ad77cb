import pytest

from data_designer_appeal_analyzer.catalog import APPEAL_DIMENSIONS, AppealDimension, Option


class TestAppealDimension:
    def test_default_must_be_an_option(self):
        with pytest.raises(ValueError, match="no default option"):
            AppealDimension("evidence_strength", (Option("weak", -0.1), Option("strong", 0.1)), "some")

    def test_every_dimension_default_has_zero_delta(self):
        for dimension in APPEAL_DIMENSIONS:
            assert dimension.default_option.value == dimension.default
            assert dimension.default_option.delta == 0
