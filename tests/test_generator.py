import pytest

pytest.importorskip("data_designer")

from data_designer_appeal_analyzer.config import AppealQualityColumnConfig  # noqa: E402
from data_designer_appeal_analyzer.generator import score_row  # noqa: E402

LETTER = (
    "Dear Sir or Madam,\n\n"
    "The citation is incorrect because the posted sign was hidden. "
    "The attached photograph is evidence of this.\n\n"
    "Sincerely,\nJordan Lee"
)


class TestAppealQualityColumn:
    def test_config_defaults(self):
        config = AppealQualityColumnConfig(name="quality", target_columns=["letter"])
        assert config.column_type == "appeal-quality"
        assert config.appeal_type == "comprehensive"
        assert config.required_columns == ["letter"]
        assert config.side_effect_columns == []

    def test_min_overall_is_bounded(self):
        with pytest.raises(ValueError):
            AppealQualityColumnConfig(name="quality", target_columns=["letter"], min_overall=6)

    def test_score_row(self):
        config = AppealQualityColumnConfig(name="quality", target_columns=["letter"], appeal_type="factual", include_issues=True)
        output = score_row(LETTER, config)
        assert {"is_valid", "overall", "label", "label_text", "suggestions", "strengths", "issues"} <= set(output)
        assert 1.0 <= output["overall"] <= 5.0

    def test_blank_row_is_invalid(self):
        config = AppealQualityColumnConfig(name="quality", target_columns=["letter"], min_overall=1.0)
        assert score_row("   ", config)["is_valid"] is False
