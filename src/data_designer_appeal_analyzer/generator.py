from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_appeal_analyzer.analyzer import score_quality
from data_designer_appeal_analyzer.config import AppealQualityColumnConfig

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def score_row(text: str, config: AppealQualityColumnConfig) -> dict:
    metrics = score_quality(text, config.appeal_type, locale=config.locale)
    output: dict = {
        "is_valid": metrics.analyzed and metrics.overall >= config.min_overall,
        "overall": metrics.overall,
        "label": metrics.label,
        "label_text": metrics.label_text,
        "clarity": metrics.clarity,
        "persuasiveness": metrics.persuasiveness,
        "professionalism": metrics.professionalism,
        "relevance": metrics.relevance,
    }
    if config.include_suggestions:
        output["suggestions"] = [a.message for a in metrics.suggestions]
        output["strengths"] = [a.message for a in metrics.strengths]
    if config.include_issues:
        output["issues"] = [i.to_payload() for i in metrics.issues]
    return output


class AppealQualityColumnGenerator(ColumnGeneratorFullColumn[AppealQualityColumnConfig]):
    """Column generator that scores appeal drafts with the quality heuristics."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"⚖️ Scoring column {self.config.name!r} for appeal quality")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   appeal type: {self.config.appeal_type}")
        logger.info(f"   min_overall: {self.config.min_overall}")

        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = " ".join(str(v) for v in row.values if v is not None)
            results.append(score_row(text, self.config))

        data = data.copy()
        data[self.config.name] = results
        return data
