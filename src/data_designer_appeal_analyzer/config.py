from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class AppealQualityColumnConfig(SingleColumnConfig):
    """Score appeal drafts for clarity, persuasiveness, professionalism, and relevance.

    Runs the keyword and pattern heuristics against each row's text and produces
    a 1-5 overall score, the four sub-scores, a score label, and optional advice.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        appeal_type: ``procedural``, ``factual``, ``legal``, or ``comprehensive``.
            Unknown types are scored as ``comprehensive``.
        min_overall: Minimum overall score (1-5) for ``is_valid=True``. Defaults to 3.0
            (the boundary between "needs work" and "fair").
        locale: Locale for suggestion and issue messages.
        include_suggestions: Include suggestion and strength messages in output.
        include_issues: Include per-passage text issues (long sentences, passive voice, hedging).
    """

    target_columns: list[str]
    appeal_type: str = Field(default="comprehensive", description="Appeal type used for relevance scoring")
    min_overall: float = Field(default=3.0, ge=1.0, le=5.0, description="Minimum overall score for is_valid=True")
    locale: str = Field(default="en", description="Locale for advice messages")
    include_suggestions: bool = Field(default=True, description="Include suggestion and strength messages in output")
    include_issues: bool = Field(default=False, description="Include per-passage text issues in output")
    column_type: Literal["appeal-quality"] = "appeal-quality"

    @staticmethod
    def get_column_emoji() -> str:
        return "⚖️"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
