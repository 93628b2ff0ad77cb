# SPDX-License-Identifier: Apache-2.0
"""Heuristic analysis for traffic and parking ticket appeals.

Keyword and pattern matching only, no model or API calls:

* ``analyze_statement`` finds weaknesses in an officer's statement and scores them.
* ``predict_success`` estimates an appeal's chance from selected circumstances.
* ``score_quality`` rates an appeal draft on a 1-5 scale with advice.
* ``diff_texts`` compares two drafts word by word.
* ``find_regulations`` and ``legal_arguments`` look up illustrative regulation excerpts and argument templates.

Also ships an ``appeal-quality`` column type for NeMo Data Designer::

    from data_designer_appeal_analyzer.config import AppealQualityColumnConfig

    builder.add_column(AppealQualityColumnConfig(
        name="appeal_quality",
        target_columns=["appeal_letter"],
        appeal_type="factual",
        min_overall=3.5,
    ))
"""

from data_designer_appeal_analyzer.analyzer import (
    AnalysisResult,
    PredictionResult,
    QualityMetrics,
    analyze_statement,
    predict_success,
    score_quality,
)
from data_designer_appeal_analyzer.diff import DiffRun, diff_texts
from data_designer_appeal_analyzer.fines import FineEstimate, estimate_fine_outcome
from data_designer_appeal_analyzer.hyperparameters import Hyperparameters
from data_designer_appeal_analyzer.references import ArgumentSet, RegulationSearch, find_regulations, legal_arguments

__all__ = [
    "AnalysisResult",
    "ArgumentSet",
    "DiffRun",
    "FineEstimate",
    "Hyperparameters",
    "PredictionResult",
    "QualityMetrics",
    "RegulationSearch",
    "analyze_statement",
    "diff_texts",
    "estimate_fine_outcome",
    "find_regulations",
    "legal_arguments",
    "predict_success",
    "score_quality",
]
