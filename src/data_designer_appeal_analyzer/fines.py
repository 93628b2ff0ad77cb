from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from data_designer_appeal_analyzer.catalog import resolve_violation_profile
from data_designer_appeal_analyzer.hyperparameters import DEFAULT_HYPERPARAMETERS, Hyperparameters
from data_designer_appeal_analyzer.scoring import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FineEstimate:
    violation_type: str
    original_amount: float
    late_amount: float
    total_amount: float
    potential_saving: float
    success_probability: float
    expected_value: float
    diagnostics: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "violation_type": self.violation_type,
            "original_amount": self.original_amount,
            "late_amount": self.late_amount,
            "total_amount": self.total_amount,
            "potential_saving": self.potential_saving,
            "success_probability": self.success_probability,
            "expected_value": self.expected_value,
            "diagnostics": list(self.diagnostics),
        }


def _usable(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def estimate_fine_outcome(
    violation_type: str,
    amount: float | None = None,
    days_late: int = 0,
    success_rate: float | None = None,
    hyperparameters: Hyperparameters | None = None,
) -> FineEstimate:
    """Amount owed and what a successful appeal is worth on average.

    Late fees grow by a fixed rate per started period and stop at the
    schedule's late multiplier; the total never exceeds the schedule's
    maximum fee.

    Args:
        violation_type: Violation profile id; unknown ids use ``other``.
        amount: Fine amount on the ticket. Missing or invalid amounts use the
            schedule's base amount.
        days_late: Days past the due date.
        success_rate: Appeal success probability override in [0, 1]. Defaults
            to the profile's base success rate.
        hyperparameters: Optional tuning overrides.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    diagnostics: list[str] = []
    profile = resolve_violation_profile(violation_type, diagnostics)

    base = profile.base_amount
    if amount is not None:
        if _usable(amount) and amount > 0:
            base = float(amount)
        else:
            message = f"Invalid fine amount {amount!r}; using schedule amount {profile.base_amount}."
            logger.warning(message)
            diagnostics.append(message)

    late_amount = 0.0
    days = max(0, int(days_late or 0))
    if days > 0:
        periods = math.ceil(days / hp.late_period_days)
        factor = min(1 + periods * hp.late_period_rate, profile.late_multiplier)
        late_amount = base * (factor - 1)

    total = min(base + late_amount, profile.max_fee)
    probability = clamp(success_rate, 0.0, 1.0) if _usable(success_rate) else profile.base_rate

    return FineEstimate(
        violation_type=profile.id,
        original_amount=base,
        late_amount=round(late_amount, 2),
        total_amount=round(total, 2),
        potential_saving=round(total, 2),
        success_probability=probability,
        expected_value=round(total * probability, 2),
        diagnostics=tuple(diagnostics),
    )
