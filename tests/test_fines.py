import pytest

from data_designer_appeal_analyzer import estimate_fine_outcome


class TestEstimateFineOutcome:
    def test_schedule_defaults(self):
        estimate = estimate_fine_outcome("parking")
        assert estimate.original_amount == 60.0
        assert estimate.late_amount == 0.0
        assert estimate.total_amount == 60.0
        assert estimate.success_probability == pytest.approx(0.65)
        assert estimate.expected_value == pytest.approx(39.0)

    def test_late_fee_per_period(self):
        estimate = estimate_fine_outcome("parking", days_late=45)
        assert estimate.late_amount == pytest.approx(6.0)
        assert estimate.total_amount == pytest.approx(66.0)

    def test_late_fee_stops_at_multiplier(self):
        estimate = estimate_fine_outcome("parking", days_late=400)
        assert estimate.late_amount == pytest.approx(30.0)
        assert estimate.total_amount == pytest.approx(90.0)

    def test_total_capped_at_max_fee(self):
        estimate = estimate_fine_outcome("parking", amount=100, days_late=400)
        assert estimate.total_amount == 120.0

    def test_invalid_amount_falls_back(self):
        for amount in (-5, 0, float("nan"), float("inf")):
            estimate = estimate_fine_outcome("speeding", amount=amount)
            assert estimate.original_amount == 150.0
            assert estimate.diagnostics

    def test_success_rate_override_is_clamped(self):
        assert estimate_fine_outcome("parking", success_rate=1.5).success_probability == 1.0
        assert estimate_fine_outcome("parking", success_rate=0.25).expected_value == pytest.approx(15.0)

    def test_unknown_violation_type(self):
        estimate = estimate_fine_outcome("jaywalking")
        assert estimate.violation_type == "other"
        assert estimate.diagnostics
