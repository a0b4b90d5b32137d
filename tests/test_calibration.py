"""Unit tests for the z-score calibration transform."""
import pytest

from psychometrics.scoring.calibration import (
    CALIBRATION_PARAMS,
    LLM_BASELINE,
    calibrate_big_five_domain,
    calibrate_disc_quadrant,
    calibrate_mbti_dimension,
    calibrate_score,
)


class TestCalibrateScore:
    """Tests for the generic recentre/rescale/clamp transform."""

    def test_observed_mean_maps_to_target_mean(self):
        assert calibrate_score(3.2) == pytest.approx(3.0)

    def test_one_std_above_maps_to_one_target_std_above(self):
        assert calibrate_score(3.2 + 0.7) == pytest.approx(4.2)

    def test_clamps_to_upper_bound(self):
        # (5 - 3.2) / 0.7 * 1.2 + 3 = 6.09 before clamping
        assert calibrate_score(5.0) == 5.0

    def test_clamps_to_lower_bound(self):
        assert calibrate_score(1.0) == 1.0

    def test_explicit_parameters_override_baseline(self):
        result = calibrate_score(10, observed_mean=10, observed_std=2, target_mean=50,
                                 target_std=10, min_value=0, max_value=100)
        assert result == pytest.approx(50.0)

    def test_baseline_params_are_the_defaults(self):
        assert LLM_BASELINE.apply(4.0) == pytest.approx(calibrate_score(4.0))


class TestInventoryCalibration:
    """Per-inventory constants and their worked values."""

    def test_big_five_observed_mean_recentres_to_72(self):
        assert calibrate_big_five_domain(76.8) == pytest.approx(72.0)

    def test_big_five_neutral_answers_read_below_midpoint(self):
        # All-neutral 72 sits 0.6 observed std below the LLM mean.
        assert calibrate_big_five_domain(72.0) == pytest.approx(63.6)

    def test_big_five_clamped_to_domain_range(self):
        assert calibrate_big_five_domain(0.0) == 24.0
        assert calibrate_big_five_domain(120.0) == 120.0

    def test_mbti_observed_mean_recentres_to_24(self):
        assert calibrate_mbti_dimension(25.6) == pytest.approx(24.0)

    def test_mbti_midpoint_shifts_toward_left_pole(self):
        assert calibrate_mbti_dimension(24.0) == pytest.approx(24.0 - 1.6 / 3.5 * 5.0)

    def test_disc_keeps_centre(self):
        assert calibrate_disc_quadrant(14.0) == pytest.approx(14.0)

    def test_disc_widens_spread_and_clamps(self):
        assert calibrate_disc_quadrant(17.5) == pytest.approx(19.5)
        assert calibrate_disc_quadrant(28.0) == 28.0
        assert calibrate_disc_quadrant(0.0) == 0.0

    def test_calibrated_inventories(self):
        assert set(CALIBRATION_PARAMS) == {"bigfive", "mbti", "disc"}


class TestClamping:

    @pytest.mark.parametrize("inventory", ["bigfive", "mbti", "disc"])
    def test_extreme_inputs_hit_declared_bounds(self, inventory):
        params = CALIBRATION_PARAMS[inventory]
        assert params.apply(1000) == params.max_value
        assert params.apply(-1000) == params.min_value
