"""Unit tests for the Short Dark Triad scorer."""
import pytest

from psychometrics.item_banks import DARK_TRIAD_ITEMS
from psychometrics.schemas.inventory import InventoryItem
from psychometrics.scoring.darktriad import calculate_dark_triad_scores, rescale_to_percent


class TestRescale:

    @pytest.mark.parametrize("average,expected", [(1.0, 0.0), (3.0, 50.0), (5.0, 100.0)])
    def test_linear_mapping(self, average, expected):
        assert rescale_to_percent(average) == expected


class TestDarkTriadScores:

    def test_neutral_answers_score_fifty(self, neutral_dark_triad):
        result = calculate_dark_triad_scores(neutral_dark_triad)
        assert result.trait_scores == {
            "Machiavellianism": 50.0,
            "Narcissism": 50.0,
            "Psychopathy": 50.0,
        }

    def test_reverse_keyed_items_are_flipped(self):
        raw = {item.id: [5] for item in DARK_TRIAD_ITEMS}
        result = calculate_dark_triad_scores(raw)
        assert result.trait_scores["Machiavellianism"] == 100.0
        # 6 x 5 + 3 x 1 over 9 items
        assert result.trait_scores["Narcissism"] == pytest.approx((33 / 9 - 1) * 25)
        assert result.trait_scores["Psychopathy"] == pytest.approx((37 / 9 - 1) * 25)

    def test_subscale_without_answers_scores_zero(self):
        result = calculate_dark_triad_scores({"DT-M1": [4]})
        assert result.trait_scores["Machiavellianism"] == 75.0
        assert result.trait_scores["Narcissism"] == 0.0
        assert result.details["item_counts"]["Narcissism"] == 0

    def test_calibration_flag_has_no_effect(self, neutral_dark_triad):
        on = calculate_dark_triad_scores(neutral_dark_triad, enable_calibration=True)
        off = calculate_dark_triad_scores(neutral_dark_triad, enable_calibration=False)
        assert on.trait_scores == off.trait_scores
        assert on.details["calibrated"] is False

    def test_custom_items(self):
        items = [InventoryItem(id="x", text="x", category="Narcissism", keyed="minus")]
        result = calculate_dark_triad_scores({"x": [2, 2]}, items=items)
        assert result.trait_scores["Narcissism"] == 75.0
