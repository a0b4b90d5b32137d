"""Unit tests for the IPIP-NEO-120 scorer."""
import pytest

from psychometrics.item_banks import BIG_FIVE_ITEMS
from psychometrics.schemas.inventory import InventoryItem
from psychometrics.scoring.bigfive import calculate_big_five_scores, domain_totals, score_facets


def _item(item_id, facet, keyed="plus"):
    return InventoryItem(id=item_id, text=f"item {item_id}", keyed=keyed, category=facet)


class TestNeutralResponses:

    def test_uncalibrated_domains_sit_at_midpoint(self, neutral_big_five):
        result = calculate_big_five_scores(neutral_big_five, enable_calibration=False)
        for domain in "NEOAC":
            assert result.trait_scores[domain] == pytest.approx(72.0)

    def test_facets_sum_four_items(self, neutral_big_five):
        result = calculate_big_five_scores(neutral_big_five, enable_calibration=False)
        assert result.trait_scores["N1"] == pytest.approx(12.0)
        assert result.details["items_scored"] == 120

    def test_calibration_applies_to_domains_only(self, neutral_big_five):
        result = calculate_big_five_scores(neutral_big_five)
        assert result.trait_scores["E"] == pytest.approx(63.6)
        assert result.trait_scores["_raw_E"] == pytest.approx(72.0)
        assert result.trait_scores["E1"] == pytest.approx(12.0)
        assert result.details["calibrated"] is True

    def test_inventory_name(self, neutral_big_five):
        assert calculate_big_five_scores(neutral_big_five).inventory_name == "Big Five (IPIP-NEO-120)"


class TestItemScoring:

    def test_samples_averaged_and_minus_items_reversed(self):
        items = [_item("a", "E1"), _item("b", "E1", keyed="minus"), _item("c", "N2")]
        raw = {"a": [4, 5], "b": [2], "c": [1]}

        result = calculate_big_five_scores(raw, enable_calibration=False, items=items)

        # a = 4.5, b = 6 - 2 = 4
        assert result.trait_scores["E1"] == pytest.approx(8.5)
        assert result.trait_scores["E"] == pytest.approx(8.5)
        assert result.trait_scores["N"] == pytest.approx(1.0)
        assert result.trait_scores["O"] == 0.0

    def test_missing_items_are_not_zero_filled(self):
        items = [_item("a", "C3"), _item("b", "C3")]
        result = calculate_big_five_scores({"a": [5]}, enable_calibration=False, items=items)
        assert result.trait_scores["C3"] == 5.0
        assert result.details["facet_item_counts"] == {"C3": 1}

    def test_empty_sample_list_skipped(self):
        items = [_item("a", "A1")]
        result = calculate_big_five_scores({"a": []}, enable_calibration=False, items=items)
        assert "A1" not in result.trait_scores
        assert result.details["items_scored"] == 0

    def test_unanswered_facets_absent(self):
        facets = score_facets({"1": [4]})
        assert list(facets) == ["N1"]
        assert facets["N1"].count == 1

    def test_empty_input_calibrates_to_floor(self):
        result = calculate_big_five_scores({})
        for domain in "NEOAC":
            assert result.trait_scores[domain] == 24.0


class TestDomainTotals:

    def test_first_letter_of_facet_selects_domain(self):
        facets = score_facets({"1": [4], "6": [2], "2": [5]})
        totals = domain_totals(facets)
        assert totals["N"] == pytest.approx(6.0)
        assert totals["E"] == pytest.approx(5.0)

    def test_all_agree_counts_reverse_keyed_items_low(self):
        raw = {item.id: [5] for item in BIG_FIVE_ITEMS}
        result = calculate_big_five_scores(raw, enable_calibration=False)
        expected = {}
        for item in BIG_FIVE_ITEMS:
            domain = item.category[0]
            expected[domain] = expected.get(domain, 0) + (1 if item.keyed == "minus" else 5)
        for domain, total in expected.items():
            assert result.trait_scores[domain] == pytest.approx(total)


class TestRawDomainRange:

    @pytest.mark.parametrize(
        "pattern",
        [[1], [5], [1, 2, 3, 4, 5], [5, 1, 4], [2, 2, 5, 1]],
        ids=["all-ones", "all-fives", "ascending", "mixed", "uneven"],
    )
    def test_full_battery_raw_domains_within_bounds(self, pattern):
        raw = {
            item.id: [pattern[(i + k) % len(pattern)] for k in range(3)]
            for i, item in enumerate(BIG_FIVE_ITEMS)
        }
        result = calculate_big_five_scores(raw)
        for domain in "NEOAC":
            assert 24 <= result.trait_scores[f"_raw_{domain}"] <= 120
