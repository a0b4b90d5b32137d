"""Unit tests for PromptService — prompt text and reply parsing."""
import pytest

from psychometrics.item_banks import BIG_FIVE_ITEMS, DISC_ITEMS, MBTI_ITEMS
from psychometrics.scoring.disc import tally_graphs
from psychometrics.services.prompt_service import PromptService


@pytest.fixture
def prompt_service():
    return PromptService()


class TestBuildPrompt:

    def test_likert_prompt_quotes_statement(self, prompt_service):
        prompt = prompt_service.build_prompt(BIG_FIVE_ITEMS[0])
        assert 'Statement: "Worry about things"' in prompt
        assert "1 (Strongly Disagree) to 5 (Strongly Agree)" in prompt

    def test_bipolar_prompt_lists_both_poles(self, prompt_service):
        prompt = prompt_service.build_prompt(MBTI_ITEMS[0])
        assert "1: Needs time alone" in prompt
        assert "5: Bored by time alone" in prompt

    def test_disc_prompt_numbers_words(self, prompt_service):
        prompt = prompt_service.build_prompt(DISC_ITEMS[0])
        assert "1. Charismatic" in prompt
        assert "4. Analytical" in prompt
        assert "MOST" in prompt and "LEAST" in prompt


class TestParseLikert:

    @pytest.mark.parametrize("reply,expected", [
        ("4", (4, False)),
        ("I'd say 2.", (2, False)),
        ("2 or maybe 4", (2, False)),
        ("**5**", (5, False)),
    ])
    def test_standalone_digit(self, prompt_service, reply, expected):
        assert prompt_service.parse_likert(reply) == expected

    def test_fallback_to_last_digit(self, prompt_service):
        assert prompt_service.parse_likert("Rating: 45") == (5, True)

    def test_fallback_rejects_out_of_range(self, prompt_service):
        assert prompt_service.parse_likert("10") == (None, False)

    def test_no_digits(self, prompt_service):
        assert prompt_service.parse_likert("I cannot answer that.") == (None, False)


class TestParseDisc:

    def test_two_numbers_become_zero_based(self, prompt_service):
        assert prompt_service.parse_disc("1, 4") == (0, 3)

    def test_encoded(self, prompt_service):
        assert prompt_service.encode_disc("Most: 2, Least: 3") == 12

    def test_single_number_fails(self, prompt_service):
        assert prompt_service.encode_disc("Just 1") is None

    def test_both_picks_out_of_range_are_skipped(self, prompt_service):
        assert prompt_service.encode_disc("5, 6") == 99

    def test_out_of_range_least_keeps_most(self, prompt_service):
        encoded = prompt_service.encode_disc("2, 11")
        assert encoded == 19

        graph1, graph2, _ = tally_graphs({"disc_1": [encoded]}, DISC_ITEMS[:1])
        assert graph1 == {"D": 1, "I": 0, "S": 0, "C": 0}
        assert sum(graph2.values()) == 0

    def test_zero_most_keeps_least(self, prompt_service):
        encoded = prompt_service.encode_disc("0, 2")
        assert encoded == 91

        graph1, graph2, _ = tally_graphs({"disc_1": [encoded]}, DISC_ITEMS[:1])
        assert sum(graph1.values()) == 0
        assert graph2 == {"D": 1, "I": 0, "S": 0, "C": 0}


class TestDebugPayload:

    def test_json_dump_detected(self):
        assert PromptService.is_debug_payload('  {"choices": []}')

    def test_plain_text_not_flagged(self):
        assert not PromptService.is_debug_payload("3")
