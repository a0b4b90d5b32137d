"""Unit tests for AssessmentService — orchestration with a fake provider."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from psychometrics.services.assessment_service import AssessmentService
from psychometrics.services.openrouter_service import OpenRouterError


class FakeClient:
    """Stands in for OpenRouterService; replies via ``reply(prompt)``."""

    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    async def complete(self, model, prompt, temperature=None, system_prompt=""):
        self.calls.append((model, prompt, temperature, system_prompt))
        result = self.reply(prompt)
        if isinstance(result, Exception):
            raise result
        return result


def _service(reply, samples=2, chunk=3):
    client = FakeClient(reply)
    return AssessmentService(client, samples_per_item=samples, chunk_size=chunk), client


class TestRunAssessment:

    @pytest.mark.asyncio
    async def test_every_item_gets_every_sample(self):
        service, client = _service(lambda prompt: "4")
        profile = await service.run_assessment("m", ["darktriad"])

        raw = profile.results["darktriad"].raw_scores
        assert len(raw) == 27
        assert all(samples == [4, 4] for samples in raw.values())
        assert len(client.calls) == 54
        assert profile.results["darktriad"].trait_scores["Machiavellianism"] == 75.0

    @pytest.mark.asyncio
    async def test_persona_and_system_prompt_forwarded(self):
        service, client = _service(lambda prompt: "3", samples=1)
        profile = await service.run_assessment(
            "m", ["darktriad"], persona="Pirate", system_prompt="Arr."
        )
        assert profile.persona == "Pirate"
        assert profile.system_prompt == "Arr."
        assert {call[3] for call in client.calls} == {"Arr."}

    @pytest.mark.asyncio
    async def test_default_persona(self):
        service, _ = _service(lambda prompt: "3", samples=1)
        profile = await service.run_assessment("m", ["darktriad"])
        assert profile.persona == "Base Model"

    @pytest.mark.asyncio
    async def test_progress_reported_per_chunk(self):
        progress = []
        service, _ = _service(lambda prompt: "3", samples=1, chunk=10)
        await service.run_assessment("m", ["darktriad"], progress=lambda d, t: progress.append((d, t)))
        assert progress == [(10, 27), (20, 27), (27, 27)]

    @pytest.mark.asyncio
    async def test_big_five_run_adds_derived_mbti(self):
        service, _ = _service(lambda prompt: "3", samples=1, chunk=40)
        profile = await service.run_assessment("m", ["bigfive"])
        assert set(profile.results) == {"bigfive", "mbti_derived"}

    @pytest.mark.asyncio
    async def test_unknown_inventories_ignored(self):
        service, client = _service(lambda prompt: "3", samples=1)
        profile = await service.run_assessment("m", ["darktriad", "enneagram"])
        assert set(profile.results) == {"darktriad"}
        assert len(client.calls) == 27


class TestFallbacks:

    @pytest.mark.asyncio
    async def test_request_errors_fall_back_to_neutral(self):
        service, _ = _service(lambda prompt: OpenRouterError(500, "boom"), samples=1)
        profile = await service.run_assessment("m", ["darktriad"])

        assert all(v == [3] for v in profile.results["darktriad"].raw_scores.values())
        errors = [e for e in profile.logs if e.type == "error"]
        assert len(errors) == 27
        assert "OpenRouter API Error: 500" in errors[0].message

    @pytest.mark.asyncio
    async def test_unparseable_likert_reply_scores_neutral(self):
        service, _ = _service(lambda prompt: "No opinion.", samples=1)
        profile = await service.run_assessment("m", ["darktriad"])
        assert all(v == [3] for v in profile.results["darktriad"].raw_scores.values())

    @pytest.mark.asyncio
    async def test_disc_replies_encoded(self):
        service, _ = _service(lambda prompt: "2, 3", samples=1, chunk=28)
        profile = await service.run_assessment("m", ["disc"])
        assert all(v == [12] for v in profile.results["disc"].raw_scores.values())

    @pytest.mark.asyncio
    async def test_disc_failures_fall_back_to_zero(self):
        replies = iter(['{"choices": []}', "one"] * 28)
        service, _ = _service(lambda prompt: next(replies), samples=2, chunk=1)
        profile = await service.run_assessment("m", ["disc"])
        assert all(v == [0, 0] for v in profile.results["disc"].raw_scores.values())
        assert any("Debug Info" in e.message for e in profile.logs)


class TestVerificationLog:

    @pytest.mark.asyncio
    async def test_log_brackets_run(self):
        service, _ = _service(lambda prompt: "3", samples=1)
        profile = await service.run_assessment("m", ["darktriad"], persona="Pirate")

        assert profile.logs[0].message == "Starting test for model: m [Pirate]"
        assert profile.logs[-1].message == "Test completed successfully!"
        assert profile.logs[-1].type == "success"
        assert "Total items to query: 27" in profile.logs[1].message

    @pytest.mark.asyncio
    async def test_fallback_parse_is_flagged(self):
        service, _ = _service(lambda prompt: "Rating: 45", samples=1)
        profile = await service.run_assessment("m", ["darktriad"])
        assert any(e.message.endswith("(Fallback)") for e in profile.logs)


class TestSettingsDefaults:

    def test_defaults_come_from_settings(self):
        with patch("psychometrics.services.assessment_service.get_settings") as mock_settings:
            mock_settings.return_value = MagicMock(
                SAMPLES_PER_ITEM=7,
                ITEM_CHUNK_SIZE=2,
                DEFAULT_TEMPERATURE=0.3,
            )
            service = AssessmentService(MagicMock())
        assert service.samples_per_item == 7
        assert service.chunk_size == 2
        assert service.temperature == 0.3

    @pytest.mark.asyncio
    async def test_temperature_forwarded_to_client(self):
        client = MagicMock()
        client.complete = AsyncMock(return_value="3")
        service = AssessmentService(client, samples_per_item=1, chunk_size=27)
        await service.run_assessment("m", ["darktriad"])

        assert client.complete.await_count == 27
        args, _ = client.complete.call_args
        assert args[2] == service.temperature
