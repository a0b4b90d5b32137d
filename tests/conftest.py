"""Shared pytest fixtures for LLM Psychometrics tests."""
import os

# Keep the module-level engine off the working directory during tests.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest

from psychometrics.item_banks import BIG_FIVE_ITEMS, DARK_TRIAD_ITEMS, DISC_ITEMS, MBTI_ITEMS
from psychometrics.schemas.inventory import InventoryResult, ModelProfile


def constant_responses(items, value, samples=3):
    """Every item answered ``value`` on every sample."""
    return {item.id: [value] * samples for item in items}


@pytest.fixture
def neutral_big_five():
    return constant_responses(BIG_FIVE_ITEMS, 3)


@pytest.fixture
def neutral_mbti():
    return constant_responses(MBTI_ITEMS, 3)


@pytest.fixture
def neutral_dark_triad():
    return constant_responses(DARK_TRIAD_ITEMS, 3)


@pytest.fixture
def first_word_most_last_word_least():
    """Every DISC group answered MOST=1, LEAST=4 (encoded 03)."""
    return constant_responses(DISC_ITEMS, 3)


def make_profile(
    model_name="openai/gpt-4o-mini",
    persona="Base Model",
    big_five=None,
    disc=None,
    mbti_type=None,
    mbti_derived_type=None,
    dark_triad=None,
    mbti_letters=None,
    timestamp=1_700_000_000_000,
):
    """Build a stored-looking profile with only the given inventories."""
    results = {}
    if big_five is not None:
        results["bigfive"] = InventoryResult(inventory_name="Big Five", trait_scores=big_five)
    if disc is not None:
        results["disc"] = InventoryResult(inventory_name="DISC", trait_scores=disc)
    if mbti_type is not None:
        results["mbti"] = InventoryResult(
            inventory_name="MBTI", type=mbti_type, trait_scores=mbti_letters or {}
        )
    if mbti_derived_type is not None:
        results["mbti_derived"] = InventoryResult(
            inventory_name="MBTI (Derived)", type=mbti_derived_type, trait_scores=mbti_letters or {}
        )
    if dark_triad is not None:
        results["darktriad"] = InventoryResult(inventory_name="Dark Triad", trait_scores=dark_triad)
    return ModelProfile(
        model_name=model_name,
        persona=persona,
        timestamp=timestamp,
        results=results,
    )


@pytest.fixture
def profile_factory():
    return make_profile
