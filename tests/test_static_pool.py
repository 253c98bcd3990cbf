"""Tests for StaticFactPool and StaticFactProvider."""

import random

import pytest

from funfacts.data import ALL_STATIC_FACTS, GameFact, StaticFact
from funfacts.providers.static import StaticFactPool, StaticFactProvider


def _facts(n_true: int, n_false: int) -> list[StaticFact]:
    facts = [
        StaticFact(id=f"true-{i}", text=f"True fact {i}", truth_value=True, category="Test")
        for i in range(n_true)
    ]
    facts += [
        StaticFact(
            id=f"false-{i}",
            text=f"False fact {i}",
            truth_value=False,
            category="Test",
            explanation="Not so.",
        )
        for i in range(n_false)
    ]
    return facts


def test_pool_requires_facts() -> None:
    with pytest.raises(ValueError, match="at least one"):
        StaticFactPool([])


def test_pool_defaults_to_bundled_facts() -> None:
    assert len(StaticFactPool()) == len(ALL_STATIC_FACTS)


def test_draw_avoids_recent_repeats() -> None:
    pool = StaticFactPool(_facts(30, 0), recent_window=20, rng=random.Random(1))
    drawn = [pool.draw().id for _ in range(20)]
    assert len(set(drawn)) == 20


def test_draw_resets_when_window_covers_pool() -> None:
    pool = StaticFactPool(_facts(5, 0), recent_window=20, rng=random.Random(2))
    first_round = [pool.draw().id for _ in range(5)]
    assert len(set(first_round)) == 5

    # Every fact is now excluded, so the next draw must reset and still succeed
    sixth = pool.draw()
    assert sixth.id in first_round
    assert pool.recent_ids == [sixth.id]


def test_recent_window_is_bounded() -> None:
    pool = StaticFactPool(_facts(50, 0), recent_window=3, rng=random.Random(3))
    for _ in range(10):
        pool.draw()
    assert len(pool.recent_ids) == 3


def test_zero_window_allows_repeats() -> None:
    pool = StaticFactPool(_facts(1, 0), recent_window=0)
    assert pool.draw().id == pool.draw().id == "true-0"
    assert pool.recent_ids == []


def test_draw_by_truth_value() -> None:
    pool = StaticFactPool(_facts(5, 5), rng=random.Random(4))
    assert all(pool.draw(True).truth_value for _ in range(10))
    assert not any(pool.draw(False).truth_value for _ in range(10))


def test_truth_filter_and_exclusion_compose() -> None:
    pool = StaticFactPool(_facts(2, 10), recent_window=20, rng=random.Random(5))
    a = pool.draw(True)
    b = pool.draw(True)
    assert a.id != b.id
    # Both true facts are recent; exclusion resets rather than failing
    assert pool.draw(True).truth_value is True


def test_draw_missing_truth_value_raises() -> None:
    pool = StaticFactPool(_facts(3, 0))
    with pytest.raises(LookupError):
        pool.draw(False)


async def test_provider_returns_fresh_game_facts() -> None:
    pool = StaticFactPool(_facts(3, 3), rng=random.Random(6))
    provider = StaticFactProvider(pool, truth=False)

    fact = await provider.fetch()

    assert isinstance(fact, GameFact)
    assert fact.truth_value is False
    assert fact.explanation == "Not so."
    assert fact.is_answered is False


async def test_providers_share_recent_window() -> None:
    pool = StaticFactPool(_facts(10, 10), recent_window=20, rng=random.Random(7))
    true_provider = StaticFactProvider(pool, truth=True)
    any_provider = StaticFactProvider(pool)

    await true_provider.fetch()
    await any_provider.fetch()

    assert len(pool.recent_ids) == 2


def test_categories_lists_bundled_categories() -> None:
    categories = StaticFactPool().categories
    assert categories == sorted(set(categories))
    assert "Animals" in categories
    assert "Space" in categories


def test_draw_by_category_ignores_case() -> None:
    pool = StaticFactPool(rng=random.Random(3))
    for _ in range(10):
        fact = pool.draw(category="animals")
        assert fact.category == "Animals"


def test_category_and_truth_filters_compose() -> None:
    pool = StaticFactPool(rng=random.Random(4))
    for _ in range(10):
        fact = pool.draw(truth=False, category="Space")
        assert fact.category == "Space"
        assert fact.truth_value is False


def test_draw_unknown_category_raises() -> None:
    pool = StaticFactPool(_facts(2, 2))
    with pytest.raises(LookupError, match="Sports"):
        pool.draw(category="Sports")


async def test_provider_category_filter() -> None:
    provider = StaticFactProvider(StaticFactPool(rng=random.Random(5)), category="Food")
    fact = await provider.fetch()
    assert fact.category == "Food"
