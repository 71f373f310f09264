"""Tests for the cached breed catalog."""

from __future__ import annotations

from breed_quiz.constants.quiz_constants import FALLBACK_BREEDS
from breed_quiz.core.services.category_pool import CategoryPool


def test_empty_pool_offers_fallback():
    pool = CategoryPool()
    assert not pool.is_loaded()
    assert pool.needs_fetch()
    assert pool.get_candidates() == frozenset(FALLBACK_BREEDS)


def test_populated_pool_is_cached():
    pool = CategoryPool()
    pool.begin_fetch()
    assert pool.is_pending()
    assert not pool.needs_fetch()

    pool.populate({"Husky", "Akita", ""})

    assert pool.is_loaded()
    assert not pool.is_pending()
    assert not pool.needs_fetch()
    assert pool.get_candidates() == frozenset({"Husky", "Akita"})


def test_failure_blocks_refetch_until_allowed():
    pool = CategoryPool()
    pool.begin_fetch()
    pool.mark_failed()

    assert not pool.needs_fetch()
    assert pool.get_candidates() == frozenset(FALLBACK_BREEDS)

    pool.allow_refetch()
    assert pool.needs_fetch()


def test_empty_catalog_counts_as_failure():
    pool = CategoryPool(fallback=("Pug", "Akita", "Boxer"))
    pool.begin_fetch()
    pool.populate(set())

    assert not pool.is_loaded()
    assert not pool.needs_fetch()
    assert pool.get_fallback() == ("Pug", "Akita", "Boxer")
