from __future__ import annotations

import pytest

from brick_chunks.analyzer import analyze
from brick_chunks.cache import AnalysisCache
from brick_chunks.errors import NotAnalyzed

from conftest import make_brick


def test_get_before_set_is_absent():
    cache = AnalysisCache()
    assert cache.get() is None
    with pytest.raises(NotAnalyzed, match="analyze"):
        cache.require()


def test_set_replaces_previous_result():
    cache = AnalysisCache()
    first = analyze([make_brick()])
    second = analyze([make_brick(), make_brick(600, 0)])
    cache.set(first)
    assert cache.require() is first
    cache.set(second)
    assert cache.get() is second
    assert cache.require().total_bricks == 2


def test_empty_result_still_counts_as_analyzed():
    cache = AnalysisCache()
    cache.set(analyze([]))
    assert cache.require().is_empty
