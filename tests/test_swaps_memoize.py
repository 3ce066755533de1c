from __future__ import annotations

import threading
import time

import pytest

from swaps.memoize import Selector, create_selector


def _counting_selector():
    calls = []

    def combine(items, factor):
        calls.append((items, factor))
        return [item * factor for item in items]

    selector = create_selector(lambda s: s["items"], lambda s: s["factor"], combine)
    return selector, calls


def test_same_state_returns_cached_result():
    selector, calls = _counting_selector()
    state = {"items": [1, 2], "factor": 3}

    first = selector(state)

    assert first == [3, 6]
    assert selector(state) is first
    assert len(calls) == 1
    assert selector.recomputations == 1


def test_new_state_with_same_inputs_reuses_result():
    selector, calls = _counting_selector()
    items = [1, 2]
    first = selector({"items": items, "factor": 2, "noise": 1})

    second = selector({"items": items, "factor": 2, "noise": 2})

    assert second is first
    assert len(calls) == 1


def test_inputs_compared_by_identity_not_equality():
    selector, calls = _counting_selector()
    first = selector({"items": [1, 2], "factor": 2})

    second = selector({"items": [1, 2], "factor": 2})

    assert second == first
    assert second is not first
    assert len(calls) == 2


def test_cache_holds_only_latest_inputs():
    selector, _ = _counting_selector()
    a = {"items": [1], "factor": 2}
    b = {"items": [5], "factor": 2}

    selector(a)
    selector(b)
    selector(a)

    assert selector.recomputations == 3


def test_selectors_have_independent_caches():
    items = [1, 2, 3]
    total = create_selector(lambda s: s["items"], sum, name="total")
    count = create_selector(lambda s: s["items"], lambda s: s["other"], lambda i, o: len(i) + o)

    state = {"items": items, "other": 0}
    total(state)
    count(state)
    count({"items": items, "other": 1})
    total({"items": items, "other": 1})

    assert total.recomputations == 1
    assert count.recomputations == 2
    assert total.name == "total"


def test_result_func_is_unmemoized():
    selector, calls = _counting_selector()

    assert selector.result_func([1], 4) == selector({"items": [1], "factor": 4})
    assert len(calls) == 2


def test_clear_cache_and_reset():
    selector, _ = _counting_selector()
    state = {"items": [1], "factor": 1}
    selector(state)

    selector.clear_cache()
    selector.reset_recomputations()
    selector(state)

    assert selector.recomputations == 1


def test_selector_can_be_an_input_of_another_selector():
    doubled = create_selector(lambda s: s["items"], lambda items: [i * 2 for i in items])
    total = create_selector(doubled, sum)
    items = [1, 2, 3]

    assert total({"items": items}) == 12
    assert total({"items": items}) == 12
    assert doubled.recomputations == 1
    assert total.recomputations == 1


def test_concurrent_callers_compute_once():
    def slow_sum(items):
        time.sleep(0.01)
        return sum(items)

    selector = create_selector(lambda s: s["items"], slow_sum)
    state = {"items": list(range(100))}
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(selector(state))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [4950] * 8
    assert selector.recomputations == 1


def test_create_selector_validates_arguments():
    with pytest.raises(TypeError):
        create_selector(sum)
    with pytest.raises(TypeError):
        create_selector(lambda s: s, "not callable")

    assert isinstance(create_selector(lambda s: s, len), Selector)
