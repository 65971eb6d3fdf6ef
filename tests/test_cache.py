import threading
import time

import pytest

from mobility_survey.cache import SingleFlight


def test_single_flight__computes_once():
    calls = []

    def _compute():
        calls.append(1)
        return [1, 2, 3]

    flight = SingleFlight(_compute)
    assert not flight.done
    first = flight.get()
    assert flight.get() is first
    assert flight.done
    assert len(calls) == 1


def test_single_flight__failure_is_terminal():
    calls = []

    def _compute():
        calls.append(1)
        raise RuntimeError("boom")

    flight = SingleFlight(_compute)
    with pytest.raises(RuntimeError) as first:
        flight.get()
    with pytest.raises(RuntimeError) as second:
        flight.get()
    assert first.value is second.value
    assert len(calls) == 1


def test_single_flight__concurrent_callers_share_one_computation():
    calls = []
    results = []

    def _compute():
        calls.append(1)
        time.sleep(0.05)
        return object()

    flight = SingleFlight(_compute)
    threads = [
        threading.Thread(target=lambda: results.append(flight.get())) for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(result is results[0] for result in results)
