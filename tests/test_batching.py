import itertools
import random
from datetime import timedelta
from types import SimpleNamespace

import pytest

from currentlog import batching
from currentlog.batching import (
    Sample,
    earliest_per_batch,
    new_batch_id,
    passes_threshold,
    synthesize,
)


def _samples(values):
    return [Sample(sample=k, value=v) for k, v in enumerate(values)]


@pytest.mark.parametrize("n", [1, 2, 3, 10, 120])
def test_timestamps_end_at_capture_instant_one_second_apart(now, n):
    out = synthesize(_samples([1.0] * n), now)

    assert len(out) == n
    assert out[-1].timestamp == now
    for k, r in enumerate(out):
        assert r.timestamp == now - timedelta(seconds=n - 1 - k)


def test_synthesize_keeps_order_and_values(now):
    samples = [Sample(sample=7, value=1.5), Sample(sample=3, value=450.0), Sample(sample=9, value=0.0)]
    out = synthesize(samples, now, indicator_id=4)

    assert [(r.sample, r.value) for r in out] == [(7, 1.5), (3, 450.0), (9, 0.0)]
    assert all(r.indicator_id == 4 for r in out)
    assert out[0].timestamp < out[1].timestamp < out[2].timestamp


def test_one_identifier_per_batch(now):
    a = synthesize(_samples([1, 2, 3]), now)
    b = synthesize(_samples([1, 2, 3]), now)

    assert len({r.identifier for r in a}) == 1
    assert len({r.identifier for r in b}) == 1
    assert a[0].identifier != b[0].identifier


def test_explicit_batch_id_is_used(now):
    out = synthesize(_samples([1, 2]), now, batch_id="fixed")
    assert [r.identifier for r in out] == ["fixed", "fixed"]


def test_empty_batch_generates_nothing(now, monkeypatch):
    def _boom():
        raise AssertionError("identifier must not be generated for an empty batch")

    monkeypatch.setattr(batching, "new_batch_id", _boom)
    assert synthesize([], now) == []


def test_batch_ids_are_unique():
    ids = {new_batch_id() for _ in range(10_000)}
    assert len(ids) == 10_000


def test_threshold_gate():
    assert not passes_threshold(_samples([]))
    assert not passes_threshold(_samples([10, 399.99, 0]))
    assert passes_threshold(_samples([10, 400, 0]))
    assert passes_threshold(_samples([401.5]))
    assert not passes_threshold(_samples([450]), threshold=500)


def test_earliest_per_batch_ignores_row_order():
    rows = [
        {"identifier": "a", "timestamp": 5},
        {"identifier": "a", "timestamp": 3},
        {"identifier": "b", "timestamp": 10},
    ]
    for perm in itertools.permutations(rows):
        got = {b.identifier: b.timestamp for b in earliest_per_batch(perm)}
        assert got == {"a": 3, "b": 10}


def test_earliest_per_batch_newest_first_and_objects(now):
    rows = []
    for ident, start in (("x", 0), ("y", 60), ("z", 30)):
        for k in range(5):
            rows.append(SimpleNamespace(identifier=ident, timestamp=now + timedelta(seconds=start + k)))
    random.Random(1).shuffle(rows)

    out = earliest_per_batch(rows)

    assert [b.identifier for b in out] == ["y", "z", "x"]
    assert out[-1].timestamp == now


def test_earliest_per_batch_empty():
    assert earliest_per_batch([]) == []


def test_threshold_gate_int_values():
    assert passes_threshold(_samples([1, 400]))
    assert not passes_threshold(_samples([1, 399]))
