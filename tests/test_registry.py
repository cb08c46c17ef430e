# SPDX-License-Identifier: Apache-2.0
"""ParticipantRegistry: ordering, capacity, submission rules, concurrency."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from ceremony.core.exceptions import AlreadyKeySubmitted, CapacityExceeded, UnknownParticipant
from ceremony.models import Acquired, KeySubmitted
from ceremony.services.registry import ParticipantRegistry


def test_identifiers_follow_registration_order():
    registry = ParticipantRegistry(capacity=3)
    ids = [registry.register(name).identifier for name in ["Barry", "Justin", "Brian"]]
    assert ids == [0, 1, 2]
    assert [r.name for r in registry.snapshot()] == ["Barry", "Justin", "Brian"]
    assert all(isinstance(r.state, Acquired) for r in registry.snapshot())


def test_names_need_not_be_unique():
    registry = ParticipantRegistry(capacity=2)
    assert registry.register("Alex").identifier == 0
    assert registry.register("Alex").identifier == 1


def test_register_beyond_capacity_fails():
    registry = ParticipantRegistry(capacity=2)
    registry.register("a")
    registry.register("b")
    with pytest.raises(CapacityExceeded):
        registry.register("c")
    assert len(registry) == 2


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ParticipantRegistry(capacity=0)


@pytest.mark.parametrize("identifier", [0, 5, -1])
def test_submit_unknown_identifier_leaves_registry_unchanged(identifier):
    registry = ParticipantRegistry(capacity=3)
    if identifier == 5:
        registry.register("a")
    before = registry.snapshot()
    with pytest.raises(UnknownParticipant):
        registry.submit(identifier, b"share", b"cipher")
    assert registry.snapshot() == before


def test_resubmission_rejected_and_first_submission_kept():
    registry = ParticipantRegistry(capacity=1)
    registry.register("a")
    registry.submit(0, b"share-1", b"cipher-1")
    with pytest.raises(AlreadyKeySubmitted):
        registry.submit(0, b"share-2", b"cipher-2")
    state = registry.get(0).state
    assert state == KeySubmitted(b"share-1", b"cipher-1")


def test_completeness_counts_submissions():
    registry = ParticipantRegistry(capacity=2)
    assert registry.completeness().submitted == 0
    assert registry.completeness().required == 2
    registry.register("a")
    registry.register("b")
    registry.submit(1, b"s", b"c")
    c = registry.completeness()
    assert (c.submitted, c.required, c.is_complete) == (1, 2, False)
    registry.submit(0, b"s", b"c")
    assert registry.completeness().is_complete


def test_concurrent_registration_assigns_dense_unique_ids():
    n = 64
    registry = ParticipantRegistry(capacity=n)
    with ThreadPoolExecutor(max_workers=16) as pool:
        records = list(pool.map(lambda i: registry.register(f"p{i}"), range(n)))
    ids = sorted(r.identifier for r in records)
    assert ids == list(range(n))
    for record in registry.snapshot():
        assert registry.get(record.identifier).name == record.name


def test_concurrent_registration_never_exceeds_capacity():
    registry = ParticipantRegistry(capacity=5)

    def attempt(i):
        try:
            return registry.register(f"p{i}").identifier
        except CapacityExceeded:
            return None

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(attempt, range(40)))
    assert sorted(r for r in results if r is not None) == [0, 1, 2, 3, 4]
    assert len(registry) == 5


def test_concurrent_submit_same_id_has_one_winner():
    registry = ParticipantRegistry(capacity=1)
    registry.register("a")

    def attempt(i):
        try:
            registry.submit(0, f"share-{i}".encode(), f"cipher-{i}".encode())
            return i
        except AlreadyKeySubmitted:
            return None

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(attempt, range(32)))
    winners = [r for r in results if r is not None]
    assert len(winners) == 1
    assert results.count(None) == 31
    winner = winners[0]
    assert registry.get(0).state == KeySubmitted(f"share-{winner}".encode(), f"cipher-{winner}".encode())
    assert registry.completeness().submitted == 1
