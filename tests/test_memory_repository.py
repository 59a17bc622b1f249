"""
Tests for the in-memory avatar store.
"""

import threading

import pytest

from soda_avatar.protocols import AvatarStore
from soda_avatar.repositories import InMemoryAvatarRepository


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_satisfies_protocol():
    """Test structural typing against AvatarStore."""
    assert isinstance(InMemoryAvatarRepository(), AvatarStore)


def test_get_set_clear():
    """Test basic store operations."""
    repo = InMemoryAvatarRepository()
    assert repo.get("a") is None

    repo.set("a", "<svg>a</svg>")
    repo.set("b", "<svg>b</svg>")
    assert repo.get("a") == "<svg>a</svg>"
    assert repo.count() == 2

    assert repo.clear() == 2
    assert repo.count() == 0
    assert repo.get("a") is None


def test_clear_resets_evictions():
    """Test clearing the store also resets the eviction counter."""
    repo = InMemoryAvatarRepository(max_entries=1)
    repo.set("a", "A")
    repo.set("b", "B")
    assert repo.get_stats()["evictions"] == 1

    assert repo.clear() == 1
    assert repo.get_stats()["evictions"] == 0


def test_unbounded_by_default():
    """Test nothing is evicted without a bound."""
    repo = InMemoryAvatarRepository()
    for i in range(500):
        repo.set(str(i), "svg")
    assert repo.count() == 500
    assert repo.get_stats()["evictions"] == 0


def test_max_entries_evicts_least_recently_used():
    """Test the entry bound evicts the least recently used key."""
    repo = InMemoryAvatarRepository(max_entries=2)
    repo.set("a", "A")
    repo.set("b", "B")
    assert repo.get("a") == "A"  # a is now most recent

    repo.set("c", "C")
    assert repo.get("b") is None
    assert repo.get("a") == "A"
    assert repo.get("c") == "C"
    assert repo.get_stats() == {"total_entries": 2, "max_entries": 2, "ttl": None, "evictions": 1}


def test_ttl_expires_entries():
    """Test entries expire after the TTL."""
    clock = FakeClock()
    repo = InMemoryAvatarRepository(ttl=60, clock=clock)
    repo.set("a", "A")

    clock.now += 59
    assert repo.get("a") == "A"

    clock.now += 1
    assert repo.get("a") is None
    assert repo.count() == 0


def test_count_purges_expired():
    """Test count ignores expired entries."""
    clock = FakeClock()
    repo = InMemoryAvatarRepository(ttl=10, clock=clock)
    repo.set("old", "x")
    clock.now += 5
    repo.set("new", "y")
    clock.now += 6
    assert repo.count() == 1
    assert repo.get_stats()["evictions"] == 1


@pytest.mark.parametrize("kwargs", [{"max_entries": 0}, {"max_entries": -1}, {"ttl": 0}, {"ttl": -5}])
def test_invalid_bounds(kwargs):
    """Test non-positive bounds are rejected."""
    with pytest.raises(ValueError):
        InMemoryAvatarRepository(**kwargs)


def test_concurrent_writers():
    """Test concurrent set/get does not corrupt the store."""
    repo = InMemoryAvatarRepository(max_entries=50)
    mismatches = []

    def worker(offset: int) -> None:
        for i in range(200):
            key = str((offset + i) % 80)
            repo.set(key, key)
            value = repo.get(key)
            if value is not None and value != key:
                mismatches.append((key, value))

    threads = [threading.Thread(target=worker, args=(n * 7,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert mismatches == []
    assert repo.count() <= 50
