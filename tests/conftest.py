"""Root conftest for all tests.

Provides in-memory stand-ins for the two external collaborators (Redis and the
remote muscle-selection endpoint) plus ready-made stores built on them.
"""

import asyncio

import pytest
import redis

from session_resolver.errors import MuscleSyncError
from session_resolver.muscles.types import MuscleSelectionData
from session_resolver.session.cache import SnapshotCache
from session_resolver.session.store import SessionInputStore


class FakeRedis:
    """Dict-backed Redis with the subset of commands the snapshot cache uses."""

    def __init__(self, fail: bool = False):
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        self.fail = fail

    def _check(self) -> None:
        if self.fail:
            raise redis.ConnectionError("connection refused")

    def get(self, key: str) -> str | None:
        self._check()
        return self.data.get(key)

    def setex(self, key: str, ttl: int, value: str) -> None:
        self._check()
        self.data[key] = value
        self.ttls[key] = ttl

    def delete(self, key: str) -> int:
        self._check()
        self.ttls.pop(key, None)
        return 1 if self.data.pop(key, None) is not None else 0


class FakeMuscleRemote:
    """Async stand-in for MuscleSelectionClient.

    Attributes:
        remote_selection: What load() returns
        save_calls: Every selection passed to save(), including cancelled ones
        saves: Selections whose save completed
        gate: When set, save() blocks until the event is released
    """

    def __init__(self, remote_selection: MuscleSelectionData | None = None):
        self.remote_selection = remote_selection
        self.load_error: MuscleSyncError | None = None
        self.save_error: MuscleSyncError | None = None
        self.save_result = True
        self.gate: asyncio.Event | None = None
        self.save_calls: list[MuscleSelectionData] = []
        self.saves: list[MuscleSelectionData] = []
        self.clears = 0

    async def load(self) -> MuscleSelectionData | None:
        if self.load_error is not None:
            raise self.load_error
        return self.remote_selection

    async def save(self, selection: MuscleSelectionData) -> bool:
        self.save_calls.append(selection)
        if self.gate is not None:
            await self.gate.wait()
        if self.save_error is not None:
            raise self.save_error
        self.saves.append(selection)
        return self.save_result

    async def clear(self) -> bool:
        self.clears += 1
        return True


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def snapshot_cache(fake_redis) -> SnapshotCache:
    return SnapshotCache(client=fake_redis, ttl_seconds=86400)


@pytest.fixture
def session_store(snapshot_cache) -> SessionInputStore:
    return SessionInputStore("test-session", cache=snapshot_cache)


@pytest.fixture
def fake_remote() -> FakeMuscleRemote:
    return FakeMuscleRemote()
