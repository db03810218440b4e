"""Muscle selection synchronizer.

Owns the in-memory muscle selection for the editing session and keeps three
copies in step: the remote store, the local expiring cache, and the session
inputs (focus_area / muscle_targeting) that resolution reads.

Lifecycle:
1. initialize(): remote load. A non-empty remote selection wins over the cache
   and is projected into the session inputs immediately. Otherwise a cached
   selection is adopted, but only if the session has no muscle data yet.
2. Every change writes the cache and (re)schedules a debounced sync task. Bursts
   of changes within the debounce window coalesce: only the last state is sent.
3. When the debounce fires: a non-empty selection is saved remotely as a
   separate fire-and-forget task, then the selection is projected into the
   session inputs unconditionally.
4. reset() cancels any pending or in-flight sync, so a stale write can never
   land after the reset.

Remote failures are logged and leave local state untouched. There is no retry:
the next change attempts the save again.

State transitions:
    EMPTY -> LOADING -> SYNCED | EMPTY
    SYNCED | EMPTY | ERROR -> SAVING -> SYNCED | ERROR
    any -> EMPTY (reset, or sync of an empty selection)
"""

import asyncio

from loguru import logger
from pydantic import ValidationError

from session_resolver.config.settings import settings
from session_resolver.errors import MuscleSyncError
from session_resolver.muscles import selection as ops
from session_resolver.muscles.client import MuscleSelectionClient
from session_resolver.muscles.types import MuscleSelectionData, SyncState
from session_resolver.session.cache import MUSCLE_SELECTION_KEY, SnapshotCache
from session_resolver.session.store import SessionInputStore
from session_resolver.session.types import SessionField
from session_resolver.validation.types import ValidationResult


class MuscleSelectionSynchronizer:
    """Debounced synchronizer between the muscle selection and its stores.

    Mutators must be called from inside the running event loop, since they
    schedule the debounced sync as an asyncio task.

    Attributes:
        max_groups: Maximum number of selectable muscle groups
        last_error: Message of the most recent remote failure, None after a successful save
    """

    def __init__(
        self,
        store: SessionInputStore,
        remote: MuscleSelectionClient,
        cache: SnapshotCache | None = None,
        debounce_ms: int | None = None,
        max_groups: int | None = None,
    ):
        self._store = store
        self._remote = remote
        self._cache = cache
        self._debounce_seconds = (debounce_ms if debounce_ms is not None else settings.muscle_sync_debounce_ms) / 1000
        self.max_groups = max_groups if max_groups is not None else settings.max_muscle_groups

        self._selection = MuscleSelectionData()
        self._state = SyncState.EMPTY
        self._pending: asyncio.Task[None] | None = None
        self._inflight: asyncio.Task[None] | None = None
        self.last_error: str | None = None

    @property
    def selection(self) -> MuscleSelectionData:
        return self._selection

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def has_pending_sync(self) -> bool:
        return any(task is not None and not task.done() for task in (self._pending, self._inflight))

    @property
    def can_add_more(self) -> bool:
        return len(self._selection.selected_groups) < self.max_groups

    @property
    def cache_key(self) -> str:
        return MUSCLE_SELECTION_KEY.format(session_id=self._store.session_id)

    def validation(self) -> ValidationResult:
        return ops.validate_selection(self._selection, self.max_groups)

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    async def initialize(self) -> MuscleSelectionData:
        """Load the selection at session start (remote wins over cache).

        Returns:
            The adopted selection (empty if neither source had data)
        """
        self._state = SyncState.LOADING
        log = logger.bind(session_id=self._store.session_id)

        remote_selection: MuscleSelectionData | None = None
        try:
            remote_selection = await self._remote.load()
        except MuscleSyncError as e:
            self.last_error = str(e)
            log.bind(code=e.code, error=e.message).warning("Remote muscle load failed, treating as no remote data")

        if remote_selection is not None:
            bounded = self._bounded(remote_selection)
            if bounded.selected_groups != remote_selection.selected_groups:
                log.bind(
                    remote_groups=remote_selection.selected_groups,
                    kept_groups=bounded.selected_groups,
                    max_groups=self.max_groups,
                ).warning("Remote muscle selection trimmed to known groups within the limit")
            remote_selection = bounded

        if remote_selection is not None and not remote_selection.is_empty:
            self._selection = remote_selection
            self._write_cache()
            self._project(remote_selection)
            self._state = SyncState.SYNCED
            log.bind(groups=remote_selection.selected_groups).info("Adopted remote muscle selection")
            return self._selection

        cached = self._read_cache()
        if cached is not None:
            cached = self._bounded(cached)
        if cached is not None and not cached.is_empty and not self._store.has_muscle_data:
            log.bind(groups=cached.selected_groups).info("Adopted cached muscle selection")
            self._state = SyncState.SYNCED
            self._apply(cached)
            return self._selection

        self._state = SyncState.SYNCED if not self._selection.is_empty else SyncState.EMPTY
        return self._selection

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_group(self, group: str) -> MuscleSelectionData:
        return self._apply(ops.add_group(self._selection, group, self.max_groups))

    def remove_group(self, group: str) -> MuscleSelectionData:
        return self._apply(ops.remove_group(self._selection, group))

    def toggle_muscle(self, group: str, muscle: str) -> MuscleSelectionData:
        return self._apply(ops.toggle_muscle(self._selection, group, muscle))

    def apply_preset(self, preset: str) -> MuscleSelectionData:
        return self._apply(ops.apply_preset(preset, self.max_groups))

    def replace(self, selection: MuscleSelectionData) -> MuscleSelectionData:
        """Replace the whole selection (groups beyond the limit are dropped)."""
        return self._apply(self._bounded(selection))

    async def reset(self) -> None:
        """Clear the selection everywhere and cancel any stale sync."""
        await self._cancel_tasks()

        self._selection = MuscleSelectionData()
        if self._cache is not None:
            self._cache.clear(self.cache_key)
        self._project(self._selection)
        self._state = SyncState.EMPTY

        try:
            await self._remote.clear()
        except MuscleSyncError as e:
            self.last_error = str(e)
            logger.bind(session_id=self._store.session_id, code=e.code, error=e.message).warning(
                "Remote muscle clear failed (non-fatal)"
            )
        logger.bind(session_id=self._store.session_id).info("Muscle selection reset")

    # ------------------------------------------------------------------
    # Sync scheduling
    # ------------------------------------------------------------------

    async def wait_for_pending(self) -> None:
        """Wait for the pending debounce and any in-flight save to finish."""
        if self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})
        if self._inflight is not None and not self._inflight.done():
            await asyncio.wait({self._inflight})

    async def flush(self) -> None:
        """Run a pending debounced sync now instead of waiting for the timer."""
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
            self._pending = None
            self._run_sync(self._selection)
        await self.wait_for_pending()

    async def close(self, flush: bool = True) -> None:
        """Stop the synchronizer, sending the last change first unless flush is False."""
        if flush:
            await self.flush()
        await self._cancel_tasks()

    def _apply(self, updated: MuscleSelectionData) -> MuscleSelectionData:
        if updated == self._selection:
            return self._selection

        self._selection = updated
        self._write_cache()
        self._schedule_sync()
        return self._selection

    def _schedule_sync(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.get_running_loop().create_task(self._debounced_sync())

    async def _debounced_sync(self) -> None:
        await asyncio.sleep(self._debounce_seconds)
        self._run_sync(self._selection)

    def _run_sync(self, snapshot: MuscleSelectionData) -> None:
        if not snapshot.is_empty:
            if self._inflight is not None and not self._inflight.done():
                self._inflight.cancel()
            self._state = SyncState.SAVING
            self._inflight = asyncio.get_running_loop().create_task(self._save(snapshot))
        else:
            self._state = SyncState.EMPTY

        self._project(snapshot)

    async def _save(self, snapshot: MuscleSelectionData) -> None:
        log = logger.bind(session_id=self._store.session_id, groups=snapshot.selected_groups)
        try:
            success = await self._remote.save(snapshot)
        except MuscleSyncError as e:
            self._record_failure(e.message)
            log.bind(code=e.code, error=e.message).warning("Remote muscle save failed (non-fatal)")
            return

        if not success:
            self._record_failure("Muscle endpoint reported failure")
            log.warning("Remote muscle save was not accepted (non-fatal)")
            return

        self.last_error = None
        if snapshot == self._selection:
            self._state = SyncState.SYNCED
        log.debug("Muscle selection synced")

    def _record_failure(self, message: str) -> None:
        self.last_error = message
        self._state = SyncState.ERROR

    async def _cancel_tasks(self) -> None:
        tasks = [task for task in (self._pending, self._inflight) if task is not None and not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.wait(tasks)
        self._pending = None
        self._inflight = None

    # ------------------------------------------------------------------
    # Projection and cache
    # ------------------------------------------------------------------

    def _bounded(self, selection: MuscleSelectionData) -> MuscleSelectionData:
        """Rebuild a selection through the add/toggle rules: unknown groups and
        muscles are dropped, groups beyond max_groups are cut."""
        bounded = MuscleSelectionData()
        for group in selection.selected_groups:
            bounded = ops.add_group(bounded, group, self.max_groups)
        for group in bounded.selected_groups:
            for muscle in selection.selected_muscles.get(group, []):
                bounded = ops.toggle_muscle(bounded, group, muscle)
        return bounded

    def _project(self, snapshot: MuscleSelectionData) -> None:
        """Project the selection into the session inputs read by resolution."""
        self._store.set_field(SessionField.MUSCLE_TARGETING, ops.to_targeting(snapshot))
        self._store.set_field(SessionField.FOCUS_AREA, list(snapshot.selected_groups))

    def _write_cache(self) -> None:
        if self._cache is None:
            return
        if self._selection.is_empty:
            self._cache.clear(self.cache_key)
        else:
            self._cache.save(self.cache_key, self._selection.to_wire())

    def _read_cache(self) -> MuscleSelectionData | None:
        if self._cache is None:
            return None
        data = self._cache.load(self.cache_key)
        if not data:
            return None
        try:
            return MuscleSelectionData.model_validate(data)
        except ValidationError as e:
            logger.bind(session_id=self._store.session_id, error=str(e)).warning("Discarding unreadable cached muscle selection")
            self._cache.clear(self.cache_key)
            return None
