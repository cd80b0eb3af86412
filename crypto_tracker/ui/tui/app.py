from __future__ import annotations

import asyncio
import contextlib
import itertools
import time
from datetime import datetime
from enum import Enum
from typing import Callable, ContextManager, List, Optional, Protocol

from crypto_tracker.market_data.models import AssetLookup, AssetRecord, default_lookup, to_records
from crypto_tracker.market_data.parser import parse_price_response
from crypto_tracker.providers.base import BaseProvider
from crypto_tracker.utils.errors import CryptoTrackerError
from crypto_tracker.utils.logging import get_logger

from .config import POLL_TIMEOUT_SECONDS, QUIT_KEY
from .display import RefreshStatus, render_frame
from .terminal import TerminalSession


logger = get_logger(__name__)


class TrackerState(Enum):
    """Lifecycle of the interaction loop."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    TERMINATING = "terminating"


class Screen(Protocol):
    def draw(self, renderable) -> None: ...

    def read_key(self, timeout: float) -> Optional[str]: ...


class CryptoTrackerTUI:
    """Full-screen price table with a background refresh schedule."""

    def __init__(
        self,
        client: BaseProvider,
        *,
        lookup: AssetLookup = default_lookup,
        terminal_factory: Callable[[], ContextManager[Screen]] = TerminalSession,
        refresh_interval: float = 60.0,
        poll_timeout: float = POLL_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.client = client
        self.lookup = lookup
        self.terminal_factory = terminal_factory
        self.refresh_interval = refresh_interval
        self.poll_timeout = poll_timeout
        self.clock = clock
        self.state = TrackerState.INITIALIZING
        self.records: List[AssetRecord] = []
        self.last_updated: Optional[datetime] = None
        self.last_error: Optional[str] = None
        self._refresh_ids = itertools.count(1)

    @property
    def status(self) -> RefreshStatus:
        return RefreshStatus(last_updated=self.last_updated, error=self.last_error)

    async def refresh_records(self) -> List[AssetRecord]:
        """One fetch → parse → convert cycle."""
        refresh_id = next(self._refresh_ids)
        logger.info("Refreshing prices", extra={"refresh_id": refresh_id})
        text = await self.client.fetch()
        quotes = parse_price_response(text)
        records = to_records(quotes, self.lookup)
        logger.info(f"Refreshed {len(records)} assets", extra={"refresh_id": refresh_id})
        return records

    def _apply(self, records: List[AssetRecord]) -> None:
        self.records = records
        self.last_updated = datetime.now()
        self.last_error = None

    def _collect(self, task: Optional[asyncio.Task]) -> Optional[asyncio.Task]:
        """Swap in the result of a finished refresh; return the task if still running."""
        if task is None or not task.done():
            return task
        try:
            self._apply(task.result())
        except CryptoTrackerError as e:
            # Keep showing the last good data
            logger.warning(f"Background refresh failed: {e}")
            self.last_error = str(e)
        return None

    def _refresh_enabled(self) -> bool:
        return self.refresh_interval > 0

    async def run(self) -> None:
        """Acquire the terminal, load prices once, then draw until the quit key."""
        self.state = TrackerState.INITIALIZING
        with self.terminal_factory() as screen:
            self._apply(await self.refresh_records())
            self.state = TrackerState.RUNNING
            next_refresh = self.clock() + self.refresh_interval
            pending: Optional[asyncio.Task] = None
            try:
                while self.state is TrackerState.RUNNING:
                    pending = self._collect(pending)
                    screen.draw(render_frame(self.records, self.status))

                    key = await asyncio.to_thread(screen.read_key, self.poll_timeout)
                    if key == QUIT_KEY:
                        self.state = TrackerState.TERMINATING
                        break

                    if self._refresh_enabled() and pending is None and self.clock() >= next_refresh:
                        pending = asyncio.create_task(self.refresh_records())
                        next_refresh = self.clock() + self.refresh_interval
            finally:
                self.state = TrackerState.TERMINATING
                if pending is not None and not pending.done():
                    pending.cancel()
                    with contextlib.suppress(asyncio.CancelledError):
                        await pending
                elif pending is not None:
                    self._collect(pending)
        logger.info("Crypto Tracker stopped")
