"""
Reply timers — one-shot scheduled callbacks for composed replies.

A timer never cancels: every scheduled callback eventually fires.
"""

import asyncio
from typing import Callable, List, Optional, Protocol, Tuple


class ReplyTimer(Protocol):
    """Protocol for scheduling a callback after a fixed delay."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> None: ...


class AsyncioReplyTimer:
    """Schedules callbacks on an asyncio event loop with call_later."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._outstanding = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def pending(self) -> int:
        return self._outstanding

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        self._outstanding += 1
        self._idle.clear()

        def fire() -> None:
            try:
                callback()
            finally:
                self._outstanding -= 1
                if self._outstanding == 0:
                    self._idle.set()

        loop.call_later(delay_seconds, fire)

    async def drain(self) -> None:
        """Wait until every scheduled callback has fired."""
        await self._idle.wait()


class ManualReplyTimer:
    """
    Virtual-clock timer. Time only moves when advance() is called,
    which makes reply scheduling fully deterministic.
    """

    def __init__(self):
        self._now = 0.0
        self._seq = 0
        self._pending: List[Tuple[float, int, Callable[[], None]]] = []

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._pending)

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        self._pending.append((self._now + delay_seconds, self._seq, callback))
        self._seq += 1

    def advance(self, seconds: float) -> int:
        """Move the clock forward, firing due callbacks in due order."""
        target = self._now + seconds
        fired = 0
        while True:
            due = [entry for entry in self._pending if entry[0] <= target]
            if not due:
                break
            # (due_at, seq) is unique, so callbacks are never compared
            entry = min(due)
            self._pending.remove(entry)
            self._now = entry[0]
            entry[2]()
            fired += 1
        self._now = target
        return fired

    def run_all(self) -> int:
        """Fire everything still pending, including callbacks scheduled meanwhile."""
        fired = 0
        while self._pending:
            latest = max(entry[0] for entry in self._pending)
            fired += self.advance(max(0.0, latest - self._now))
        return fired
