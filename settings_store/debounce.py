"""
Debounced Writer: trailing-edge debounce over an async write.

Each instance owns at most one pending asyncio.TimerHandle. Every call cancels it and
schedules a new one; only the last call's arguments are written once the quiet period
elapses. No leading edge and no maximum wait: a steady stream of calls postpones the write.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_QUIET_PERIOD_S = 0.5


class DebouncedWriter:
    """
    Wraps fn so rapid calls coalesce into one trailing call.
    Must be called from inside a running event loop.
    """

    def __init__(self, fn: Callable[..., Awaitable[Any]], period_s: float = DEFAULT_QUIET_PERIOD_S) -> None:
        if period_s < 0:
            raise ValueError(f"period_s must be >= 0, got {period_s}")
        self._fn = fn
        self._period_s = period_s
        self._handle: Optional[asyncio.TimerHandle] = None
        self._last_write: Optional[asyncio.Future] = None

    @property
    def period_s(self) -> float:
        return self._period_s

    @property
    def pending(self) -> bool:
        """True while a write is scheduled but not yet started."""
        return self._handle is not None

    @property
    def last_write(self) -> Optional[asyncio.Future]:
        """Task of the most recently fired write (None before the first one fires)."""
        return self._last_write

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        self._handle = loop.call_later(self._period_s, self._fire, args, kwargs)

    def _fire(self, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        self._handle = None
        task = asyncio.ensure_future(self._fn(*args, **kwargs))
        task.add_done_callback(self._on_done)
        self._last_write = task

    @staticmethod
    def _on_done(task: asyncio.Future) -> None:
        # No caller awaits a debounced write; report failures here.
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced write failed: %s: %s", type(exc).__name__, exc)
