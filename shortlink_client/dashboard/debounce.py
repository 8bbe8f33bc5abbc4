import asyncio
from typing import Any, Callable, Optional, Tuple


class Debouncer:
    """
    Coalesces rapid calls into one delayed call with the latest arguments.

    Each ``trigger`` cancels the pending timer and starts a new one, so the
    callback runs once, ``delay`` seconds after the last trigger. The owner
    must call ``cancel`` when it is torn down.

    Must be triggered from inside a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[..., Any]):
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: Tuple[Any, ...] = ()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, *args: Any) -> None:
        self.cancel()
        self._args = args
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        args, self._args = self._args, ()
        self.callback(*args)
