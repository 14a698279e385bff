"""Post-frame scheduling for deferred field mutations.

The engine never rewrites the displayed text while the host may still be
processing the current keystroke. Instead it posts the mutation to a
scheduler, and the host decides when the frame is over.
"""

from collections import deque
from typing import Callable, Protocol

FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Protocol for the host's render-scheduling layer."""

    def post_frame(self, callback: FrameCallback) -> None:
        """Run ``callback`` once the current frame has been processed."""
        ...

    def flush(self) -> None:
        """Run every callback posted so far, oldest first."""
        ...


class ImmediateScheduler:
    """Scheduler for hosts without a render loop.

    Callbacks run as soon as they are posted, i.e. at the end of the event
    that posted them.
    """

    def post_frame(self, callback: FrameCallback) -> None:
        callback()

    def flush(self) -> None:
        pass


class PostFrameQueue:
    """FIFO queue drained by the host at its idle point.

    Engines also flush it before handling an inbound event, so work posted by
    one event always lands before the next event is processed.
    """

    def __init__(self) -> None:
        self._pending: deque[FrameCallback] = deque()

    def post_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    def flush(self) -> None:
        # Callbacks posted while flushing run in this same pass
        while self._pending:
            self._pending.popleft()()

    def __len__(self) -> int:
        return len(self._pending)
