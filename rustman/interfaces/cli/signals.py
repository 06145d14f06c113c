"""Interrupt handling for the interactive menu.

The handler sets a stop flag owned by the caller and raises
KeyboardInterrupt so a blocking ``input()`` returns immediately. Without
the raise, Python would resume the read after the handler runs.
"""

import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Optional


def _interrupt_signals() -> list[signal.Signals]:
    signals = [signal.SIGINT]
    if hasattr(signal, "SIGTERM"):
        signals.append(signal.SIGTERM)
    return signals


@contextmanager
def interrupt_handler(stop: threading.Event) -> Iterator[threading.Event]:
    """Route SIGINT/SIGTERM to a stop flag while the block runs.

    Args:
        stop: Flag to set when a signal arrives. Never cleared here.

    Yields:
        The same stop flag.
    """

    def _handle(signum: int, frame: Optional[FrameType]) -> None:
        stop.set()
        raise KeyboardInterrupt

    previous = {sig: signal.signal(sig, _handle) for sig in _interrupt_signals()}
    try:
        yield stop
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
