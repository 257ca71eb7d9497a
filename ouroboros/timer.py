"""Blocking timeout that runs a callback after a delay."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO, TypeVar

T = TypeVar("T")


def set_timeout(
    callback: Callable[[], T],
    seconds: int,
    out: Optional[TextIO] = None,
    sleep: Callable[[float], object] = time.sleep,
) -> T:
    """Announce the wait, sleep for ``seconds`` and then run ``callback``."""
    stream = out if out is not None else sys.stdout
    stream.write(f"[TIMER] Waiting {int(seconds)} seconds...\n")
    sleep(seconds)
    return callback()