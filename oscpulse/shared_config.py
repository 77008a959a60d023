"""Live pulse settings shared between the panel and the pulse engine.

All four fields sit behind one lock so a snapshot is never torn.
"""

import threading
from typing import NamedTuple

DEFAULT_INTERVAL_MS = 1000
DEFAULT_HOLD_MS = 80
DEFAULT_PORT = 9000
MAX_PORT = 65534
PORT_STEP = 2
INTERVAL_RANGE_MS = (10, 2000)
HOLD_RANGE_MS = (10, 500)

FIELDS = ("interval_ms", "hold_ms", "enabled", "dest_port")


class ConfigSnapshot(NamedTuple):
    interval_ms: int
    hold_ms: int
    enabled: bool
    dest_port: int


class SharedConfig:
    def __init__(self, interval_ms=DEFAULT_INTERVAL_MS, hold_ms=DEFAULT_HOLD_MS,
                 enabled=False, dest_port=DEFAULT_PORT):
        self._lock = threading.Lock()
        self._interval_ms = interval_ms
        self._hold_ms = hold_ms
        self._enabled = enabled
        self._dest_port = dest_port

    def read_snapshot(self) -> ConfigSnapshot:
        with self._lock:
            return ConfigSnapshot(
                self._interval_ms,
                self._hold_ms,
                self._enabled,
                self._dest_port,
            )

    def write_field(self, field: str, value) -> None:
        if field not in FIELDS:
            raise ValueError(f"Unknown config field {field!r}")
        with self._lock:
            setattr(self, "_" + field, value)


def nudge(current_port: int, delta: int) -> int:
    # Even ports only; the odd neighbour belongs to the companion channel.
    port = max(0, min(MAX_PORT, int(current_port) + int(delta)))
    return port & ~1
