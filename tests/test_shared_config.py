import threading

import pytest

from oscpulse.shared_config import (
    DEFAULT_HOLD_MS,
    DEFAULT_INTERVAL_MS,
    DEFAULT_PORT,
    MAX_PORT,
    ConfigSnapshot,
    SharedConfig,
    nudge,
)


def test_defaults():
    snap = SharedConfig().read_snapshot()
    assert snap == ConfigSnapshot(1000, 80, False, 9000)
    assert (DEFAULT_INTERVAL_MS, DEFAULT_HOLD_MS, DEFAULT_PORT) == (1000, 80, 9000)


def test_write_field_replaces_only_that_field():
    config = SharedConfig()
    config.write_field("hold_ms", 250)
    assert config.read_snapshot() == ConfigSnapshot(1000, 250, False, 9000)
    config.write_field("enabled", True)
    config.write_field("dest_port", 9002)
    snap = config.read_snapshot()
    assert snap.enabled is True
    assert snap.dest_port == 9002
    assert snap.interval_ms == 1000


def test_unknown_field_rejected():
    config = SharedConfig()
    with pytest.raises(ValueError):
        config.write_field("rate", 5)
    assert config.read_snapshot() == SharedConfig().read_snapshot()


def test_snapshot_is_a_copy():
    config = SharedConfig()
    snap = config.read_snapshot()
    config.write_field("interval_ms", 20)
    assert snap.interval_ms == 1000


def test_snapshots_never_torn():
    # Writer keeps interval == hold after each pair of writes, so a reader
    # can only ever see hold equal to interval or one step behind it.
    config = SharedConfig(interval_ms=0, hold_ms=0)
    done = threading.Event()

    def writer():
        for k in range(1, 20001):
            config.write_field("interval_ms", k)
            config.write_field("hold_ms", k)
        done.set()

    t = threading.Thread(target=writer)
    t.start()
    bad = []
    while not done.is_set():
        snap = config.read_snapshot()
        if snap.hold_ms not in (snap.interval_ms, snap.interval_ms - 1):
            bad.append(snap)
        if snap.enabled or snap.dest_port != 9000:
            bad.append(snap)
    t.join()
    assert bad == []
    assert config.read_snapshot() == ConfigSnapshot(20000, 20000, False, 9000)


@pytest.mark.parametrize("current,delta,expected", [
    (9000, 2, 9002),
    (9000, -2, 8998),
    (9000, 1, 9000),
    (9000, 3, 9002),
    (9001, 0, 9000),
    (0, -100, 0),
    (65534, 100, 65534),
    (1, -2, 0),
    (65533, 1, 65534),
])
def test_nudge(current, delta, expected):
    assert nudge(current, delta) == expected


def test_nudge_always_even_and_in_range():
    for current in range(0, MAX_PORT + 1, 997):
        for delta in (-70000, -3, -2, -1, 0, 1, 2, 3, 70000):
            port = nudge(current, delta)
            assert port % 2 == 0
            assert 0 <= port <= MAX_PORT
