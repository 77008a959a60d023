"""Background press/hold/release loop.

Each iteration takes a fresh SharedConfig snapshot:
- enabled: send 1, sleep hold, send 0, sleep (interval - hold), repeat.
- disabled right after sending: send one final 0.
- disabled: sleep interval.

Send and encode failures are dropped; the next pulse supersedes them.
"""

import socket
import threading
import time
from enum import IntEnum

from pythonosc.osc_message_builder import BuildError

from .osc_packet import PRESSED, RELEASED, destination, encode_value

BIND_ADDR = ("0.0.0.0", 0)


class EngineState(IntEnum):
    IDLE = 0
    SENDING = 1


def open_socket():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.bind(BIND_ADDR)
    except OSError:
        sock.close()
        raise
    return sock


def hold_delay_ms(hold) -> int:
    return max(int(hold), 1)


def rest_delay_ms(interval, hold) -> int:
    # hold >= interval throttles to a 1 ms rest instead of failing
    return max(int(interval) - int(hold), 1)


def idle_delay_ms(interval) -> int:
    return max(int(interval), 1)


class PulseEngine:
    def __init__(self, config, sock, sleep=time.sleep, verbose=False):
        self.config = config
        self.sock = sock
        self._sleep = sleep
        self.verbose = verbose
        self.state = EngineState.IDLE
        self.thread = None

    def sleep_ms(self, ms: int) -> None:
        self._sleep(ms / 1000.0)

    def send_value(self, port: int, value: int) -> bool:
        try:
            packet = encode_value(value)
            self.sock.sendto(packet, destination(port))
        except (BuildError, OSError):
            return False
        if self.verbose:
            print(f"[PULSE] {value} -> {destination(port)}")
        return True

    def _enter(self, state, port):
        if state != self.state:
            if state == EngineState.SENDING:
                print(f"[PULSE] Sending to {destination(port)}")
            else:
                print("[PULSE] Stopped, release sent")
        self.state = state

    def step(self) -> None:
        interval, hold, enabled, port = self.config.read_snapshot()

        if enabled:
            self.send_value(port, PRESSED)
            self.sleep_ms(hold_delay_ms(hold))
            self.send_value(port, RELEASED)
            self._enter(EngineState.SENDING, port)
            self.sleep_ms(rest_delay_ms(interval, hold))
            return

        # Exactly one release per SENDING -> IDLE edge.
        if self.state == EngineState.SENDING:
            self.send_value(port, RELEASED)
        self._enter(EngineState.IDLE, port)
        self.sleep_ms(idle_delay_ms(interval))

    def run(self) -> None:
        while True:
            self.step()

    def start(self):
        self.thread = threading.Thread(target=self.run, name="pulse-engine", daemon=True)
        self.thread.start()
        return self.thread
