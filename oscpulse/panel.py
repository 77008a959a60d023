from .shared_config import HOLD_RANGE_MS, INTERVAL_RANGE_MS, PORT_STEP, nudge


def clamp(value, lo, hi) -> int:
    return max(lo, min(hi, int(value)))


class PanelState:
    """Local copy of the settings the window renders every frame.

    SharedConfig is only written when a value actually changes.
    """

    def __init__(self, config):
        self.config = config
        snap = config.read_snapshot()
        self.interval_ms = snap.interval_ms
        self.hold_ms = snap.hold_ms
        self.enabled = snap.enabled
        self.port = snap.dest_port

    def set_interval(self, value) -> bool:
        value = clamp(value, *INTERVAL_RANGE_MS)
        if value == self.interval_ms:
            return False
        self.interval_ms = value
        self.config.write_field("interval_ms", value)
        return True

    def set_hold(self, value) -> bool:
        value = clamp(value, *HOLD_RANGE_MS)
        if value == self.hold_ms:
            return False
        self.hold_ms = value
        self.config.write_field("hold_ms", value)
        return True

    def set_enabled(self, enabled) -> bool:
        enabled = bool(enabled)
        if enabled == self.enabled:
            return False
        self.enabled = enabled
        self.config.write_field("enabled", enabled)
        return True

    def port_editable(self) -> bool:
        return not self.enabled

    def nudge_port(self, delta) -> bool:
        # Retargeting mid-pulse is not allowed.
        if not self.port_editable():
            return False
        port = nudge(self.port, delta)
        if port == self.port:
            return False
        self.port = port
        self.config.write_field("dest_port", port)
        return True

    def port_down(self) -> bool:
        return self.nudge_port(-PORT_STEP)

    def port_up(self) -> bool:
        return self.nudge_port(PORT_STEP)

    def launcher_display(self) -> str:
        return f"{self.port}:localhost:{self.port + 1}"
