#!/usr/bin/env python3
"""Usage:
python -m oscpulse.osc_sender

Pulses /input/UseRight (1, hold, 0) over OSC/UDP to 127.0.0.1:<port>.
Interval, hold and port are set live in the window; "Send OSC" toggles
sending. The port can only be changed while sending is off.
"""

import pygame

from .panel import PanelState
from .pulse_engine import PulseEngine, open_socket
from .shared_config import HOLD_RANGE_MS, INTERVAL_RANGE_MS, SharedConfig
from .widgets import BG, DIM, FG, Button, Checkbox, Slider

TITLE = "OSC Sender"
WINDOW_SIZE = (420, 240)
REPAINT_MS = 16
FONT_SIZE = 18


def build_widgets(panel):
    return {
        "interval": Slider((16, 44, 180, 14), "Click interval (ms)", *INTERVAL_RANGE_MS, panel.interval_ms),
        "hold": Slider((16, 72, 180, 14), "Hold duration (ms)", *HOLD_RANGE_MS, panel.hold_ms),
        "send": Checkbox((16, 96, 16, 16), "Send OSC", panel.enabled),
        "down": Button((150, 132, 24, 22), "-"),
        "up": Button((250, 132, 24, 22), "+"),
    }


def dispatch(event, widgets, panel) -> None:
    if widgets["interval"].handle_event(event):
        panel.set_interval(widgets["interval"].value)
    if widgets["hold"].handle_event(event):
        panel.set_hold(widgets["hold"].value)
    if widgets["send"].handle_event(event):
        panel.set_enabled(widgets["send"].checked)
    if widgets["down"].handle_event(event):
        panel.port_down()
    if widgets["up"].handle_event(event):
        panel.port_up()
    editable = panel.port_editable()
    widgets["down"].enabled = editable
    widgets["up"].enabled = editable


def draw(screen, font, widgets, panel) -> None:
    screen.fill(BG)
    screen.blit(font.render(TITLE, True, FG), (16, 12))
    for widget in widgets.values():
        widget.draw(screen, font)
    pygame.draw.line(screen, DIM, (16, 122), (WINDOW_SIZE[0] - 16, 122))
    screen.blit(font.render("Destination Port:", True, FG), (16, 135))
    port_color = FG if panel.port_editable() else DIM
    port_text = font.render(str(panel.port), True, port_color)
    screen.blit(port_text, port_text.get_rect(center=(212, 143)))
    screen.blit(font.render("Quick Launcher OSC setting value", True, FG), (16, 170))
    screen.blit(font.render(panel.launcher_display(), True, FG), (16, 194))
    pygame.display.flip()


def main():
    config = SharedConfig()
    try:
        sock = open_socket()
    except OSError as e:
        print(f"[OSC] Failed to bind UDP socket: {e}")
        raise SystemExit(1)
    print(f"[OSC] Socket bound on {sock.getsockname()}")

    engine = PulseEngine(config, sock)
    engine.start()

    panel = PanelState(config)

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(TITLE)
    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()
    widgets = build_widgets(panel)

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                dispatch(event, widgets, panel)
            draw(screen, font, widgets, panel)
            clock.tick(1000 // REPAINT_MS)
    except KeyboardInterrupt:
        print("Shutdown requested.")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
