"""Minimal pygame controls: slider, checkbox, push button.

handle_event() returns True when the control's value changed (or the
button was clicked), so callers only push real changes onward.
"""

import pygame

BG = (32, 32, 36)
FG = (220, 220, 220)
DIM = (110, 110, 110)
ACCENT = (90, 150, 230)
TRACK = (70, 70, 78)
LEFT_BUTTON = 1


class Slider:
    def __init__(self, rect, label, lo, hi, value):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.lo = lo
        self.hi = hi
        self.value = max(lo, min(hi, int(value)))
        self.dragging = False

    def value_at(self, x: int) -> int:
        if self.rect.width <= 1:
            return self.lo
        frac = (x - self.rect.left) / float(self.rect.width - 1)
        frac = max(0.0, min(1.0, frac))
        return int(round(self.lo + frac * (self.hi - self.lo)))

    def knob_x(self) -> int:
        span = self.hi - self.lo
        frac = (self.value - self.lo) / span if span else 0.0
        return self.rect.left + int(round(frac * (self.rect.width - 1)))

    def _set_from_x(self, x) -> bool:
        value = self.value_at(x)
        if value == self.value:
            return False
        self.value = value
        return True

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            if self.rect.collidepoint(event.pos):
                self.dragging = True
                return self._set_from_x(event.pos[0])
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self._set_from_x(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
            self.dragging = False
        return False

    def draw(self, surface, font):
        mid_y = self.rect.centery
        pygame.draw.line(surface, TRACK, (self.rect.left, mid_y), (self.rect.right, mid_y), 4)
        pygame.draw.line(surface, ACCENT, (self.rect.left, mid_y), (self.knob_x(), mid_y), 4)
        pygame.draw.circle(surface, FG, (self.knob_x(), mid_y), self.rect.height // 2)
        text = font.render(f"{self.value}  {self.label}", True, FG)
        surface.blit(text, (self.rect.right + 10, mid_y - text.get_height() // 2))


class Checkbox:
    def __init__(self, rect, label, checked=False):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.checked = bool(checked)

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            if self.rect.collidepoint(event.pos):
                self.checked = not self.checked
                return True
        return False

    def draw(self, surface, font):
        pygame.draw.rect(surface, FG, self.rect, 1)
        if self.checked:
            pygame.draw.rect(surface, ACCENT, self.rect.inflate(-6, -6))
        text = font.render(self.label, True, FG)
        surface.blit(text, (self.rect.right + 8, self.rect.centery - text.get_height() // 2))


class Button:
    def __init__(self, rect, label):
        self.rect = pygame.Rect(rect)
        self.label = label
        self.enabled = True

    def handle_event(self, event) -> bool:
        if not self.enabled:
            return False
        return (event.type == pygame.MOUSEBUTTONDOWN
                and event.button == LEFT_BUTTON
                and self.rect.collidepoint(event.pos))

    def draw(self, surface, font):
        color = FG if self.enabled else DIM
        pygame.draw.rect(surface, color, self.rect, 1)
        text = font.render(self.label, True, color)
        surface.blit(text, text.get_rect(center=self.rect.center))
