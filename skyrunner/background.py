"""Parallax background layers that scroll by shifting their texture window."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
STATIC_BACKGROUND = "background/background.jpg"


@dataclass
class ScrollingLayer:
    """A full-screen layer whose texture window moves right while time passes."""

    image: str
    threshold: float
    wrap_at: int
    step: int
    position: tuple[float, float] = (0.0, 0.0)
    left: int = 0

    @property
    def rect(self) -> tuple[int, int, int, int]:
        """The texture window as ``(left, top, width, height)``."""
        return self.left, 0, SCREEN_WIDTH, SCREEN_HEIGHT

    def advance(self, seconds: float) -> bool:
        """Move the window once if ``seconds`` exceeds the threshold; report whether it moved."""
        if seconds <= self.threshold:
            return False
        self.left = 0 if self.left == self.wrap_at else self.left + self.step
        return True


def default_layers() -> list[ScrollingLayer]:
    """The far, middle and platform layers, back to front."""
    return [
        ScrollingLayer("background/background1.png", 0.1, 1810, 1),
        ScrollingLayer("background/background2.png", 0.013, 1495, 1),
        ScrollingLayer("background/platform.png", 0.001, 1544, 4, (0.0, -80.0)),
    ]