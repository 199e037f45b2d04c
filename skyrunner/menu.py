"""Hit areas of the main and pause menus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MENU_IMAGE = "menu/menu.png"
PAUSE_IMAGE = "menu/menupause.png"
# Texture window offsets of the highlighted variants of a menu image.
HOVER_FRAMES = (1920, 3840, 5760)


class MenuChoice(IntEnum):
    """What a click on the main menu asks for."""

    NONE = 0
    PLAY = 1
    QUIT = 2


class PauseChoice(IntEnum):
    """What a click on the pause menu asks for."""

    MAIN_MENU = 0
    RESUME = 1
    QUIT = 2
    NONE = 3


@dataclass(frozen=True)
class _Box:
    left: int
    right: int
    top: int
    bottom: int

    def __contains__(self, point: tuple[int, int]) -> bool:
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom


_MAIN_PLAY = _Box(1621, 1833, 37, 119)
_MAIN_MIDDLE = _Box(1527, 1892, 152, 239)
_MAIN_QUIT = _Box(1613, 1841, 281, 387)

_PAUSE_RESUME = _Box(795, 1095, 186, 272)
_PAUSE_MENU = _Box(829, 1095, 457, 542)
_PAUSE_QUIT = _Box(847, 1075, 755, 867)


def _hover(point: tuple[int, int], boxes: tuple[_Box, ...]) -> int:
    for box, frame in zip(boxes, HOVER_FRAMES):
        if point in box:
            return frame
    return 0


def main_menu_click(x: int, y: int) -> MenuChoice:
    """Choice made by clicking the main menu at ``(x, y)``."""
    if (x, y) in _MAIN_PLAY:
        return MenuChoice.PLAY
    if (x, y) in _MAIN_QUIT:
        return MenuChoice.QUIT
    return MenuChoice.NONE


def main_menu_hover(x: int, y: int) -> int:
    """Texture window offset of the main menu with the pointer at ``(x, y)``."""
    return _hover((x, y), (_MAIN_PLAY, _MAIN_MIDDLE, _MAIN_QUIT))


def pause_menu_click(x: int, y: int) -> PauseChoice:
    """Choice made by clicking the pause menu at ``(x, y)``."""
    if (x, y) in _PAUSE_RESUME:
        return PauseChoice.RESUME
    if (x, y) in _PAUSE_MENU:
        return PauseChoice.MAIN_MENU
    if (x, y) in _PAUSE_QUIT:
        return PauseChoice.QUIT
    return PauseChoice.NONE


def pause_menu_hover(x: int, y: int) -> int:
    """Texture window offset of the pause menu with the pointer at ``(x, y)``."""
    return _hover((x, y), (_PAUSE_RESUME, _PAUSE_MENU, _PAUSE_QUIT))