"""Ground detection: where the runner stands and whether it hit something."""

from __future__ import annotations

from enum import IntEnum

from skyrunner.character import Character
from skyrunner.tilemap import EMPTY, TILE_SIZE, TileMap

_FALL_SPEED = 5


class Outcome(IntEnum):
    """Result of a collision check."""

    DEAD = 0
    CONTINUE = 1
    WIN = 3


def _land(character: Character, ground: float) -> Outcome:
    character.ground = ground
    if character.jump_y > character.ground:
        return Outcome.DEAD
    character.settle()
    return Outcome.CONTINUE


def detect_collision(tilemap: TileMap, character: Character) -> Outcome:
    """Check the runner's column top to bottom and update its ground accordingly."""
    col = character.column
    for j in range(tilemap.height):
        cell = tilemap.tile(j, col)
        top = j * TILE_SIZE
        if cell == EMPTY and tilemap.tile(j, col - 1) == "~":
            if character.jump_y > character.ground:
                continue
            character.settle()
            return Outcome.CONTINUE
        if cell == "~":
            return _land(character, top - 100)
        if cell == "r":
            character.ground = top - 30
            character.settle()
            return Outcome.CONTINUE
        if cell in ("R", "O"):
            return _land(character, top - 90)
        if cell == "E":
            character.ground = top - 100
            if character.jump_y <= character.ground:
                character.settle()
            return Outcome.WIN
    character.ground += _FALL_SPEED
    character.settle()
    return Outcome.CONTINUE