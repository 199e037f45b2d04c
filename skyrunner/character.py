"""The runner: its animations, jump physics and sprite frame windows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Animation(IntEnum):
    """Which sprite sheet the runner is currently drawn with."""

    RUN = 0
    JUMP = 1
    ATTACK = 2
    DODGE = 3


START_GROUND = 800
START_COLUMN = 8
JUMP_IMPULSE = -8.0
ATTACK_FRAMES = 8
DODGE_FRAMES = 12
FRAME_DELAY = 0.1
# Minimum time between two gravity updates, in seconds.
GRAVITY_DELAY = 0.00001
GRAVITY_STEP = 0.05

# Texture window size of each sprite sheet.
FRAME_SIZES = {
    Animation.RUN: (100, 100),
    Animation.JUMP: (100, 120),
    Animation.ATTACK: (200, 140),
    Animation.DODGE: (220, 320),
}
# Horizontal screen position of each sprite.
SPRITE_X = {
    Animation.RUN: 640.0,
    Animation.JUMP: 640.0,
    Animation.ATTACK: 590.0,
    Animation.DODGE: 600.0,
}
SPRITE_SCALE = {
    Animation.RUN: 1.0,
    Animation.JUMP: 1.0,
    Animation.ATTACK: 1.0,
    Animation.DODGE: 0.6,
}
SPRITE_SHEETS = {
    Animation.RUN: "character/character.png",
    Animation.JUMP: "character/characterjump2.png",
    Animation.ATTACK: "character/characterattack.png",
    Animation.DODGE: "character/characterdodge.png",
}


def _next_frame(left: int, step: int, last: int) -> int:
    return 0 if left == last else left + step


@dataclass
class Character:
    """Runner state: animation counters, vertical motion and sprite windows."""

    animation: Animation = field(init=False)
    attack_frames: int = field(init=False)
    dodge_frames: int = field(init=False)
    rise: float = field(init=False)
    fall: float = field(init=False)
    ground: float = field(init=False)
    column: int = field(init=False)
    column_clock: int = field(init=False)
    run_y: float = field(init=False)
    jump_y: float = field(init=False)
    attack_y: float = field(init=False)
    dodge_y: float = field(init=False)
    run_left: int = field(init=False)
    jump_left: int = field(init=False)
    attack_left: int = field(init=False)
    dodge_left: int = field(init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Put the runner back on its starting ground at the starting column."""
        self.animation = Animation.RUN
        self.attack_frames = 0
        self.dodge_frames = 0
        self.rise = 0.0
        self.fall = 0.0
        self.ground = START_GROUND
        self.column = START_COLUMN
        self.column_clock = 0
        self.run_y = float(START_GROUND)
        self.jump_y = float(START_GROUND)
        self.attack_y = 780.0
        self.dodge_y = 790.0
        self.run_left = 0
        self.jump_left = 0
        self.attack_left = 0
        self.dodge_left = 0

    @property
    def airborne(self) -> bool:
        return self.jump_y < self.ground

    @property
    def frame(self) -> tuple[int, int, int, int]:
        """Texture window ``(left, top, width, height)`` of the current sprite."""
        lefts = {
            Animation.RUN: self.run_left,
            Animation.JUMP: self.jump_left,
            Animation.ATTACK: self.attack_left,
            Animation.DODGE: self.dodge_left,
        }
        width, height = FRAME_SIZES[self.animation]
        return lefts[self.animation], 0, width, height

    @property
    def position(self) -> tuple[float, float]:
        """Screen position of the current sprite."""
        ys = {
            Animation.RUN: self.run_y,
            Animation.JUMP: self.jump_y,
            Animation.ATTACK: self.attack_y,
            Animation.DODGE: self.dodge_y,
        }
        return SPRITE_X[self.animation], ys[self.animation]

    def jump(self) -> None:
        """Give the runner an upward impulse."""
        self.rise = JUMP_IMPULSE
        self.animation = Animation.JUMP
        self.jump_y += self.rise

    def attack(self) -> bool:
        """Start an attack if running; report whether it started."""
        if self.animation != Animation.RUN:
            return False
        self.animation = Animation.ATTACK
        self.attack_frames = ATTACK_FRAMES
        self.attack_y = self.ground - 20
        return True

    def dodge(self) -> None:
        """Start a dodge, interrupting whatever the runner is doing."""
        self.animation = Animation.DODGE
        self.dodge_frames = DODGE_FRAMES
        self.dodge_y = self.ground - 10

    def apply_gravity(self, elapsed: float) -> bool:
        """Update vertical motion after ``elapsed`` seconds; report whether the runner moved."""
        moved = False
        if elapsed > GRAVITY_DELAY and self.airborne:
            self.fall += GRAVITY_STEP
            self.jump_y += self.rise + 2 * self.fall * self.fall
            moved = True
        elif not self.airborne and self.attack_frames == 0 and self.dodge_frames == 0:
            self.rise = 0.0
            self.fall = 0.0
            self.animation = Animation.RUN
        if self.jump_y > self.ground:
            self.jump_y = self.ground
        return moved

    def animate(self, seconds: float) -> bool:
        """Advance every sprite sheet one frame once ``seconds`` exceeds the frame delay."""
        if seconds <= FRAME_DELAY:
            return False
        self.run_left = _next_frame(self.run_left, 100, 700)
        self.jump_left = _next_frame(self.jump_left, 100, 300)
        if self.attack_frames > 0:
            self.attack_left = _next_frame(self.attack_left, 200, 1400)
            self.attack_frames -= 1
        if self.dodge_frames > 0:
            self.dodge_left = _next_frame(self.dodge_left, 220, 2420)
            self.dodge_frames -= 1
        return True

    def settle(self) -> None:
        """Move the running sprite down towards the ground, snapping once reached."""
        if self.run_y < self.ground:
            self.run_y += 5
        else:
            self.run_y = self.ground