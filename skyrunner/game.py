"""The game loop: menus, play, pause and win screens drawn with pygame."""

from __future__ import annotations

import os
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

import pygame

from skyrunner.background import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STATIC_BACKGROUND,
    ScrollingLayer,
    default_layers,
)
from skyrunner.character import (
    FRAME_DELAY,
    SPRITE_SCALE,
    SPRITE_SHEETS,
    START_COLUMN,
    START_GROUND,
    Animation,
    Character,
)
from skyrunner.collision import Outcome, detect_collision
from skyrunner.menu import (
    MENU_IMAGE,
    PAUSE_IMAGE,
    PauseChoice,
    main_menu_click,
    main_menu_hover,
    pause_menu_click,
    pause_menu_hover,
)
from skyrunner.score import DIGIT_POSITIONS, DIGIT_SIZE, ScoreCounter
from skyrunner.tilemap import TILE_SIZE, TileMap, load_map

WINDOW_TITLE = "skyrunner"
# Real seconds making up one unit of the frame clock.
FRAME_CLOCK_SCALE = 0.7
# Pixels the map scrolls for every map row on each frame.
SCROLL_STEP = 0.2
# Row ticks after which the runner stands on the next map column.
COLUMN_PERIOD = 450

TILE_IMAGES = {
    "~": "texture/block_grasse.png",
    "X": "texture/block_dirt.png",
    "R": "texture/block_rock1.png",
    "O": "texture/block_rock2.png",
    "r": "texture/block_rock3.png",
    "E": "texture/block_end.png",
}
SCORE_IMAGE = "score/score.png"
FONT_FILE = "font/font.ttf"
WIN_TEXT = "You Win!!"
WIN_TEXT_SIZE = 100
WIN_TEXT_POSITION = (1200, 300)

GAME_MUSIC = "music.wav"
MENU_MUSIC = "sao.wav"
JUMP_SOUND = "jump.wav"
ATTACK_SOUND = "attack.wav"
_VOLUMES = {GAME_MUSIC: 0.5, MENU_MUSIC: 0.15, JUMP_SOUND: 1.0, ATTACK_SOUND: 1.0}

_LAST_ATTACK_FRAME = 1400


@dataclass
class GameState:
    """Everything that changes while a level is played."""

    tilemap: TileMap
    character: Character = field(default_factory=Character)
    score: ScoreCounter = field(default_factory=ScoreCounter)
    layers: list[ScrollingLayer] = field(default_factory=default_layers)
    gravity_moved: bool = False

    def step(self, seconds: float, elapsed: float) -> Outcome:
        """Advance one frame.

        ``seconds`` is the frame clock in units of ``FRAME_CLOCK_SCALE`` real
        seconds; ``elapsed`` is the real time since gravity last moved the runner.
        """
        self.gravity_moved = self.character.apply_gravity(elapsed)
        for layer in self.layers:
            layer.advance(seconds)
        if seconds > FRAME_DELAY:
            self.score.tick()
        self.character.animate(seconds)
        outcome = detect_collision(self.tilemap, self.character)
        self._scroll()
        return outcome

    def _scroll(self) -> None:
        for _ in range(self.tilemap.height):
            self.character.column_clock += 1
            if self.character.column_clock == COLUMN_PERIOD:
                self.character.column += 1
                self.character.column_clock = 0
            self.tilemap.offset += SCROLL_STEP

    def restart(self) -> None:
        """Rewind score, scroll and the runner's column for a new run."""
        self.score.reset()
        self.tilemap.offset = 0.0
        self.character.column_clock = 0
        self.character.column = START_COLUMN
        self.character.ground = START_GROUND


class _Mode(IntEnum):
    MENU = 0
    PLAY = 1
    QUIT = 2
    WIN = 3


def _pending_events() -> Iterator[pygame.event.Event]:
    """Take queued events one at a time, leaving the rest queued if the caller stops."""
    while True:
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return
        yield event


def _is_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 2, 3)


class _Audio:
    """Sound effects and music; silent when no audio device is available."""

    def __init__(self, music_dir: Path) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        for name, volume in _VOLUMES.items():
            sound = pygame.mixer.Sound(str(music_dir / name))
            sound.set_volume(volume)
            self._sounds[name] = sound

    def ensure_playing(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None and sound.get_num_channels() == 0:
            sound.play()

    def stop(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.stop()

    def stop_all(self) -> None:
        for sound in self._sounds.values():
            sound.stop()


class Game:
    """A window running the menu, the level, the pause menu and the win screen."""

    def __init__(self, tilemap: TileMap, asset_dir: str | os.PathLike[str] = ".") -> None:
        self.state = GameState(tilemap)
        self.assets = Path(asset_dir)
        self._running = False
        self._menu_left = 0
        self._pause_left = 0
        now = time.perf_counter()
        self._frame_clock = now
        self._gravity_clock = now

    def _image(self, relative: str) -> pygame.Surface:
        return pygame.image.load(str(self.assets / "sprite" / relative)).convert_alpha()

    def _load(self) -> None:
        self._audio = _Audio(self.assets / "music")
        self._background = self._image(STATIC_BACKGROUND)
        self._layer_images = [self._image(layer.image) for layer in self.state.layers]
        self._tiles = {tile: self._image(path) for tile, path in TILE_IMAGES.items()}
        self._score_image = self._image(SCORE_IMAGE)
        self._sheets = {anim: self._image(path) for anim, path in SPRITE_SHEETS.items()}
        self._menu_image = self._image(MENU_IMAGE)
        self._pause_image = self._image(PAUSE_IMAGE)
        self._font = pygame.font.Font(str(self.assets / "sprite" / FONT_FILE), WIN_TEXT_SIZE)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self._window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            self._load()
            now = time.perf_counter()
            self._frame_clock = now
            self._gravity_clock = now
            self._loop()
            self._audio.stop_all()
        finally:
            pygame.quit()

    def _loop(self) -> None:
        mode = _Mode.MENU
        self._running = True
        while self._running:
            while mode is _Mode.MENU:
                mode = self._menu_frame()
            self._audio.stop(MENU_MUSIC)
            if mode is _Mode.PLAY:
                mode = self._play_frame()
            elif mode is _Mode.QUIT:
                self._running = False
            if mode is _Mode.WIN and self._running:
                mode = self._win_frame()

    def _menu_frame(self) -> _Mode:
        self.state.restart()
        for event in _pending_events():
            if event.type == pygame.QUIT:
                return _Mode.QUIT
            if _is_click(event):
                return _Mode(int(main_menu_click(*event.pos)))
            if event.type == pygame.MOUSEMOTION:
                self._menu_left = main_menu_hover(*event.pos)
        self._audio.ensure_playing(MENU_MUSIC)
        self._window.blit(self._menu_image, (0, 0), (self._menu_left, 0, SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.flip()
        return _Mode.MENU

    def _handle_play_event(self, event: pygame.event.Event) -> None:
        character = self.state.character
        if event.type == pygame.QUIT:
            self._running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            character.jump()
            self._audio.ensure_playing(JUMP_SOUND)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                if character.attack():
                    self._audio.ensure_playing(ATTACK_SOUND)
            elif event.button == 3:
                character.dodge()

    def _play_frame(self) -> _Mode:
        for event in _pending_events():
            self._handle_play_event(event)
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return self._pause()
        self._audio.ensure_playing(GAME_MUSIC)

        character = self.state.character
        now = time.perf_counter()
        seconds = (now - self._frame_clock) / FRAME_CLOCK_SCALE
        elapsed = now - self._gravity_clock
        idle_on_ground = (
            not character.airborne and character.attack_frames == 0 and character.dodge_frames == 0
        )
        attack_before = character.attack_left

        outcome = self.state.step(seconds, elapsed)

        if self.state.gravity_moved:
            self._gravity_clock = now
        if seconds > FRAME_DELAY:
            self._frame_clock = now
        if idle_on_ground:
            self._audio.stop(JUMP_SOUND)
        if attack_before == _LAST_ATTACK_FRAME and character.attack_left == 0:
            self._audio.stop(ATTACK_SOUND)
        if outcome is Outcome.DEAD or (
            outcome is Outcome.WIN and character.jump_y > character.ground
        ):
            self._audio.stop(GAME_MUSIC)

        self._draw_play()
        return _Mode(int(outcome))

    def _pause(self) -> _Mode:
        self._pause_left = 0
        while True:
            choice = self._pause_frame()
            if choice is PauseChoice.MAIN_MENU:
                self._audio.stop(GAME_MUSIC)
                return _Mode.MENU
            if choice is PauseChoice.RESUME:
                return _Mode.PLAY
            if choice is PauseChoice.QUIT:
                return _Mode.QUIT

    def _pause_frame(self) -> PauseChoice:
        for event in _pending_events():
            if event.type == pygame.QUIT:
                return PauseChoice.QUIT
            if _is_click(event):
                return pause_menu_click(*event.pos)
            if event.type == pygame.MOUSEMOTION:
                self._pause_left = pause_menu_hover(*event.pos)
        self._window.blit(
            self._pause_image, (0, 0), (self._pause_left, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
        )
        pygame.display.flip()
        return PauseChoice.NONE

    def _win_frame(self) -> _Mode:
        label = self._font.render(WIN_TEXT, True, (0, 0, 0))
        self._window.blit(label, WIN_TEXT_POSITION)
        pygame.display.flip()
        event = pygame.event.poll()
        if event.type == pygame.QUIT:
            return _Mode.QUIT
        if _is_click(event) or event.type == pygame.KEYDOWN:
            return _Mode.MENU
        return _Mode.WIN

    def _draw_character(self) -> None:
        character = self.state.character
        sheet = self._sheets[character.animation]
        area = pygame.Rect(character.frame).clip(sheet.get_rect())
        scale = SPRITE_SCALE[character.animation]
        if scale == 1.0:
            self._window.blit(sheet, character.position, area)
            return
        frame = sheet.subsurface(area)
        size = (round(area.width * scale), round(area.height * scale))
        self._window.blit(pygame.transform.scale(frame, size), character.position)

    def _draw_play(self) -> None:
        window = self._window
        window.blit(self._background, (0, 0))
        # The platform layer scrolls but is never drawn.
        for layer, image in list(zip(self.state.layers, self._layer_images))[:2]:
            window.blit(image, layer.position, layer.rect)
        for tile, x, y in self.state.tilemap.visible_tiles():
            window.blit(self._tiles[tile], (x, y), (0, 0, TILE_SIZE, TILE_SIZE))
        digits = reversed(self.state.score.visible_digits())
        for digit, position in zip(digits, DIGIT_POSITIONS):
            window.blit(
                self._score_image, position, (digit * DIGIT_SIZE, 0, DIGIT_SIZE, DIGIT_SIZE)
            )
        self._draw_character()
        if self.state.character.animation not in Animation:
            return
        pygame.display.flip()


def run(map_path: str | os.PathLike[str], asset_dir: str | os.PathLike[str] = ".") -> None:
    """Load the map at ``map_path`` and play it with assets from ``asset_dir``."""
    tilemap = load_map(map_path)
    Game(tilemap, asset_dir).run()