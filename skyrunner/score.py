"""The running score shown as up to five odometer-style digit sprites."""

from __future__ import annotations

from dataclasses import dataclass, field

DIGIT_SIZE = 100
DIGIT_COUNT = 5
# Screen position of each digit sprite, units first.
DIGIT_POSITIONS = ((1800, 20), (1700, 20), (1600, 20), (1500, 20), (1400, 20))
# Carry counts from which the second, third, fourth and fifth digits appear.
_REVEAL_AT = (1, 11, 111, 1111)


@dataclass
class ScoreCounter:
    """Decimal counter; ``digits`` holds the places units first."""

    digits: list[int] = field(default_factory=lambda: [0] * DIGIT_COUNT)
    carries: int = 0

    def tick(self) -> None:
        """Add one point, carrying into the higher places."""
        last = len(self.digits) - 1
        for place, digit in enumerate(self.digits):
            if digit < 9:
                self.digits[place] = digit + 1
                return
            self.digits[place] = 0
            if place < last:
                self.carries += 1

    def reset(self) -> None:
        """Return to a score of zero."""
        self.digits = [0] * DIGIT_COUNT
        self.carries = 0

    def visible_digits(self) -> tuple[int, ...]:
        """Digits currently on screen, most significant first."""
        shown = 1 + sum(self.carries >= threshold for threshold in _REVEAL_AT)
        return tuple(reversed(self.digits[:shown]))