"""Screen states: layout of text items, hover handling and a running clock.

Nothing here draws pixels. A window is only a size and an open flag, and
text items carry an estimated size, so menus can be laid out, hovered and
navigated without a display.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum

_GLYPH_WIDTH = 0.6


class Color(Enum):
    """Fill colours used by the screens."""

    WHITE = "white"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    MAGENTA = "magenta"


class StateId(IntEnum):
    """Index of each screen in the list of states."""

    MAIN_MENU = 0
    START_MENU = 1
    FREE_PLAY = 2
    RAPID_PLAY = 3
    FRITZ_PLAY = 4
    BULLET_PLAY = 5
    CUSTOM_PLAY = 6
    LEARN_CHESS = 7
    LEARN_CHESS_SPECIAL = 8
    ABOUT = 9


@dataclass
class Window:
    """The surface the screens are laid out on."""

    width: int
    height: int
    is_open: bool = True

    def close(self) -> None:
        """Mark the window as closed."""
        self.is_open = False


@dataclass
class TextItem:
    """A piece of text placed at a point, measured from its origin."""

    text: str
    character_size: int
    x: float = 0.0
    y: float = 0.0
    color: Color = Color.WHITE
    bold: bool = False
    origin_x: float = 0.0
    origin_y: float = 0.0

    @property
    def width(self) -> float:
        """Estimated width of the widest line."""
        longest = max((len(line) for line in self.text.split("\n")), default=0)
        return _GLYPH_WIDTH * self.character_size * longest

    @property
    def height(self) -> float:
        """Estimated height of all lines."""
        return float(self.character_size * (self.text.count("\n") + 1))

    def bounds(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the text on the window."""
        return (self.x - self.origin_x, self.y - self.origin_y, self.width, self.height)

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies within the text's bounds."""
        left, top, width, height = self.bounds()
        return left <= x < left + width and top <= y < top + height


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event: the pointer position, whether it moved, and the left button."""

    x: float
    y: float
    moved: bool = True
    left_pressed: bool = False


def _clock_text(hours: int, minutes: int, seconds: int) -> str:
    return f"Time: \n {hours} : {minutes} : {seconds}"


class State(ABC):
    """A screen: reacts to input, updates itself and lists what it draws."""

    def __init__(self, window: Window) -> None:
        if window is None:
            raise ValueError("a state needs a window")
        self.window = window
        self.background_size = (window.width, window.height)
        self.start = time.monotonic()
        self.hours = 0
        self.minutes = 0
        self.seconds = 0
        self.elapsed = 0.0
        self.time_text = self.make_text(
            _clock_text(0, 0, 0),
            0.08 * window.height,
            window.width // 6,
            4 * window.height // 5,
        )
        self.time_text.color = Color.GREEN

    def make_text(self, text: str, character_size: float, x: float, y: float) -> TextItem:
        """A text item centred on the point ``(x, y)``."""
        size = int(character_size)
        if not text:
            raise ValueError("text must not be empty")
        if size <= 0:
            raise ValueError("character size must be positive")
        if x < 0 or y < 0:
            raise ValueError("text position must not be negative")
        item = TextItem(text, size, x, y)
        item.origin_x = item.width / 2
        item.origin_y = item.height / 2
        return item

    def menu_input(self, item: TextItem, event: MouseEvent) -> bool:
        """Whether the pointer of ``event`` is over ``item``."""
        return item.contains(event.x, event.y)

    def highlight(self, active: bool, item: TextItem) -> None:
        """Colour an option magenta while hovered, blue otherwise."""
        item.color = Color.MAGENTA if active else Color.BLUE

    def calculate_time(self) -> None:
        """Add the time since ``start`` to the clock and restart the interval."""
        now = time.monotonic()
        self.elapsed += now - self.start
        self.start = time.monotonic()
        total = int(self.elapsed)
        self.hours, rest = divmod(total, 3600)
        self.minutes, self.seconds = divmod(rest, 60)
        self.time_text.text = _clock_text(self.hours, self.minutes, self.seconds)

    def handle_input(self, event: MouseEvent, current: State,
                     states: Sequence[State]) -> State:
        """React to ``event``; return the state that is current afterwards."""
        if not states:
            raise ValueError("the list of states must not be empty")
        return current

    @abstractmethod
    def logic(self) -> None:
        """Update the screen after input."""

    @abstractmethod
    def draw(self) -> list[TextItem]:
        """The text items drawn over the background, in drawing order."""