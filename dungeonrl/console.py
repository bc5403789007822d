"""A character-grid console: colours, cells, drawing primitives and input state."""

from __future__ import annotations

from dataclasses import dataclass, field

KEY_ESCAPE = "escape"

_CP437_LOW = "☺☻♥♦♣♠•◘○◙♂♀♪♫☼►◄↕‼¶§▬↨↑↓→←∟↔▲▼"
_CP437_SPECIAL = {ch: code for code, ch in enumerate(_CP437_LOW, start=1)}
_CP437_SPECIAL["⌂"] = 127


def to_cp437(ch: str) -> int:
    """Code-page 437 glyph index of a single character; 0 if it has none."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch in _CP437_SPECIAL:
        return _CP437_SPECIAL[ch]
    try:
        return ch.encode("cp437")[0]
    except UnicodeEncodeError:
        return 0


def letter_to_option(key: str | None) -> int:
    """Menu option for a letter key (a=0 ... z=25), or -1 for any other key."""
    if key is None or len(key) != 1:
        return -1
    lowered = key.lower()
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a")
    return -1


@dataclass(frozen=True)
class RGB:
    """A colour with channels in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float

    @classmethod
    def from_f32(cls, r: float, g: float, b: float) -> "RGB":
        return cls(float(r), float(g), float(b))

    @classmethod
    def from_u8(cls, r: int, g: int, b: int) -> "RGB":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def to_greyscale(self) -> "RGB":
        """Luminance-weighted grey of this colour."""
        linear = self.r * 0.2126 + self.g * 0.7152 + self.b * 0.0722
        return RGB(linear, linear, linear)


WHITE = RGB.from_u8(255, 255, 255)
BLACK = RGB.from_u8(0, 0, 0)
GRAY = RGB.from_u8(128, 128, 128)
GREY = GRAY
YELLOW = RGB.from_u8(255, 255, 0)
RED = RGB.from_u8(255, 0, 0)
GREEN = RGB.from_u8(0, 255, 0)
ORANGE = RGB.from_u8(255, 165, 0)
MAGENTA = RGB.from_u8(255, 0, 255)
BLUE = RGB.from_u8(0, 0, 255)
CYAN = RGB.from_u8(0, 255, 255)


@dataclass
class Cell:
    """One character position on the console."""

    glyph: int = 32
    fg: RGB = WHITE
    bg: RGB = BLACK


@dataclass
class Console:
    """A fixed-size grid of cells plus the current frame's input."""

    width: int = 80
    height: int = 50
    key: str | None = None
    mouse: tuple[int, int] = (0, 0)
    left_click: bool = False
    frame_time_ms: float = 0.0
    cells: list[Cell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.cells = []
        self.cls()

    def cls(self) -> None:
        """Reset every cell to a blank, white-on-black space."""
        self.cells = [Cell() for _ in range(self.width * self.height)]

    def get_char_size(self) -> tuple[int, int]:
        return self.width, self.height

    def _index(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def cell(self, x: int, y: int) -> Cell:
        """The cell at (x, y); raises IndexError outside the console."""
        idx = self._index(x, y)
        if idx is None:
            raise IndexError(f"({x}, {y}) is outside the console")
        return self.cells[idx]

    def set(self, x: int, y: int, fg: RGB, bg: RGB, glyph: int) -> None:
        """Write a glyph with colours; positions off the console are ignored."""
        idx = self._index(x, y)
        if idx is not None:
            self.cells[idx] = Cell(glyph, fg, bg)

    def set_bg(self, x: int, y: int, bg: RGB) -> None:
        idx = self._index(x, y)
        if idx is not None:
            self.cells[idx].bg = bg

    def print(self, x: int, y: int, text: str) -> None:
        self.print_color(x, y, WHITE, BLACK, text)

    def print_color(self, x: int, y: int, fg: RGB, bg: RGB, text: str) -> None:
        for offset, ch in enumerate(text):
            self.set(x + offset, y, fg, bg, to_cp437(ch))

    def print_color_centered(self, y: int, fg: RGB, bg: RGB, text: str) -> None:
        self.print_color(self.width // 2 - len(text) // 2, y, fg, bg, text)

    def draw_box(self, x: int, y: int, width: int, height: int, fg: RGB, bg: RGB) -> None:
        """Single-line box with corners at (x, y) and (x+width, y+height), blank inside."""
        for by in range(y, y + height):
            for bx in range(x, x + width):
                self.set(bx, by, fg, bg, 32)
        self.set(x, y, fg, bg, to_cp437("┌"))
        self.set(x + width, y, fg, bg, to_cp437("┐"))
        self.set(x, y + height, fg, bg, to_cp437("└"))
        self.set(x + width, y + height, fg, bg, to_cp437("┘"))
        for bx in range(x + 1, x + width):
            self.set(bx, y, fg, bg, to_cp437("─"))
            self.set(bx, y + height, fg, bg, to_cp437("─"))
        for by in range(y + 1, y + height):
            self.set(x, by, fg, bg, to_cp437("│"))
            self.set(x + width, by, fg, bg, to_cp437("│"))

    def draw_bar_horizontal(
        self, x: int, y: int, width: int, n: int, max_n: int, fg: RGB, bg: RGB
    ) -> None:
        """Progress bar of ``width`` cells filled in proportion to n / max_n."""
        fill_width = int(n / max_n * width) if max_n > 0 else 0
        full, empty = to_cp437("▓"), to_cp437("░")
        for offset in range(width):
            self.set(x + offset, y, fg, bg, full if offset <= fill_width else empty)

    def mouse_pos(self) -> tuple[int, int]:
        return self.mouse