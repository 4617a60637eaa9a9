"""Style model: direct colors, palette indirection, themes and text effects."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag
from typing import ClassVar


class Effect(Flag):
    """Text effects; combine with `|`."""

    NONE = 0
    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINE = 8
    BLINK = 16
    REVERSE = 32
    HIDDEN = 64
    STRIKETHROUGH = 128

    def members(self) -> tuple[Effect, ...]:
        """Return the single-bit effects contained in this set."""
        return tuple(effect for effect in ALL_EFFECTS if effect in self)


ALL_EFFECTS: tuple[Effect, ...] = (
    Effect.BOLD,
    Effect.DIM,
    Effect.ITALIC,
    Effect.UNDERLINE,
    Effect.BLINK,
    Effect.REVERSE,
    Effect.HIDDEN,
    Effect.STRIKETHROUGH,
)


@dataclass(frozen=True, slots=True)
class Color:
    """Direct terminal color: one of the 16 named colors, a 256-palette index, or RGB."""

    kind: str  # named|index|rgb
    value: int | tuple[int, int, int]

    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]

    @staticmethod
    def named(index: int) -> Color:
        if not 0 <= index < 16:
            raise ValueError(f"named color index out of range: {index}")
        return Color("named", index)

    @staticmethod
    def index(index: int) -> Color:
        if not 0 <= index < 256:
            raise ValueError(f"palette index out of range: {index}")
        return Color("index", index)

    @staticmethod
    def rgb(r: int, g: int, b: int) -> Color:
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"rgb channel out of range: {channel}")
        return Color("rgb", (r, g, b))

    def to_rgb(self) -> tuple[int, int, int]:
        """Approximate the color as 8-bit RGB for non-terminal surfaces."""
        if self.kind == "rgb":
            assert isinstance(self.value, tuple)
            return self.value
        assert isinstance(self.value, int)
        if self.value < 16:
            return _ANSI16_RGB[self.value]
        if self.value < 232:
            level = self.value - 16
            steps = (0, 95, 135, 175, 215, 255)
            return (steps[level // 36], steps[(level // 6) % 6], steps[level % 6])
        gray = 8 + (self.value - 232) * 10
        return (gray, gray, gray)


_ANSI16_RGB: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (205, 0, 0),
    (0, 205, 0),
    (205, 205, 0),
    (0, 0, 238),
    (205, 0, 205),
    (0, 205, 205),
    (229, 229, 229),
    (127, 127, 127),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (92, 92, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

Color.BLACK = Color.named(0)
Color.RED = Color.named(1)
Color.GREEN = Color.named(2)
Color.YELLOW = Color.named(3)
Color.BLUE = Color.named(4)
Color.MAGENTA = Color.named(5)
Color.CYAN = Color.named(6)
Color.WHITE = Color.named(7)


class PaletteRole(Enum):
    """Built-in palette roles resolved through a Theme."""

    BACKGROUND = 0
    VIEW = 1
    PRIMARY = 2
    TITLE = 3
    HIGHLIGHT = 4
    HIGHLIGHT_INACTIVE = 5


CUSTOM_SLOTS = 16
_BUILTIN_SLOTS = len(PaletteRole)


@dataclass(frozen=True, slots=True)
class PaletteColor:
    """Indirect color naming either a built-in role or a numbered custom slot."""

    role: PaletteRole | None = None
    custom: int | None = None

    def __post_init__(self) -> None:
        if (self.role is None) == (self.custom is None):
            raise ValueError("PaletteColor needs exactly one of role or custom")
        if self.custom is not None and not 0 <= self.custom < CUSTOM_SLOTS:
            raise ValueError(f"custom palette slot out of range: {self.custom}")

    @classmethod
    def of(cls, role: PaletteRole) -> PaletteColor:
        return cls(role=role)

    @classmethod
    def custom_slot(cls, slot: int) -> PaletteColor:
        return cls(custom=slot)

    def slot_index(self) -> int:
        """Map the reference onto a fixed palette table index."""
        if self.role is not None:
            return self.role.value
        assert self.custom is not None
        return _BUILTIN_SLOTS + self.custom


ColorRef = Color | PaletteColor | None


def _default_palette() -> tuple[Color | None, ...]:
    slots: list[Color | None] = [None] * (_BUILTIN_SLOTS + CUSTOM_SLOTS)
    slots[PaletteRole.TITLE.value] = Color.YELLOW
    slots[PaletteRole.HIGHLIGHT.value] = Color.CYAN
    slots[PaletteRole.HIGHLIGHT_INACTIVE.value] = Color.BLUE
    return tuple(slots)


@dataclass(frozen=True, slots=True)
class Theme:
    """Immutable total mapping from palette slot to an optional direct color."""

    palette: tuple[Color | None, ...] = field(default_factory=_default_palette)

    def __post_init__(self) -> None:
        if len(self.palette) != _BUILTIN_SLOTS + CUSTOM_SLOTS:
            raise ValueError("theme palette must cover every role and custom slot")

    @classmethod
    def default(cls) -> Theme:
        return cls()

    @classmethod
    def empty(cls) -> Theme:
        return cls(palette=(None,) * (_BUILTIN_SLOTS + CUSTOM_SLOTS))

    def with_color(self, ref: PaletteRole | PaletteColor, color: Color | None) -> Theme:
        """Return a new theme with one slot replaced."""
        palette_ref = ref if isinstance(ref, PaletteColor) else PaletteColor.of(ref)
        slots = list(self.palette)
        slots[palette_ref.slot_index()] = color
        return Theme(palette=tuple(slots))

    def resolve(self, color: ColorRef) -> Color | None:
        """Resolve a color reference to a direct color, or None for terminal default."""
        if color is None or isinstance(color, Color):
            return color
        return self.palette[color.slot_index()]


@dataclass(frozen=True, slots=True)
class Style:
    """Foreground, background and effect set; colors may be palette references."""

    fg: ColorRef = None
    bg: ColorRef = None
    effects: Effect = Effect.NONE

    @classmethod
    def view(cls) -> Style:
        return cls(fg=PaletteColor.of(PaletteRole.PRIMARY), bg=PaletteColor.of(PaletteRole.VIEW))

    @classmethod
    def primary(cls) -> Style:
        return cls(fg=PaletteColor.of(PaletteRole.PRIMARY), bg=PaletteColor.of(PaletteRole.BACKGROUND))

    @classmethod
    def title(cls) -> Style:
        return cls(
            fg=PaletteColor.of(PaletteRole.TITLE),
            bg=PaletteColor.of(PaletteRole.VIEW),
            effects=Effect.BOLD,
        )

    @classmethod
    def outline(cls) -> Style:
        return cls(fg=PaletteColor.of(PaletteRole.PRIMARY), bg=PaletteColor.of(PaletteRole.VIEW))

    @classmethod
    def highlight(cls) -> Style:
        return cls(
            fg=PaletteColor.of(PaletteRole.VIEW),
            bg=PaletteColor.of(PaletteRole.HIGHLIGHT),
            effects=Effect.REVERSE,
        )

    @classmethod
    def highlight_inactive(cls) -> Style:
        return cls(
            fg=PaletteColor.of(PaletteRole.VIEW),
            bg=PaletteColor.of(PaletteRole.HIGHLIGHT_INACTIVE),
        )

    def with_fg(self, fg: ColorRef) -> Style:
        return replace(self, fg=fg)

    def with_bg(self, bg: ColorRef) -> Style:
        return replace(self, bg=bg)

    def with_effects(self, effects: Effect) -> Style:
        return replace(self, effects=self.effects | effects)


__all__ = [
    "ALL_EFFECTS",
    "CUSTOM_SLOTS",
    "Color",
    "ColorRef",
    "Effect",
    "PaletteColor",
    "PaletteRole",
    "Style",
    "Theme",
]
