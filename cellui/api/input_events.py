"""Input event capability and the concrete terminal event types."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol, runtime_checkable

from cellui.api.geometry import Vec2


@runtime_checkable
class EventLike(Protocol):
    """Questions the view tree asks of any concrete input event."""

    def try_left_click(self) -> Vec2 | None:
        """Return the position of a left-button press, if this is one."""

    def try_mouse(self) -> Vec2 | None:
        """Return the position of any pointer event, if this is one."""

    def try_drag(self) -> Vec2 | None:
        """Return the position of a left-button drag, if this is one."""

    def try_scroll_up(self) -> Vec2 | None:
        """Return the position of a wheel-up event, if this is one."""

    def try_scroll_down(self) -> Vec2 | None:
        """Return the position of a wheel-down event, if this is one."""

    def try_char(self) -> str | None:
        """Return the typed character of an unmodified character key."""

    def try_ctrl_char(self) -> str | None:
        """Return the character of a Ctrl+character chord."""

    def is_enter(self) -> bool: ...

    def is_tab(self) -> bool: ...

    def is_backspace(self) -> bool: ...

    def is_up(self) -> bool: ...

    def is_down(self) -> bool: ...

    def is_left(self) -> bool: ...

    def is_right(self) -> bool: ...

    def try_resize(self) -> Vec2 | None:
        """Return the new surface size of a resize event, if this is one."""

    def with_pos(self, pos: Vec2) -> EventLike:
        """Return a copy of a pointer event moved to `pos`; other events are returned as is."""


class Key(Enum):
    """Keys distinguished by the terminal decoder."""

    CHAR = "char"
    ENTER = "enter"
    TAB = "tab"
    BACKTAB = "backtab"
    BACKSPACE = "backspace"
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    DELETE = "delete"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


class MouseKind(Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVE = "move"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


class MouseButton(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    NONE = "none"


class TerminalEvent:
    """Default answers for the event capability; subclasses override their own kind."""

    __slots__ = ()

    def try_left_click(self) -> Vec2 | None:
        return None

    def try_mouse(self) -> Vec2 | None:
        return None

    def try_drag(self) -> Vec2 | None:
        return None

    def try_scroll_up(self) -> Vec2 | None:
        return None

    def try_scroll_down(self) -> Vec2 | None:
        return None

    def try_char(self) -> str | None:
        return None

    def try_ctrl_char(self) -> str | None:
        return None

    def is_enter(self) -> bool:
        return False

    def is_tab(self) -> bool:
        return False

    def is_backspace(self) -> bool:
        return False

    def is_up(self) -> bool:
        return False

    def is_down(self) -> bool:
        return False

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return False

    def try_resize(self) -> Vec2 | None:
        return None

    def with_pos(self, pos: Vec2) -> TerminalEvent:
        return self


@dataclass(frozen=True, slots=True)
class KeyEvent(TerminalEvent):
    """Key press; `char` is set for Key.CHAR."""

    key: Key
    char: str | None = None
    ctrl: bool = False
    alt: bool = False

    @classmethod
    def of_char(cls, char: str) -> KeyEvent:
        return cls(Key.CHAR, char=char)

    @classmethod
    def ctrl_char(cls, char: str) -> KeyEvent:
        return cls(Key.CHAR, char=char, ctrl=True)

    @classmethod
    def press(cls, key: Key) -> KeyEvent:
        return cls(key)

    def _plain(self, key: Key) -> bool:
        return self.key is key and not self.ctrl and not self.alt

    def try_char(self) -> str | None:
        if self._plain(Key.CHAR):
            return self.char
        return None

    def try_ctrl_char(self) -> str | None:
        if self.key is Key.CHAR and self.ctrl and not self.alt:
            return self.char
        return None

    def is_enter(self) -> bool:
        return self._plain(Key.ENTER)

    def is_tab(self) -> bool:
        return self._plain(Key.TAB)

    def is_backspace(self) -> bool:
        return self._plain(Key.BACKSPACE)

    def is_up(self) -> bool:
        return self._plain(Key.UP)

    def is_down(self) -> bool:
        return self._plain(Key.DOWN)

    def is_left(self) -> bool:
        return self._plain(Key.LEFT)

    def is_right(self) -> bool:
        return self._plain(Key.RIGHT)


@dataclass(frozen=True, slots=True)
class MouseEvent(TerminalEvent):
    """Pointer event in absolute surface cells."""

    kind: MouseKind
    x: int
    y: int
    button: MouseButton = MouseButton.LEFT

    @classmethod
    def left_down(cls, x: int, y: int) -> MouseEvent:
        return cls(MouseKind.DOWN, x, y, MouseButton.LEFT)

    @classmethod
    def left_up(cls, x: int, y: int) -> MouseEvent:
        return cls(MouseKind.UP, x, y, MouseButton.LEFT)

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    def try_left_click(self) -> Vec2 | None:
        if self.kind is MouseKind.DOWN and self.button is MouseButton.LEFT:
            return self.pos
        return None

    def try_mouse(self) -> Vec2 | None:
        return self.pos

    def try_drag(self) -> Vec2 | None:
        if self.kind is MouseKind.DRAG and self.button is MouseButton.LEFT:
            return self.pos
        return None

    def try_scroll_up(self) -> Vec2 | None:
        return self.pos if self.kind is MouseKind.SCROLL_UP else None

    def try_scroll_down(self) -> Vec2 | None:
        return self.pos if self.kind is MouseKind.SCROLL_DOWN else None

    def with_pos(self, pos: Vec2) -> MouseEvent:
        return replace(self, x=pos.x, y=pos.y)


@dataclass(frozen=True, slots=True)
class ResizeEvent(TerminalEvent):
    """Surface resized to `width` x `height` cells."""

    width: int
    height: int

    def try_resize(self) -> Vec2 | None:
        return Vec2(self.width, self.height)


__all__ = [
    "EventLike",
    "Key",
    "KeyEvent",
    "MouseButton",
    "MouseEvent",
    "MouseKind",
    "ResizeEvent",
    "TerminalEvent",
]
