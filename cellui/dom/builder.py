"""Builder helpers for declaring node trees inside an arena."""

from __future__ import annotations

from collections.abc import Iterable

from cellui.dom.arena import Attribute, Node, NodeArena, NodeHandle, NodeState, Tag
from cellui.ui_runtime.event_filter import EventFilter


class AttrBuilder[M]:
    def __init__(self) -> None:
        self._classes: list[str] = []
        self._events: list[EventFilter[M]] = []

    def class_(self, *names: str) -> AttrBuilder[M]:
        self._classes.extend(names)
        return self

    def event(self, event_filter: EventFilter[M]) -> AttrBuilder[M]:
        self._events.append(event_filter)
        return self

    def build(self) -> Attribute[M]:
        return Attribute(classes=tuple(self._classes), events=tuple(self._events))


class DivBuilder[M]:
    """Accumulates attributes and children, then allocates one node."""

    def __init__(self, arena: NodeArena[M], tag: Tag = Tag.DIV) -> None:
        self._arena = arena
        self._tag = tag
        self._attr: Attribute[M] = Attribute()
        self._children: list[NodeHandle] = []
        self._state = NodeState.NONE

    def attr(self, attr: Attribute[M]) -> DivBuilder[M]:
        self._attr = attr
        return self

    def state(self, state: NodeState) -> DivBuilder[M]:
        self._state |= state
        return self

    def child(self, child: NodeHandle) -> DivBuilder[M]:
        self._children.append(child)
        return self

    def children(self, children: Iterable[NodeHandle]) -> DivBuilder[M]:
        self._children.extend(children)
        return self

    def build(self) -> NodeHandle:
        node = Node(
            tag=self._tag,
            attr=self._attr,
            children=tuple(self._children),
            state=self._state,
        )
        return self._arena.alloc(node)


def attr[M]() -> AttrBuilder[M]:
    return AttrBuilder()


def div[M](arena: NodeArena[M]) -> DivBuilder[M]:
    return DivBuilder(arena, Tag.DIV)


def button[M](arena: NodeArena[M]) -> DivBuilder[M]:
    return DivBuilder(arena, Tag.BUTTON)


def body[M](arena: NodeArena[M]) -> DivBuilder[M]:
    return DivBuilder(arena, Tag.BODY)


def text[M](
    arena: NodeArena[M],
    content: str,
    attr: Attribute[M] | None = None,
    *,
    tag: Tag = Tag.DIV,
    state: NodeState = NodeState.NONE,
) -> NodeHandle:
    """Allocate a single-line text leaf."""
    return arena.alloc(Node(tag=tag, attr=attr or Attribute(), text=content, state=state))


__all__ = ["AttrBuilder", "DivBuilder", "attr", "body", "button", "div", "text"]
