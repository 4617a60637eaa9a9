"""Frame-scoped node storage addressed by generation-checked handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag

from cellui.runtime.errors import StaleHandleError
from cellui.ui_runtime.event_filter import EventFilter


class Tag(Enum):
    BODY = "body"
    DIV = "div"
    BUTTON = "button"


class NodeState(Flag):
    """Pseudo-class state carried by a node."""

    NONE = 0
    FOCUS = 1
    HOVER = 2


@dataclass(frozen=True, slots=True)
class NodeHandle:
    """Index into one arena generation; invalid once the arena is reset."""

    index: int
    generation: int


@dataclass(frozen=True, slots=True)
class Attribute[M]:
    classes: tuple[str, ...] = ()
    events: tuple[EventFilter[M], ...] = ()


@dataclass(frozen=True, slots=True)
class Node[M]:
    tag: Tag
    attr: Attribute[M] = field(default_factory=Attribute)
    text: str | None = None
    children: tuple[NodeHandle, ...] = ()
    state: NodeState = NodeState.NONE

    @property
    def is_text(self) -> bool:
        return self.text is not None


class NodeArena[M]:
    """Append-only node store rebuilt wholesale every frame."""

    def __init__(self) -> None:
        self._nodes: list[Node[M]] = []
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def __len__(self) -> int:
        return len(self._nodes)

    def alloc(self, node: Node[M]) -> NodeHandle:
        """Store a node and return its handle for the current generation."""
        for child in node.children:
            self._check(child)
        self._nodes.append(node)
        return NodeHandle(index=len(self._nodes) - 1, generation=self._generation)

    def get(self, handle: NodeHandle) -> Node[M]:
        self._check(handle)
        return self._nodes[handle.index]

    def reset(self) -> None:
        """Drop every node; handles from before the reset become stale."""
        self._nodes.clear()
        self._generation += 1

    def _check(self, handle: NodeHandle) -> None:
        if handle.generation != self._generation:
            raise StaleHandleError(
                f"node handle from generation {handle.generation}, arena is at {self._generation}"
            )
        if not 0 <= handle.index < len(self._nodes):
            raise IndexError(f"node handle index out of range: {handle.index}")


__all__ = ["Attribute", "Node", "NodeArena", "NodeHandle", "NodeState", "Tag"]
