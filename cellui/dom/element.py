"""Adapter that walks an arena tree for selector matching, rendering and events."""

from __future__ import annotations

from collections.abc import Iterator

from cellui.api.geometry import Rect, Vec2
from cellui.api.input_events import EventLike
from cellui.css.property import ResolvedProperty
from cellui.css.stylesheet import StyleSheet
from cellui.css.values import ZERO_EDGES, Edges
from cellui.dom.arena import Node, NodeArena, NodeHandle, NodeState
from cellui.rendering.printer import Printer
from cellui.rendering.text_width import str_width

_PSEUDO_STATES: dict[str, NodeState] = {
    "focus": NodeState.FOCUS,
    "hover": NodeState.HOVER,
}


def _shrink(rect: Rect, edges: Edges) -> Rect:
    return rect.add_start((edges.left, edges.top)).sub_size((edges.right, edges.bottom))


class ElementView[M]:
    """A node together with its position among its ancestors.

    Created on demand while styling or rendering one frame; never stored.
    """

    __slots__ = ("_arena", "_handle", "_parent", "_pos")

    def __init__(
        self,
        arena: NodeArena[M],
        handle: NodeHandle,
        parent: ElementView[M] | None = None,
        pos: int = 0,
    ) -> None:
        self._arena = arena
        self._handle = handle
        self._parent = parent
        self._pos = pos

    @property
    def node(self) -> Node[M]:
        return self._arena.get(self._handle)

    @property
    def handle(self) -> NodeHandle:
        return self._handle

    @property
    def parent(self) -> ElementView[M] | None:
        return self._parent

    @property
    def pos(self) -> int:
        return self._pos

    def child(self, pos: int) -> ElementView[M] | None:
        children = self.node.children
        if not 0 <= pos < len(children):
            return None
        return ElementView(self._arena, children[pos], self, pos)

    def children(self) -> Iterator[ElementView[M]]:
        for pos, handle in enumerate(self.node.children):
            yield ElementView(self._arena, handle, self, pos)

    # Selector matching.

    def tag_name(self) -> str:
        return self.node.tag.value

    def has_class(self, name: str) -> bool:
        return name in self.node.attr.classes

    def has_pseudo_class(self, name: str) -> bool:
        state = _PSEUDO_STATES.get(name)
        return state is not None and state in self.node.state

    def parent_element(self) -> ElementView[M] | None:
        return self._parent

    def prev_sibling_element(self) -> ElementView[M] | None:
        if self._parent is None or self._pos == 0:
            return None
        return self._parent.child(self._pos - 1)

    # Geometry.

    def desired_size(self) -> Vec2:
        """Content size without styling: text width by one row, or children stacked."""
        node = self.node
        if node.text is not None:
            return Vec2(str_width(node.text), 1)
        width = 0
        height = 0
        for child in self.children():
            size = child.desired_size()
            width = max(width, size.x)
            height += size.y
        return Vec2(width, height)

    def measure(self, stylesheet: StyleSheet, parent: ResolvedProperty) -> Vec2:
        """Outer size including box edges, limited by the resolved width and height."""
        prop = stylesheet.resolve(self, parent)
        return self._measure_with(stylesheet, prop)

    def _measure_with(self, stylesheet: StyleSheet, prop: ResolvedProperty) -> Vec2:
        node = self.node
        if node.text is not None:
            content = Vec2(str_width(node.text), 1)
        else:
            width = 0
            height = 0
            for child in self.children():
                size = child.measure(stylesheet, prop)
                width = max(width, size.x)
                height += size.y
            content = Vec2(width, height)
        edges = prop.box_edges()
        return Vec2(
            min(content.x + edges.horizontal, prop.width),
            min(content.y + edges.vertical, prop.height),
        )

    # Rendering.

    def render(self, stylesheet: StyleSheet, parent: ResolvedProperty, printer: Printer) -> None:
        """Draw this node and its subtree at the top-left of the printer's bound."""
        prop = stylesheet.resolve(self, parent)
        size = self._measure_with(stylesheet, prop).min(printer.bound.size)
        outer = printer.bound.with_size(size)
        border_box = _shrink(outer, prop.margin)
        content = _shrink(_shrink(border_box, prop.border_width), prop.padding)
        style = prop.style

        def draw(p: Printer) -> None:
            if prop.bg is not None:
                with p.bounded(border_box):
                    for row in range(border_box.h):
                        p.print((0, row), " " * border_box.w)
            if prop.border_width != ZERO_EDGES:
                with p.bounded(border_box), p.styled(prop.border_style):
                    _draw_border(p, prop.border_width)
            with p.bounded(content):
                self._render_content(stylesheet, prop, p)

        printer.with_style(style, draw)

    def _render_content(self, stylesheet: StyleSheet, prop: ResolvedProperty, printer: Printer) -> None:
        node = self.node
        if node.text is not None:
            printer.print((0, 0), node.text)
            return
        bound = printer.bound
        for child in self.children():
            if bound.is_empty():
                break
            with printer.bounded(bound):
                child.render(stylesheet, prop, printer)
            bound = bound.add_start((0, child.measure(stylesheet, prop).y))

    # Events.

    def on_event(self, event: EventLike) -> M | None:
        """Check this node's filters, then each child in order; first message wins."""
        node = self.node
        for event_filter in node.attr.events:
            msg = event_filter.check(event)
            if msg is not None:
                return msg
        for child in self.children():
            msg = child.on_event(event)
            if msg is not None:
                return msg
        return None


def _draw_border(printer: Printer, width: Edges) -> None:
    if width.top and width.right and width.bottom and width.left:
        printer.print_rect()
        return
    bound = printer.bound
    if width.top:
        printer.print_horizontal_line(0)
    if width.bottom and bound.h:
        printer.print_horizontal_line(bound.h - 1)
    if width.left:
        printer.print_vertical_line(0)
    if width.right and bound.w:
        printer.print_vertical_line(bound.w - 1)


def render_root[M](
    arena: NodeArena[M],
    root: NodeHandle,
    stylesheet: StyleSheet,
    printer: Printer,
) -> None:
    """Render a whole tree against the printer's bound as the implicit parent."""
    element = ElementView(arena, root)
    element.render(stylesheet, ResolvedProperty.root(printer.bound.size), printer)


__all__ = ["ElementView", "render_root"]
