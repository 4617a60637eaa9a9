"""Application model driven by the declarative node tree."""

from __future__ import annotations

from typing import Protocol

from cellui.api.results import UpdateResult
from cellui.dom.arena import NodeArena, NodeHandle


class Model[M](Protocol):
    """State that rebuilds its node tree after every redrawing update."""

    def update(self, msg: M) -> UpdateResult:
        """Apply a message; REDRAW rebuilds the tree, EXIT stops the loop."""

    def view(self, arena: NodeArena[M]) -> NodeHandle:
        """Allocate the current tree into `arena` and return its root."""


__all__ = ["Model"]
