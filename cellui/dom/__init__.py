"""Declarative node trees allocated per frame and styled through CSS."""

from cellui.dom.arena import Attribute, Node, NodeArena, NodeHandle, NodeState, Tag
from cellui.dom.builder import AttrBuilder, DivBuilder, attr, body, button, div, text
from cellui.dom.element import ElementView, render_root
from cellui.dom.model import Model

__all__ = [
    "AttrBuilder",
    "Attribute",
    "DivBuilder",
    "ElementView",
    "Model",
    "Node",
    "NodeArena",
    "NodeHandle",
    "NodeState",
    "Tag",
    "attr",
    "body",
    "button",
    "div",
    "render_root",
    "text",
]
