"""Selector parsing and matching over any tree exposing the element protocol."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

SUPPORTED_PSEUDO_CLASSES = frozenset({"focus", "hover"})

_COMBINATOR_SPACING_RE = re.compile(r"\s*([>+])\s*")
_COMPOUND_RE = re.compile(
    r"""
    ^(?P<tag>\*|[a-zA-Z][a-zA-Z0-9-]*)?
    (?P<rest>(?:[.:][a-zA-Z_][a-zA-Z0-9_-]*)*)$
    """,
    re.VERBOSE,
)
_PART_RE = re.compile(r"([.:])([a-zA-Z_][a-zA-Z0-9_-]*)")


class StyledElement(Protocol):
    """What selector matching needs to know about a node."""

    def tag_name(self) -> str: ...

    def has_class(self, name: str) -> bool: ...

    def has_pseudo_class(self, name: str) -> bool: ...

    def parent_element(self) -> StyledElement | None: ...

    def prev_sibling_element(self) -> StyledElement | None: ...


class Combinator(Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT = "+"


@dataclass(frozen=True, slots=True)
class Compound:
    """One simple-selector sequence such as `div.menu:focus`."""

    tag: str | None = None
    classes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()

    def matches(self, element: StyledElement) -> bool:
        if self.tag is not None and element.tag_name() != self.tag:
            return False
        if not all(element.has_class(name) for name in self.classes):
            return False
        return all(element.has_pseudo_class(name) for name in self.pseudo_classes)

    def __str__(self) -> str:
        parts = [self.tag or ("" if self.classes or self.pseudo_classes else "*")]
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        return "".join(parts)


@dataclass(frozen=True, slots=True)
class Selector:
    """Compounds left to right; `combinators[i]` links `compounds[i]` to `compounds[i + 1]`."""

    compounds: tuple[Compound, ...]
    combinators: tuple[Combinator, ...] = ()

    @property
    def text(self) -> str:
        """Canonical source text; its length orders rules in a stylesheet."""
        out = [str(self.compounds[0])]
        for combinator, compound in zip(self.combinators, self.compounds[1:], strict=True):
            if combinator is Combinator.DESCENDANT:
                out.append(" ")
            else:
                out.append(f" {combinator.value} ")
            out.append(str(compound))
        return "".join(out)

    def matches(self, element: StyledElement) -> bool:
        return self._match_at(len(self.compounds) - 1, element)

    def _match_at(self, index: int, element: StyledElement) -> bool:
        if not self.compounds[index].matches(element):
            return False
        if index == 0:
            return True
        combinator = self.combinators[index - 1]
        if combinator is Combinator.CHILD:
            parent = element.parent_element()
            return parent is not None and self._match_at(index - 1, parent)
        if combinator is Combinator.ADJACENT:
            sibling = element.prev_sibling_element()
            return sibling is not None and self._match_at(index - 1, sibling)
        ancestor = element.parent_element()
        while ancestor is not None:
            if self._match_at(index - 1, ancestor):
                return True
            ancestor = ancestor.parent_element()
        return False


def parse_selector(raw: str) -> Selector:
    """Parse one selector (no commas); raises ValueError on unsupported syntax."""
    tokens = _COMBINATOR_SPACING_RE.sub(r" \1 ", raw.strip()).split()
    if not tokens:
        raise ValueError("empty selector")
    compounds: list[Compound] = []
    combinators: list[Combinator] = []
    pending: Combinator | None = None
    for token in tokens:
        if token in (">", "+"):
            if not compounds or pending is not None:
                raise ValueError(f"dangling combinator in selector: {raw!r}")
            pending = Combinator(token)
            continue
        if compounds:
            combinators.append(pending or Combinator.DESCENDANT)
        pending = None
        compounds.append(_parse_compound(token, raw))
    if pending is not None:
        raise ValueError(f"dangling combinator in selector: {raw!r}")
    return Selector(compounds=tuple(compounds), combinators=tuple(combinators))


def _parse_compound(token: str, raw: str) -> Compound:
    match = _COMPOUND_RE.match(token)
    if match is None:
        raise ValueError(f"unsupported selector: {raw!r}")
    tag = match.group("tag")
    classes: list[str] = []
    pseudo: list[str] = []
    for prefix, name in _PART_RE.findall(match.group("rest")):
        if prefix == ".":
            classes.append(name)
            continue
        if name not in SUPPORTED_PSEUDO_CLASSES:
            raise ValueError(f"unsupported pseudo-class :{name} in {raw!r}")
        pseudo.append(name)
    if tag is None and not classes and not pseudo:
        raise ValueError(f"unsupported selector: {raw!r}")
    return Compound(
        tag=None if tag in (None, "*") else tag.lower(),
        classes=tuple(classes),
        pseudo_classes=tuple(pseudo),
    )


__all__ = [
    "Combinator",
    "Compound",
    "SUPPORTED_PSEUDO_CLASSES",
    "Selector",
    "StyledElement",
    "parse_selector",
]
