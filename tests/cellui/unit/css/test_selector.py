from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from cellui.css.selector import Combinator, parse_selector


@dataclass
class FakeElement:
    tag: str
    classes: tuple[str, ...] = ()
    pseudo: tuple[str, ...] = ()
    parent: FakeElement | None = None
    prev: FakeElement | None = None
    children: list[FakeElement] = field(default_factory=list)

    def tag_name(self) -> str:
        return self.tag

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def has_pseudo_class(self, name: str) -> bool:
        return name in self.pseudo

    def parent_element(self) -> FakeElement | None:
        return self.parent

    def prev_sibling_element(self) -> FakeElement | None:
        return self.prev


def _tree() -> tuple[FakeElement, FakeElement, FakeElement, FakeElement]:
    body = FakeElement("body")
    menu = FakeElement("div", classes=("menu",), parent=body)
    first = FakeElement("button", parent=menu)
    second = FakeElement("button", pseudo=("focus",), parent=menu, prev=first)
    return body, menu, first, second


def test_canonical_text_normalizes_spacing() -> None:
    assert parse_selector("div>.a").text == "div > .a"
    assert parse_selector("  body   div ").text == "body div"
    assert parse_selector("*").text == "*"
    assert parse_selector("button+button:focus").combinators == (Combinator.ADJACENT,)


def test_compound_matching() -> None:
    _, menu, first, second = _tree()
    assert parse_selector("div.menu").matches(menu)
    assert not parse_selector("div.other").matches(menu)
    assert parse_selector(":focus").matches(second)
    assert not parse_selector("button:focus").matches(first)


def test_combinators_walk_the_tree() -> None:
    _, _, first, second = _tree()
    assert parse_selector("body button").matches(second)
    assert parse_selector(".menu > button").matches(first)
    assert not parse_selector("body > button").matches(first)
    assert parse_selector("button + button").matches(second)
    assert not parse_selector("button + button").matches(first)


def test_descendant_match_backtracks_past_near_ancestor() -> None:
    outer = FakeElement("div", classes=("a",))
    middle = FakeElement("div", parent=outer)
    inner = FakeElement("div", parent=middle)
    leaf = FakeElement("button", parent=inner)
    assert parse_selector(".a > div button").matches(leaf)
    assert not parse_selector(".a > div > button").matches(leaf)


@pytest.mark.parametrize("raw", ["", "div >", "> div", "div > > p", "#id", "a[href]", "a ~ b", "a:active"])
def test_unsupported_selectors_raise(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_selector(raw)
