"""Ordered rule collection and per-node cascade."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from cellui.css.parser import parse_rules
from cellui.css.property import CssProperty, ResolvedProperty
from cellui.css.selector import Selector, StyledElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CssRule:
    selector: Selector
    property: CssProperty


class StyleSheet:
    """Rules kept in ascending selector-text length; later rules win on conflict.

    Equal lengths keep source order, so the cascade is deterministic for a
    given stylesheet text.
    """

    def __init__(self, rules: Iterable[CssRule] = ()) -> None:
        self._rules = tuple(sorted(rules, key=lambda rule: len(rule.selector.text)))

    @classmethod
    def parse(cls, source: str) -> StyleSheet:
        rules = [CssRule(selector, prop) for selector, prop in parse_rules(source)]
        logger.debug("stylesheet_parsed rules=%d", len(rules))
        return cls(rules)

    @property
    def rules(self) -> tuple[CssRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def calc_prop(self, element: StyledElement) -> CssProperty:
        """Fold every matching rule, in order, into one property set."""
        prop = CssProperty()
        for rule in self._rules:
            if rule.selector.matches(element):
                prop = prop.combine(rule.property)
        return prop

    def resolve(self, element: StyledElement, parent: ResolvedProperty) -> ResolvedProperty:
        """Cascade for `element`, then resolve against its parent's values."""
        return self.calc_prop(element).calc(parent)


__all__ = ["CssRule", "StyleSheet"]
