"""
The pharmacy benefit engine — one simulated day per call.

Rules compare against expires_in AFTER it has been decremented.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from pharmacy.models import (
    BENEFIT_VARIATION,
    DAFALGAN,
    FERVEX,
    FERVEX_DOUBLE_THRESHOLD,
    FERVEX_TRIPLE_THRESHOLD,
    HERBAL_TEA,
    MAGIC_PILL,
    MAX_BENEFIT,
    MIN_BENEFIT,
    Item,
    Number,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Rule:
    """A named update step; ``clamped=False`` skips the benefit clamp."""
    name: str
    apply: Callable[[Item], Item]
    clamped: bool = True


def _update_default(item: Item) -> Item:
    item.expires_in -= 1
    item.benefit -= BENEFIT_VARIATION
    # Degrades twice as fast once expired
    if item.expires_in < 0:
        item.benefit -= BENEFIT_VARIATION
    return item


def _update_herbal_tea(item: Item) -> Item:
    item.expires_in -= 1
    item.benefit += BENEFIT_VARIATION
    if item.expires_in < 0:
        item.benefit += BENEFIT_VARIATION
    return item


def _update_magic_pill(item: Item) -> Item:
    # Never expires, never changes
    return item


def _update_fervex(item: Item) -> Item:
    item.expires_in -= 1
    item.benefit += BENEFIT_VARIATION
    if item.expires_in < FERVEX_DOUBLE_THRESHOLD:
        item.benefit += BENEFIT_VARIATION
    if item.expires_in < FERVEX_TRIPLE_THRESHOLD:
        item.benefit += BENEFIT_VARIATION
    # Worthless after expiry, whatever was added above
    if item.expires_in < 0:
        item.benefit = 0
    return item


def _update_dafalgan(item: Item) -> Item:
    item.expires_in -= 1
    item.benefit -= BENEFIT_VARIATION * 2
    if item.expires_in < 0:
        item.benefit -= BENEFIT_VARIATION * 2
    return item


DEFAULT_RULE = Rule("default", _update_default)

RULES: Dict[str, Rule] = {
    HERBAL_TEA: Rule(HERBAL_TEA, _update_herbal_tea),
    MAGIC_PILL: Rule(MAGIC_PILL, _update_magic_pill, clamped=False),
    FERVEX:     Rule(FERVEX, _update_fervex),
    DAFALGAN:   Rule(DAFALGAN, _update_dafalgan),
}


def rule_for(name: str) -> Rule:
    """Exact-match lookup; unknown names get the default rule."""
    return RULES.get(name, DEFAULT_RULE)


def clamp_benefit(value: Number) -> Number:
    return max(MIN_BENEFIT, min(MAX_BENEFIT, value))


# ---------------------------------------------------------------------------
# Daily update
# ---------------------------------------------------------------------------
def update(items: Iterable[Item]) -> List[Item]:
    """Advance every item by one day; items are mutated in place, order kept."""
    updated: List[Item] = []
    for item in items:
        rule = rule_for(item.name)
        before = (item.expires_in, item.benefit)
        item = rule.apply(item)
        if rule.clamped:
            item.benefit = clamp_benefit(item.benefit)
        logger.debug(
            "Updated %r via %s rule: (%d, %s) -> (%d, %s)",
            item.name, rule.name, before[0], before[1],
            item.expires_in, item.benefit,
        )
        updated.append(item)

    logger.info("Daily update applied to %d items", len(updated))
    return updated


class Pharmacy:
    """Holds the shelf and advances it one day at a time."""

    def __init__(self, drugs: Iterable[Item] = ()) -> None:
        self.drugs: List[Item] = list(drugs)

    def update_benefit_value(self) -> List[Item]:
        self.drugs = update(self.drugs)
        return self.drugs
