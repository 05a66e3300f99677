"""
Data models for the pharmacy benefit engine.

An Item is a named drug with a day counter until expiry and a benefit score.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Union


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
MIN_BENEFIT: int = 0
MAX_BENEFIT: int = 50
BENEFIT_VARIATION: int = 1

FERVEX_DOUBLE_THRESHOLD: int = 10             # expires_in < 10 → +2/day
FERVEX_TRIPLE_THRESHOLD: int = 5              # expires_in < 5  → +3/day


# ---------------------------------------------------------------------------
# Registered drug names (exact, case-sensitive)
# ---------------------------------------------------------------------------
HERBAL_TEA = "Herbal Tea"
MAGIC_PILL = "Magic Pill"
FERVEX     = "Fervex"
DAFALGAN   = "Dafalgan"


Number = Union[int, float]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Item
# ---------------------------------------------------------------------------
@dataclass(slots=True)
class Item:
    """A single drug on the shelf."""

    name:       str
    expires_in: int                           # days left; negative once expired
    benefit:    Number

    def __setattr__(self, key: str, value: Any) -> None:
        # name is the rule key; it is set once by __init__
        if key == "name" and hasattr(self, "name"):
            raise dataclasses.FrozenInstanceError("cannot assign to field 'name'")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        if key == "name":
            raise dataclasses.FrozenInstanceError("cannot delete field 'name'")
        object.__delattr__(self, key)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"name must be str, got {type(self.name).__name__}")
        if not isinstance(self.expires_in, int) or isinstance(self.expires_in, bool):
            raise TypeError(
                f"expires_in must be int, got {type(self.expires_in).__name__}"
            )
        if not _is_number(self.benefit):
            raise TypeError(
                f"benefit must be int or float, got {type(self.benefit).__name__}"
            )

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Item":
        return Item(
            name=d["name"],
            expires_in=d["expires_in"],
            benefit=d["benefit"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


def make_item(name: str, expires_in: int, benefit: Number) -> Item:
    return Item(name=name, expires_in=expires_in, benefit=benefit)
