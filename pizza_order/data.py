"""Static topping catalog data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pizza_order.constant import TOPPING_TEXT_BY_ID


@dataclass(frozen=True)
class Topping:
    """A selectable pizza add-on."""

    topping_id: str
    text: str


TOPPINGS: tuple[Topping, ...] = tuple(
    Topping(topping_id, text) for topping_id, text in TOPPING_TEXT_BY_ID.items()
)

TOPPING_BY_ID: dict[str, Topping] = {topping.topping_id: topping for topping in TOPPINGS}


def is_known_topping(topping_id: str) -> bool:
    return topping_id in TOPPING_BY_ID


def topping_text(topping_id: str) -> str:
    """Get display text for a topping id."""
    topping = TOPPING_BY_ID.get(topping_id)
    if topping is None:
        return topping_id
    return topping.text


def ordered_topping_ids(topping_ids: Iterable[str]) -> tuple[str, ...]:
    """Return the given ids in catalog order, unknown ids last in sorted order."""
    wanted = set(topping_ids)
    known = [topping.topping_id for topping in TOPPINGS if topping.topping_id in wanted]
    unknown = sorted(wanted - set(TOPPING_BY_ID))
    return tuple(known + unknown)
