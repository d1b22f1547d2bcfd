"""Domain models for pizza-order."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pizza_order.constant import FIELD_FULL_NAME, FIELD_SIZE
from pizza_order.data import ordered_topping_ids


@dataclass(frozen=True)
class OrderPayload:
    """The request body sent to the order endpoint."""

    full_name: str
    size: str
    toppings: tuple[str, ...] = ()

    def as_json(self) -> dict[str, Any]:
        return {
            "fullName": self.full_name,
            "size": self.size,
            "toppings": list(self.toppings),
        }


@dataclass(frozen=True)
class OrderFormState:
    """Field values of the order form.

    Instances are never mutated: every change produces a new record, so a
    submission always works on a consistent snapshot.
    """

    full_name: str = ""
    size: str = ""
    toppings: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_populated(self) -> bool:
        """True when both required fields hold a value."""
        return bool(self.full_name.strip()) and bool(self.size)

    def with_field(self, name: str, value: str) -> OrderFormState:
        if name == FIELD_FULL_NAME:
            return replace(self, full_name=value)
        if name == FIELD_SIZE:
            return replace(self, size=value)
        raise KeyError(f"unknown form field: {name}")

    def with_topping(self, topping_id: str, checked: bool) -> OrderFormState:
        if checked:
            return replace(self, toppings=self.toppings | {topping_id})
        return replace(self, toppings=self.toppings - {topping_id})

    def to_payload(self) -> OrderPayload:
        return OrderPayload(
            full_name=self.full_name.strip(),
            size=self.size,
            toppings=ordered_topping_ids(self.toppings),
        )


@dataclass(frozen=True)
class SubmissionOutcome:
    """Success or failure message shown after a submit attempt."""

    success: str = ""
    failure: str = ""

    @classmethod
    def empty(cls) -> SubmissionOutcome:
        return cls()

    @classmethod
    def succeeded(cls, message: str) -> SubmissionOutcome:
        return cls(success=message)

    @classmethod
    def failed(cls, message: str) -> SubmissionOutcome:
        return cls(failure=message)

    @property
    def is_empty(self) -> bool:
        return not self.success and not self.failure
