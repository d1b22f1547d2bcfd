"""Editable static topping, size and message configuration."""

from __future__ import annotations

# Raw topping catalog, wrapped by pizza_order.data.
TOPPING_TEXT_BY_ID: dict[str, str] = {
    "1": "Pepperoni",
    "2": "Green Peppers",
    "3": "Pineapple",
    "4": "Mushrooms",
    "5": "Ham",
}

SIZE_CHOICES: tuple[str, ...] = ("S", "M", "L")

SIZE_PROMPT = "----Choose Size----"

FULL_NAME_MIN_LENGTH = 3
FULL_NAME_MAX_LENGTH = 20

VALIDATION_ERRORS: dict[str, str] = {
    "full_name_too_short": f"Full name must be at least {FULL_NAME_MIN_LENGTH} characters",
    "full_name_too_long": f"Full name must be at most {FULL_NAME_MAX_LENGTH} characters",
    "size_incorrect": "Size must be S or M or L",
    "topping_unknown": "Unknown topping",
}

FAILURE_MESSAGE = "Something went wrong"

# Form field names, matching the keys of the order request body.
FIELD_FULL_NAME = "fullName"
FIELD_SIZE = "size"
FIELD_TOPPINGS = "toppings"
