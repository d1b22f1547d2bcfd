"""Schema validation for the order form.

The schema is declared once with pydantic. Field-level checks reuse the same
annotated types through ``TypeAdapter`` so a single field can be validated on
change without building a whole order.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

from pizza_order.constant import (
    FIELD_FULL_NAME,
    FIELD_SIZE,
    FIELD_TOPPINGS,
    FULL_NAME_MAX_LENGTH,
    FULL_NAME_MIN_LENGTH,
    SIZE_CHOICES,
    VALIDATION_ERRORS,
)
from pizza_order.data import is_known_topping
from pizza_order.models import OrderFormState

logger = logging.getLogger(__name__)


def _check_full_name(value: str) -> str:
    trimmed = value.strip()
    if len(trimmed) < FULL_NAME_MIN_LENGTH:
        raise PydanticCustomError("full_name_too_short", VALIDATION_ERRORS["full_name_too_short"])
    if len(trimmed) > FULL_NAME_MAX_LENGTH:
        raise PydanticCustomError("full_name_too_long", VALIDATION_ERRORS["full_name_too_long"])
    return trimmed


def _check_size(value: str) -> str:
    if value not in SIZE_CHOICES:
        raise PydanticCustomError("size_incorrect", VALIDATION_ERRORS["size_incorrect"])
    return value


def _check_topping(value: str) -> str:
    if not is_known_topping(value):
        raise PydanticCustomError("topping_unknown", VALIDATION_ERRORS["topping_unknown"])
    return value


FullName = Annotated[str, AfterValidator(_check_full_name)]
Size = Annotated[str, AfterValidator(_check_size)]
ToppingId = Annotated[str, AfterValidator(_check_topping)]


class PizzaOrderSchema(BaseModel):
    """Validated pizza order, keyed by the form field names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: FullName = Field(alias=FIELD_FULL_NAME)
    size: Size = Field(alias=FIELD_SIZE)
    toppings: list[ToppingId] = Field(default_factory=list, alias=FIELD_TOPPINGS)


_FIELD_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    FIELD_FULL_NAME: TypeAdapter(FullName),
    FIELD_SIZE: TypeAdapter(Size),
    FIELD_TOPPINGS: TypeAdapter(list[ToppingId]),
}


def _form_input(state: OrderFormState) -> dict[str, Any]:
    return {
        FIELD_FULL_NAME: state.full_name,
        FIELD_SIZE: state.size,
        FIELD_TOPPINGS: sorted(state.toppings),
    }


def _errors_by_field(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("",)
        # First violation per field wins, like the inline error slot shows one line.
        errors.setdefault(str(loc[0]), error["msg"])
    return errors


def validate_field(name: str, value: Any) -> str | None:
    """Validate one field against its rule, returning the message or None."""
    adapter = _FIELD_ADAPTERS.get(name)
    if adapter is None:
        raise KeyError(f"unknown form field: {name}")
    try:
        adapter.validate_python(value)
    except ValidationError as exc:
        return exc.errors()[0]["msg"]
    return None


def validate_form(state: OrderFormState) -> dict[str, str]:
    """Validate the whole form and return every violated rule by field."""
    try:
        PizzaOrderSchema.model_validate(_form_input(state))
    except ValidationError as exc:
        errors = _errors_by_field(exc)
        logger.debug("form invalid fields=%s", sorted(errors))
        return errors
    return {}


def is_form_valid(state: OrderFormState) -> bool:
    return not validate_form(state)


def can_submit(state: OrderFormState, errors: Mapping[str, str]) -> bool:
    """Submit is allowed only with no errors and both required fields filled."""
    return not errors and state.is_populated
