"""Rendering helpers for outcome banners, errors and order summaries."""

from __future__ import annotations

from rich.text import Text

from pizza_order.data import ordered_topping_ids, topping_text
from pizza_order.models import OrderFormState, SubmissionOutcome


def badge_style(kind: str) -> str:
    """Return a consistent badge style for outcome tags."""
    if kind == "failure":
        return "bold #ffffff on #b23a48"
    return "bold #0b1f0f on #5fbf72"


def format_outcome(outcome: SubmissionOutcome) -> Text:
    """Render the submission outcome with a colored tag, or nothing."""
    text = Text()
    if outcome.success:
        text.append(" OK ", style=badge_style("success"))
        text.append(f" {outcome.success}")
    elif outcome.failure:
        text.append(" ERR ", style=badge_style("failure"))
        text.append(f" {outcome.failure}")
    return text


def format_field_error(message: str | None) -> Text:
    if not message:
        return Text()
    return Text(message, style="#ffb3b3")


def format_order_summary(state: OrderFormState) -> Text:
    """Render a one-line summary of the current selection."""
    text = Text()
    if state.size:
        text.append(state.size, style=badge_style("success"))
        text.append(" ")
    text.append(state.full_name.strip() or "(no name yet)")
    topping_ids = ordered_topping_ids(state.toppings)
    if topping_ids:
        text.append("\n")
        for idx, topping_id in enumerate(topping_ids):
            if idx > 0:
                text.append(" ")
            text.append(f"[{topping_text(topping_id)}]", style="white")
    return text
