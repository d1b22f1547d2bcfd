"""Order form screen."""

from __future__ import annotations

import logging

from textual import work
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Checkbox, Header, Input, Select, Static

from pizza_order.constant import FIELD_FULL_NAME, FIELD_SIZE, SIZE_CHOICES, SIZE_PROMPT
from pizza_order.data import TOPPINGS
from pizza_order.form import OrderForm
from pizza_order.rendering import format_field_error, format_order_summary, format_outcome

logger = logging.getLogger(__name__)

_TOPPING_ID_PREFIX = "topping-"


def topping_widget_id(topping_id: str) -> str:
    return f"{_TOPPING_ID_PREFIX}{topping_id}"


class OrderScreen(Screen[None]):
    """Pizza order form bound to an OrderForm controller."""

    BINDINGS = [
        ("escape", "go_home", "Home"),
    ]

    CSS = """
    #order-form {
        width: 60;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #order-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .input-group {
        height: auto;
        margin-bottom: 1;
    }

    .error {
        color: #ffb3b3;
    }

    #outcome {
        margin-bottom: 1;
    }

    #summary {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, form: OrderForm) -> None:
        super().__init__()
        self.form = form

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="order-form"):
            yield Static("Order Your Pizza", id="order-title")
            yield Static(id="outcome")
            with Vertical(classes="input-group"):
                yield Static("Full Name")
                yield Input(placeholder="Type full name", id=FIELD_FULL_NAME)
                yield Static(id=f"{FIELD_FULL_NAME}-error", classes="error")
            with Vertical(classes="input-group"):
                yield Static("Size")
                yield Select([(size, size) for size in SIZE_CHOICES], prompt=SIZE_PROMPT, id=FIELD_SIZE)
                yield Static(id=f"{FIELD_SIZE}-error", classes="error")
            with Vertical(classes="input-group", id="toppings"):
                for topping in TOPPINGS:
                    yield Checkbox(topping.text, id=topping_widget_id(topping.topping_id))
            yield Button("Submit", id="submit", variant="primary", disabled=True)
            yield Static(id="summary")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != FIELD_FULL_NAME:
            return
        # Echoes of programmatic resets carry the value we already hold.
        if event.value == self.form.state.full_name:
            return
        self.form.change_field(FIELD_FULL_NAME, event.value)
        self._refresh_content()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.form.can_submit:
            self.submit_order()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != FIELD_SIZE:
            return
        size = event.value if isinstance(event.value, str) else ""
        if size == self.form.state.size:
            return
        self.form.change_field(FIELD_SIZE, size)
        self._refresh_content()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        widget_id = event.checkbox.id or ""
        if not widget_id.startswith(_TOPPING_ID_PREFIX):
            return
        self.form.change_topping(widget_id[len(_TOPPING_ID_PREFIX) :], event.value)
        self._refresh_content()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "submit":
            self.submit_order()

    def action_go_home(self) -> None:
        logger.info("navigate to=home")
        self.app.pop_screen()

    @work(exclusive=True, group="submit")
    async def submit_order(self) -> None:
        self.query_one("#submit", Button).disabled = True
        outcome = await self.form.submit()
        if outcome.success:
            self._reset_widgets()
        self._refresh_content()

    def _reset_widgets(self) -> None:
        with self.prevent(Input.Changed, Select.Changed, Checkbox.Changed):
            self.query_one(f"#{FIELD_FULL_NAME}", Input).value = ""
            self.query_one(f"#{FIELD_SIZE}", Select).clear()
            for checkbox in self.query(Checkbox):
                checkbox.value = False

    def _refresh_content(self) -> None:
        self.query_one("#outcome", Static).update(format_outcome(self.form.outcome))
        for name in (FIELD_FULL_NAME, FIELD_SIZE):
            self.query_one(f"#{name}-error", Static).update(format_field_error(self.form.errors.get(name)))
        self.query_one("#summary", Static).update(format_order_summary(self.form.state))
        self.query_one("#submit", Button).disabled = not self.form.can_submit
