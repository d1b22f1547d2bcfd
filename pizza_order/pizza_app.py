"""Main Textual app class."""

from __future__ import annotations

import logging

from textual.app import App

from pizza_order.client import OrderClient
from pizza_order.form import OrderForm
from pizza_order.home_screen import HomeScreen
from pizza_order.order_screen import OrderScreen

logger = logging.getLogger(__name__)


class PizzaOrderApp(App):
    """A Textual app for ordering a pizza."""

    TITLE = "Bloom Pizza"
    SUB_TITLE = "Order online"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, client: OrderClient | None = None) -> None:
        super().__init__()
        self.client = client or OrderClient()

    def on_mount(self) -> None:
        logger.info("app_mount order_url=%s", self.client.url)
        self.install_screen(HomeScreen(), name="home")
        self.install_screen(OrderScreen(OrderForm(self.client)), name="order")
        self.push_screen("home")
