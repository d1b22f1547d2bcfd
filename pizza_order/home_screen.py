"""Home screen with the order call-to-action."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Click
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Header, Static

logger = logging.getLogger(__name__)

PIZZA_ART = r"""
      _....._
   .-'  o  .  '-.
  /  .   ()   o  \
 ;  o  .    ()  . ;
 |  ()  o  .   o  |
 ;  .   ()   o  . ;
  \  o   .  ()   /
   '-._  o  _.-'
       '''''
  Click to order
"""


class PizzaArt(Static, can_focus=True):
    """Clickable pizza picture that asks for the order page."""

    BINDINGS = [("enter", "select", "Order")]

    class Selected(Message):
        """Posted when the customer picks the pizza."""

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_select()

    def action_select(self) -> None:
        self.post_message(self.Selected())


class HomeScreen(Screen[None]):
    """Static landing page; its only action is moving to the order screen."""

    CSS = """
    HomeScreen {
        align: center middle;
    }

    #home-dialog {
        width: 40;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    #home-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #order-pizza {
        color: #f2b84b;
    }

    #order-pizza:focus {
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="home-dialog"):
            yield Static("Welcome to Bloom Pizza!", id="home-title")
            yield PizzaArt(PIZZA_ART, id="order-pizza")

    def on_mount(self) -> None:
        self.query_one("#order-pizza", PizzaArt).focus()

    def on_pizza_art_selected(self, event: PizzaArt.Selected) -> None:
        logger.info("navigate to=order")
        self.app.push_screen("order")
