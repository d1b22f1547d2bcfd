"""Entry point for the pizza-order Textual app."""

from __future__ import annotations

from pizza_order.logging_config import setup_logging
from pizza_order.pizza_app import PizzaOrderApp


def main() -> None:
    """Run the Textual application."""
    setup_logging()
    PizzaOrderApp().run()


if __name__ == "__main__":
    main()
