"""Order form controller, independent of any widget toolkit."""

from __future__ import annotations

import logging

from pizza_order.client import OrderClient, OrderSubmissionError
from pizza_order.constant import FAILURE_MESSAGE, FIELD_TOPPINGS
from pizza_order.models import OrderFormState, SubmissionOutcome
from pizza_order.validation import can_submit, is_form_valid, validate_field, validate_form

logger = logging.getLogger(__name__)


class OrderForm:
    """Field state, errors and submission outcome of one pizza order form.

    ``state`` is replaced, never mutated. Every replacement recomputes the
    overall validity flag that drives submit-button enablement.
    """

    def __init__(self, client: OrderClient | None = None) -> None:
        self.client = client or OrderClient()
        self.state = OrderFormState()
        self.errors: dict[str, str] = {}
        self.outcome = SubmissionOutcome.empty()
        self.valid = False
        self.submitting = False

    @property
    def can_submit(self) -> bool:
        return self.valid and not self.submitting and can_submit(self.state, self.errors)

    def change_field(self, name: str, value: str) -> None:
        """Apply a text or select change and validate that field only."""
        self._replace_state(self.state.with_field(name, value))
        message = validate_field(name, value)
        if message is None:
            self.errors.pop(name, None)
        else:
            self.errors[name] = message

    def change_topping(self, topping_id: str, checked: bool) -> None:
        self._replace_state(self.state.with_topping(topping_id, checked))
        message = validate_field(FIELD_TOPPINGS, sorted(self.state.toppings))
        if message is None:
            self.errors.pop(FIELD_TOPPINGS, None)
        else:
            self.errors[FIELD_TOPPINGS] = message

    def reset(self) -> None:
        self.errors = {}
        self._replace_state(OrderFormState())

    async def submit(self) -> SubmissionOutcome:
        """Validate the whole form and post it, returning the outcome."""
        if self.submitting:
            logger.debug("submit_blocked reason=in_flight")
            return self.outcome

        self.outcome = SubmissionOutcome.empty()
        snapshot = self.state
        errors = validate_form(snapshot)
        if errors:
            self.errors = errors
            self.outcome = SubmissionOutcome.failed(FAILURE_MESSAGE)
            logger.info("submit_invalid fields=%s", sorted(errors))
            return self.outcome

        self.submitting = True
        try:
            message = await self.client.submit_order(snapshot.to_payload())
        except OrderSubmissionError as exc:
            self.outcome = SubmissionOutcome.failed(FAILURE_MESSAGE)
            logger.warning("submit_failed error=%s", exc)
            return self.outcome
        finally:
            self.submitting = False

        self.outcome = SubmissionOutcome.succeeded(message)
        self.reset()
        logger.info("submit_succeeded")
        return self.outcome

    def _replace_state(self, state: OrderFormState) -> None:
        self.state = state
        self.valid = is_form_valid(state)
