"""
Tests for the order form controller: field changes, toppings and submit flow.
"""

import asyncio

import httpx
import pytest

from pizza_order.constant import FAILURE_MESSAGE, FIELD_FULL_NAME, FIELD_SIZE, FIELD_TOPPINGS
from pizza_order.form import OrderForm
from pizza_order.models import OrderFormState


def fill(form, name="Alice Smith", size="M", toppings=()):
    form.change_field(FIELD_FULL_NAME, name)
    form.change_field(FIELD_SIZE, size)
    for topping_id in toppings:
        form.change_topping(topping_id, True)


class TestFieldChanges:
    def test_only_changed_field_gets_an_error(self, ok_client):
        form = OrderForm(ok_client)
        form.change_field(FIELD_FULL_NAME, "Al")
        assert form.errors == {FIELD_FULL_NAME: "Full name must be at least 3 characters"}

    def test_error_cleared_when_field_becomes_valid(self, ok_client):
        form = OrderForm(ok_client)
        form.change_field(FIELD_FULL_NAME, "Al")
        form.change_field(FIELD_FULL_NAME, "Alice")
        assert FIELD_FULL_NAME not in form.errors

    def test_size_error(self, ok_client):
        form = OrderForm(ok_client)
        form.change_field(FIELD_SIZE, "XL")
        assert form.errors == {FIELD_SIZE: "Size must be S or M or L"}

    def test_topping_toggle_pair_is_idempotent(self, ok_client):
        form = OrderForm(ok_client)
        form.change_topping("2", True)
        before = form.state.toppings
        form.change_topping("4", True)
        form.change_topping("4", False)
        assert form.state.toppings == before == frozenset({"2"})

    def test_toppings_have_no_count_rule(self, ok_client):
        form = OrderForm(ok_client)
        fill(form, toppings=["1", "2", "3", "4", "5"])
        assert form.errors == {}
        assert form.can_submit

    def test_check_twice_is_noop(self, ok_client):
        form = OrderForm(ok_client)
        form.change_topping("3", True)
        form.change_topping("3", True)
        assert form.state.toppings == frozenset({"3"})

    def test_uncheck_absent_is_noop(self, ok_client):
        form = OrderForm(ok_client)
        form.change_topping("1", True)
        form.change_topping("4", False)
        assert form.state.toppings == frozenset({"1"})

    @pytest.mark.asyncio
    async def test_unchecking_unknown_topping_clears_its_error(self, ok_client, ok_handler):
        form = OrderForm(ok_client)
        fill(form)
        form.change_topping("9", True)
        assert form.errors == {FIELD_TOPPINGS: "Unknown topping"}

        await form.submit()
        assert ok_handler.requests == []

        form.change_topping("9", False)
        assert form.errors == {}
        assert form.can_submit


class TestSubmitEnablement:
    def test_disabled_initially(self, ok_client):
        assert not OrderForm(ok_client).can_submit

    def test_disabled_without_size(self, ok_client):
        form = OrderForm(ok_client)
        form.change_field(FIELD_FULL_NAME, "Alice Smith")
        form.change_topping("1", True)
        assert not form.can_submit

    def test_disabled_without_name(self, ok_client):
        form = OrderForm(ok_client)
        form.change_field(FIELD_SIZE, "L")
        assert not form.can_submit

    def test_disabled_for_short_name(self, ok_client):
        form = OrderForm(ok_client)
        fill(form, name="Al")
        assert not form.can_submit

    def test_enabled_when_valid(self, ok_client):
        form = OrderForm(ok_client)
        fill(form)
        assert form.can_submit


class TestSubmit:
    @pytest.mark.asyncio
    async def test_short_name_is_blocked(self, ok_client, ok_handler):
        form = OrderForm(ok_client)
        fill(form, name="Al")

        outcome = await form.submit()

        assert outcome.failure == FAILURE_MESSAGE
        assert "must be at least 3 characters" in form.errors[FIELD_FULL_NAME]
        assert ok_handler.requests == []

    @pytest.mark.asyncio
    async def test_empty_form_reports_every_field(self, ok_client, ok_handler):
        form = OrderForm(ok_client)

        outcome = await form.submit()

        assert outcome.failure == FAILURE_MESSAGE
        assert set(form.errors) == {FIELD_FULL_NAME, FIELD_SIZE}
        assert ok_handler.requests == []

    @pytest.mark.asyncio
    async def test_success_shows_message_and_resets(self, ok_client, ok_handler):
        form = OrderForm(ok_client)
        fill(form, toppings=["1", "3"])

        outcome = await form.submit()

        assert outcome.success == "Order received"
        assert outcome.failure == ""
        assert form.state == OrderFormState()
        assert form.errors == {}
        assert not form.can_submit
        assert ok_handler.payloads == [{"fullName": "Alice Smith", "size": "M", "toppings": ["1", "3"]}]

    @pytest.mark.asyncio
    async def test_network_failure_keeps_fields(self, failing_client):
        form = OrderForm(failing_client)
        fill(form)
        before = form.state

        outcome = await form.submit()

        assert outcome.failure == FAILURE_MESSAGE
        assert outcome.success == ""
        assert form.state == before
        assert form.can_submit

    @pytest.mark.asyncio
    async def test_timeout_is_generic_failure(self, client_for, handler_for):
        form = OrderForm(client_for(handler_for(error=httpx.ReadTimeout("slow"))))
        fill(form)
        before = form.state

        outcome = await form.submit()

        assert outcome.failure == FAILURE_MESSAGE
        assert form.state == before

    @pytest.mark.asyncio
    async def test_outcome_cleared_on_next_attempt(self, client_for, handler_for):
        handler = handler_for(status_code=503, body={"message": "down"})
        form = OrderForm(client_for(handler))
        fill(form)
        await form.submit()
        assert form.outcome.failure == FAILURE_MESSAGE

        handler.status_code = 201
        handler.body = {"message": "Order received"}
        outcome = await form.submit()

        assert outcome.success == "Order received"
        assert outcome.failure == ""

    @pytest.mark.asyncio
    async def test_submit_uses_snapshot_and_ignores_double_submit(self):
        client = GatedClient()
        form = OrderForm(client)
        fill(form, toppings=["2"])

        first = asyncio.ensure_future(form.submit())
        await client.entered.wait()
        assert form.submitting
        assert not form.can_submit

        form.change_topping("5", True)
        second = await form.submit()
        client.release.set()
        outcome = await first

        assert second.is_empty
        assert outcome.success == "Order received"
        assert [payload.toppings for payload in client.payloads] == [("2",)]


class GatedClient:
    """Client stand-in that holds each request until released."""

    def __init__(self):
        self.entered = asyncio.Event()
        self.release = asyncio.Event()
        self.payloads = []

    async def submit_order(self, payload):
        self.payloads.append(payload)
        self.entered.set()
        await self.release.wait()
        return "Order received"
