"""
HTTP client for the order-intake endpoint.

Contract:
  Request:  POST <order url>  {"fullName": "...", "size": "M", "toppings": ["1", "3"]}
  Response: {"message": "..."}   (message is shown to the customer verbatim)
"""

from __future__ import annotations

import logging

import httpx

from pizza_order.config import ORDER_URL, REQUEST_TIMEOUT_SECONDS
from pizza_order.models import OrderPayload

logger = logging.getLogger(__name__)


class OrderSubmissionError(Exception):
    """Raised for any failure to place an order: transport, status or body."""


class OrderClient:
    def __init__(
        self,
        url: str = ORDER_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def submit_order(self, payload: OrderPayload) -> str:
        """Post an order and return the endpoint's confirmation message."""
        logger.info("POST %s toppings=%d", self.url, len(payload.toppings))
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(self.url, json=payload.as_json())
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPError as exc:
            raise OrderSubmissionError(f"order request failed: {exc}") from exc
        except ValueError as exc:
            raise OrderSubmissionError("order response is not JSON") from exc

        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, str):
            raise OrderSubmissionError("order response has no message")
        logger.info("order accepted status=%d", resp.status_code)
        return message
