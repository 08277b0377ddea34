"""Pytest fixtures: YooKassa client wired to an in-process httpx.MockTransport."""
import json
from typing import Callable, List, Tuple

import httpx
import pytest

from yookassa_connect.providers.yookassa.adapter import YooKassaClient

SHOP_ID = "shop-1"
SECRET_KEY = "test_secret-key"
BASE_URL = "https://api.yookassa.test/v3"
PAYMENT_ID = "2d9fa1b4-000f-5000-9000-1b7a4e4c5f36"


def payment_json(**overrides) -> dict:
    data = {
        "id": PAYMENT_ID,
        "status": "pending",
        "paid": False,
        "amount": {"value": "100.00", "currency": "RUB"},
        "description": "Услуга",
        "created_at": "2026-10-18T10:15:00.000Z",
        "confirmation": {
            "type": "redirect",
            "confirmation_url": "https://yoomoney.ru/checkout/payments/v2/contract?orderId=2d9fa1b4",
        },
        "test": True,
        "refundable": False,
        "metadata": {},
    }
    data.update(overrides)
    return data


def json_response(status_code: int, data) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(data).encode("utf-8"),
                          headers={"Content-Type": "application/json"})


@pytest.fixture
def make_client() -> Callable[..., Tuple[YooKassaClient, List[httpx.Request]]]:
    """
    make_client(handler) -> (client, requests)
    handler(request) returns httpx.Response; every request is recorded.
    """

    def _make(handler):
        requests: List[httpx.Request] = []

        async def _handle(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        transport = httpx.MockTransport(_handle)
        c = YooKassaClient(SHOP_ID, SECRET_KEY, base_url=BASE_URL, timeout_sec=5, transport=transport)
        return c, requests

    return _make


@pytest.fixture
def ok_client(make_client):
    """Client whose gateway answers 200 with a pending payment."""
    return make_client(lambda request: json_response(200, payment_json()))
