"""Tests for HTTP-based gateway adapters."""

import json

import httpx
import pytest

from ticket_purchase.adapters.account_gateway import (
    HttpxAccountGateway,
    StaticAccountGateway,
)
from ticket_purchase.adapters.payment_gateway import HttpxPaymentGateway
from ticket_purchase.adapters.seat_reservation_gateway import (
    HttpxSeatReservationGateway,
)


def test_static_account_gateway() -> None:
    gateway = StaticAccountGateway()

    assert gateway.is_valid(1)
    assert not gateway.is_valid(0)
    assert not gateway.is_valid(-5)
    assert gateway.balance(0) == 400


def test_account_gateway_validity_and_balance() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/accounts/404":
            return httpx.Response(404)
        if request.url.path.endswith("/balance"):
            return httpx.Response(200, json={"balance": 250})
        return httpx.Response(200, json={"id": 7})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    gateway = HttpxAccountGateway(base_url="https://accounts.test", http_client=client)

    assert gateway.is_valid(7)
    assert not gateway.is_valid(404)
    assert gateway.balance(7) == 250


def test_account_gateway_raises_on_server_error() -> None:
    client = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(503))
    )
    gateway = HttpxAccountGateway(base_url="https://accounts.test", http_client=client)

    with pytest.raises(httpx.HTTPStatusError):
        gateway.is_valid(7)


def test_payment_gateway_posts_charge() -> None:
    payloads: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/payments"
        payloads.append(json.loads(request.content.decode()))
        return httpx.Response(201, json={"status": "accepted"})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    gateway = HttpxPaymentGateway(base_url="https://payments.test", http_client=client)

    gateway.charge(345678, 150)

    assert payloads == [{"account_id": 345678, "amount": 150}]


def test_payment_gateway_raises_on_rejection() -> None:
    client = httpx.Client(
        transport=httpx.MockTransport(
            lambda request: httpx.Response(402, json={"error": "declined"})
        )
    )
    gateway = HttpxPaymentGateway(base_url="https://payments.test", http_client=client)

    with pytest.raises(httpx.HTTPStatusError):
        gateway.charge(1, 20)


def test_seat_reservation_gateway_posts_reservation() -> None:
    payloads: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/reservations"
        payloads.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    gateway = HttpxSeatReservationGateway(
        base_url="https://seats.test", http_client=client
    )

    gateway.reserve(345678, 10)
    gateway.close()

    assert payloads == [{"account_id": 345678, "seat_count": 10}]


def test_seat_reservation_gateway_raises_on_rejection() -> None:
    client = httpx.Client(
        transport=httpx.MockTransport(
            lambda request: httpx.Response(409, json={"error": "sold out"})
        )
    )
    gateway = HttpxSeatReservationGateway(
        base_url="https://seats.test", http_client=client
    )

    with pytest.raises(httpx.HTTPStatusError):
        gateway.reserve(1, 4)
