"""Ticket payment gateway adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class PaymentGateway(Protocol):
    """Interface for debiting an account."""

    def charge(self, account_id: int, amount: int) -> None:
        """Debit the amount from the account, raising on failure."""


@dataclass
class HttpxPaymentGateway(PaymentGateway):
    """Payment gateway implemented with httpx."""

    base_url: str
    http_client: httpx.Client
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10
    ) -> "HttpxPaymentGateway":
        """Create a payment gateway with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.Client(),
            timeout_seconds=timeout_seconds,
        )

    def charge(self, account_id: int, amount: int) -> None:
        """Submit a payment for the account."""
        url = f"{self.base_url}/payments"
        payload: dict[str, object] = {"account_id": account_id, "amount": amount}
        response = self.http_client.post(
            url, json=payload, timeout=self.timeout_seconds
        )
        response.raise_for_status()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
