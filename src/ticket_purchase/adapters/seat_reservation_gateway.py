"""Seat reservation gateway adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class SeatReservationGateway(Protocol):
    """Interface for holding seats against an account."""

    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve seats for the account, raising on failure."""


@dataclass
class HttpxSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway implemented with httpx."""

    base_url: str
    http_client: httpx.Client
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10
    ) -> "HttpxSeatReservationGateway":
        """Create a seat reservation gateway with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.Client(),
            timeout_seconds=timeout_seconds,
        )

    def reserve(self, account_id: int, seat_count: int) -> None:
        url = f"{self.base_url}/reservations"
        payload: dict[str, object] = {
            "account_id": account_id,
            "seat_count": seat_count,
        }
        response = self.http_client.post(
            url, json=payload, timeout=self.timeout_seconds
        )
        response.raise_for_status()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
