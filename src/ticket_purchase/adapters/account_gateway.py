"""Account service adapters."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class AccountGateway(Protocol):
    """Interface for account validation and balance lookups."""

    def is_valid(self, account_id: int) -> bool:
        """Return whether the account may make purchases."""

    def balance(self, account_id: int) -> int:
        """Return the current balance of the account."""


@dataclass
class StaticAccountGateway(AccountGateway):
    """Account gateway that accepts positive ids with a fixed balance."""

    fixed_balance: int = 400

    def is_valid(self, account_id: int) -> bool:
        return account_id > 0

    def balance(self, account_id: int) -> int:
        return self.fixed_balance


@dataclass
class HttpxAccountGateway(AccountGateway):
    """HTTPX-backed account service client."""

    base_url: str
    http_client: httpx.Client
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10
    ) -> "HttpxAccountGateway":
        """Create an account gateway with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.Client(),
            timeout_seconds=timeout_seconds,
        )

    def is_valid(self, account_id: int) -> bool:
        """Check the account exists and is active."""
        url = f"{self.base_url}/accounts/{account_id}"
        response = self.http_client.get(url, timeout=self.timeout_seconds)
        if response.status_code == httpx.codes.NOT_FOUND:
            return False
        response.raise_for_status()
        return True

    def balance(self, account_id: int) -> int:
        """Fetch the account balance."""
        url = f"{self.base_url}/accounts/{account_id}/balance"
        response = self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return int(response.json()["balance"])

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
