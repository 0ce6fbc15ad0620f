"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field

import pytest

from ticket_purchase.adapters.account_gateway import AccountGateway
from ticket_purchase.adapters.payment_gateway import PaymentGateway
from ticket_purchase.adapters.seat_reservation_gateway import SeatReservationGateway
from ticket_purchase.app_logging import LOGGER_NAME
from ticket_purchase.config import Settings
from ticket_purchase.containers import AppContainer
from ticket_purchase.services.purchases import TicketService


@dataclass
class InMemoryAccountGateway(AccountGateway):
    """Account gateway with configurable validity and balance."""

    invalid_ids: set[int] = field(default_factory=set)
    balances: dict[int, int] = field(default_factory=dict)
    default_balance: int = 400
    error: Exception | None = None
    balance_error: Exception | None = None
    validated: list[int] = field(default_factory=list)
    balance_checks: list[int] = field(default_factory=list)

    def is_valid(self, account_id: int) -> bool:
        self.validated.append(account_id)
        if self.error is not None:
            raise self.error
        return account_id not in self.invalid_ids

    def balance(self, account_id: int) -> int:
        self.balance_checks.append(account_id)
        if self.balance_error is not None:
            raise self.balance_error
        return self.balances.get(account_id, self.default_balance)


@dataclass
class RecordingPaymentGateway(PaymentGateway):
    """Payment gateway that records charges."""

    charges: list[tuple[int, int]] = field(default_factory=list)
    error: Exception | None = None

    def charge(self, account_id: int, amount: int) -> None:
        if self.error is not None:
            raise self.error
        self.charges.append((account_id, amount))


@dataclass
class RecordingSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that records reservations."""

    reservations: list[tuple[int, int]] = field(default_factory=list)
    error: Exception | None = None

    def reserve(self, account_id: int, seat_count: int) -> None:
        if self.error is not None:
            raise self.error
        self.reservations.append((account_id, seat_count))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        payment_service_url="https://payments.test/",
        seat_reservation_service_url="https://seats.test",
    )


@pytest.fixture
def account_gateway() -> InMemoryAccountGateway:
    return InMemoryAccountGateway()


@pytest.fixture
def payment_gateway() -> RecordingPaymentGateway:
    return RecordingPaymentGateway()


@pytest.fixture
def seat_reservation_gateway() -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway()


@pytest.fixture
def ticket_service(
    account_gateway: InMemoryAccountGateway,
    payment_gateway: RecordingPaymentGateway,
    seat_reservation_gateway: RecordingSeatReservationGateway,
) -> TicketService:
    return TicketService(
        account_gateway=account_gateway,
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
    )


@pytest.fixture
def container(
    settings: Settings,
    account_gateway: InMemoryAccountGateway,
    payment_gateway: RecordingPaymentGateway,
    seat_reservation_gateway: RecordingSeatReservationGateway,
    ticket_service: TicketService,
) -> AppContainer:
    def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        account_gateway=account_gateway,
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
        ticket_service=ticket_service,
        close_resources=close_resources,
    )


@pytest.fixture
def purchase_logs(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> pytest.LogCaptureFixture:
    """Capture package log records even after the app disabled propagation."""
    monkeypatch.setattr(logging.getLogger(LOGGER_NAME), "propagate", True)
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    return caplog
