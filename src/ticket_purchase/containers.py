"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from ticket_purchase.adapters.account_gateway import (
    AccountGateway,
    HttpxAccountGateway,
    StaticAccountGateway,
)
from ticket_purchase.adapters.payment_gateway import HttpxPaymentGateway, PaymentGateway
from ticket_purchase.adapters.seat_reservation_gateway import (
    HttpxSeatReservationGateway,
    SeatReservationGateway,
)
from ticket_purchase.config import Settings
from ticket_purchase.services.purchases import TicketService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    account_gateway: AccountGateway
    payment_gateway: PaymentGateway
    seat_reservation_gateway: SeatReservationGateway
    ticket_service: TicketService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timeout = resolved_settings.http_timeout_seconds

    account_gateway: AccountGateway
    http_account_gateway: HttpxAccountGateway | None = None
    if resolved_settings.account_service_url is None:
        account_gateway = StaticAccountGateway(
            fixed_balance=resolved_settings.static_account_balance
        )
    else:
        http_account_gateway = HttpxAccountGateway.create(
            resolved_settings.account_service_url, timeout
        )
        account_gateway = http_account_gateway

    payment_gateway = HttpxPaymentGateway.create(
        resolved_settings.payment_service_url, timeout
    )
    seat_reservation_gateway = HttpxSeatReservationGateway.create(
        resolved_settings.seat_reservation_service_url, timeout
    )
    ticket_service = TicketService(
        account_gateway=account_gateway,
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
    )

    def close_resources() -> None:
        if http_account_gateway is not None:
            http_account_gateway.close()
        payment_gateway.close()
        seat_reservation_gateway.close()

    return AppContainer(
        settings=resolved_settings,
        account_gateway=account_gateway,
        payment_gateway=payment_gateway,
        seat_reservation_gateway=seat_reservation_gateway,
        ticket_service=ticket_service,
        close_resources=close_resources,
    )
