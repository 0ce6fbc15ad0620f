"""Ticket purchase orchestration.

Validates a purchase request, prices it, then calls the account, payment
and seat reservation gateways in that order. Any failure aborts the purchase
before later gateways are reached.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ticket_purchase.adapters.account_gateway import AccountGateway
from ticket_purchase.adapters.payment_gateway import PaymentGateway
from ticket_purchase.adapters.seat_reservation_gateway import SeatReservationGateway
from ticket_purchase.domain.errors import (
    AccountCheckFailedError,
    AdultTicketRequiredError,
    InsufficientFundsError,
    InvalidAccountError,
    InvalidPurchaseError,
    PaymentFailedError,
    SeatReservationFailedError,
    TicketLimitExceededError,
    ZeroTicketQuantityError,
)
from ticket_purchase.domain.tickets import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_FARES,
    PurchaseReceipt,
    TicketBooking,
    TicketType,
    TicketTypeRequest,
)

_logger = logging.getLogger(__name__)


@dataclass
class TicketService:
    """Application service for purchasing tickets."""

    account_gateway: AccountGateway
    payment_gateway: PaymentGateway
    seat_reservation_gateway: SeatReservationGateway

    def purchase_tickets(
        self, account_id: int, ticket_type_requests: Sequence[TicketTypeRequest]
    ) -> PurchaseReceipt:
        """Validate, charge and reserve seats for a ticket purchase.

        Raises:
            InvalidPurchaseError: If any rule or gateway call fails. The
                subclass identifies the failure; gateway errors are chained
                as the cause.
        """
        try:
            booking = build_booking(ticket_type_requests)
        except InvalidPurchaseError as exc:
            _logger.warning(
                "Purchase rejected: account=%s code=%s", account_id, exc.code.value
            )
            raise
        amount = calculate_amount(booking)

        self._check_account(account_id, amount)
        self._charge(account_id, amount)
        self._reserve(account_id, amount, booking.seat_count)

        _logger.info(
            "Purchase completed: account=%s amount=%s seats=%s",
            account_id,
            amount,
            booking.seat_count,
        )
        return PurchaseReceipt(
            account_id=account_id,
            amount=amount,
            seat_count=booking.seat_count,
            booking=booking,
        )

    def _check_account(self, account_id: int, amount: int) -> None:
        try:
            valid = self.account_gateway.is_valid(account_id)
        except Exception as exc:
            _logger.warning(
                "Account validation failed: account=%s: %s", account_id, exc
            )
            raise AccountCheckFailedError(str(exc)) from exc
        if not valid:
            _logger.warning("Purchase rejected: invalid account=%s", account_id)
            raise InvalidAccountError(account_id)

        try:
            balance = self.account_gateway.balance(account_id)
        except Exception as exc:
            _logger.warning("Balance check failed: account=%s: %s", account_id, exc)
            raise AccountCheckFailedError(str(exc)) from exc
        if balance < amount:
            _logger.warning(
                "Purchase rejected: account=%s balance=%s amount=%s",
                account_id,
                balance,
                amount,
            )
            raise InsufficientFundsError(balance=balance, amount=amount)

    def _charge(self, account_id: int, amount: int) -> None:
        try:
            self.payment_gateway.charge(account_id, amount)
        except Exception as exc:
            _logger.warning(
                "Payment failed: account=%s amount=%s: %s", account_id, amount, exc
            )
            raise PaymentFailedError(str(exc)) from exc

    def _reserve(self, account_id: int, amount: int, seat_count: int) -> None:
        try:
            self.seat_reservation_gateway.reserve(account_id, seat_count)
        except Exception as exc:
            # The charge is not reversed here.
            _logger.error(
                "Seat reservation failed after payment: "
                "account=%s amount=%s seats=%s: %s",
                account_id,
                amount,
                seat_count,
                exc,
            )
            raise SeatReservationFailedError(str(exc)) from exc


def build_booking(ticket_type_requests: Sequence[TicketTypeRequest]) -> TicketBooking:
    """Apply the request rules and aggregate seated tickets per type."""
    seated = [
        request
        for request in ticket_type_requests
        if request.ticket_type is not TicketType.INFANT
    ]
    if sum(request.quantity for request in seated) > MAX_TICKETS_PER_PURCHASE:
        raise TicketLimitExceededError()

    quantities: dict[TicketType, int] = {}
    for request in seated:
        quantities[request.ticket_type] = (
            quantities.get(request.ticket_type, 0) + request.quantity
        )

    if 0 in quantities.values():
        raise ZeroTicketQuantityError()
    if TicketType.ADULT not in quantities:
        raise AdultTicketRequiredError()
    return TicketBooking(quantities=quantities)


def calculate_amount(booking: TicketBooking) -> int:
    """Return the payable amount for a booking."""
    return sum(
        TICKET_FARES[ticket_type] * quantity
        for ticket_type, quantity in booking.quantities.items()
    )
