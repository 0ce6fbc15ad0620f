"""Ticket domain models and fixed fares."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class TicketType(Enum):
    """Ticket categories that can be purchased."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


TICKET_FARES: Mapping[TicketType, int] = {
    TicketType.ADULT: 20,
    TicketType.CHILD: 10,
    TicketType.INFANT: 0,
}

MAX_TICKETS_PER_PURCHASE = 20


@dataclass(frozen=True)
class TicketTypeRequest:
    """A requested quantity of one ticket type."""

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Ticket quantity cannot be negative")


@dataclass(frozen=True)
class TicketBooking:
    """Aggregated quantities per seated ticket type (infants excluded)."""

    quantities: Mapping[TicketType, int] = field(default_factory=dict)

    def quantity(self, ticket_type: TicketType) -> int:
        return self.quantities.get(ticket_type, 0)

    @property
    def seat_count(self) -> int:
        return sum(self.quantities.values())


@dataclass(frozen=True)
class PurchaseReceipt:
    """Outcome of a completed purchase."""

    account_id: int
    amount: int
    seat_count: int
    booking: TicketBooking
