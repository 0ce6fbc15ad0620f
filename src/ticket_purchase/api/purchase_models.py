"""Pydantic models for the purchase API."""

from pydantic import BaseModel, Field

from ticket_purchase.domain.tickets import TicketType, TicketTypeRequest


class TicketLine(BaseModel):
    """One ticket type and quantity in a purchase payload."""

    ticket_type: TicketType
    quantity: int = Field(ge=0)

    def to_domain(self) -> TicketTypeRequest:
        return TicketTypeRequest(ticket_type=self.ticket_type, quantity=self.quantity)


class PurchaseRequest(BaseModel):
    """Purchase payload."""

    account_id: int = Field(gt=0)
    tickets: list[TicketLine]


class PurchaseResponse(BaseModel):
    """Successful purchase summary."""

    account_id: int
    amount: int
    seat_count: int


class PurchaseErrorResponse(BaseModel):
    """Rejected purchase payload."""

    code: str
    message: str
