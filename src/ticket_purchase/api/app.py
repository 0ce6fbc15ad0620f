"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ticket_purchase.api.purchase_models import (
    PurchaseErrorResponse,
    PurchaseRequest,
    PurchaseResponse,
)
from ticket_purchase.app_logging import configure_logging
from ticket_purchase.containers import AppContainer
from ticket_purchase.domain.errors import InvalidPurchaseError, PurchaseErrorCode

_UNPROCESSABLE = 422

_STATUS_BY_CODE = {
    PurchaseErrorCode.TICKET_LIMIT_EXCEEDED: _UNPROCESSABLE,
    PurchaseErrorCode.ZERO_TICKET_QUANTITY: _UNPROCESSABLE,
    PurchaseErrorCode.ADULT_TICKET_REQUIRED: _UNPROCESSABLE,
    PurchaseErrorCode.INVALID_ACCOUNT: _UNPROCESSABLE,
    PurchaseErrorCode.INSUFFICIENT_FUNDS: status.HTTP_402_PAYMENT_REQUIRED,
    PurchaseErrorCode.ACCOUNT_CHECK_FAILED: status.HTTP_502_BAD_GATEWAY,
    PurchaseErrorCode.PAYMENT_FAILED: status.HTTP_502_BAD_GATEWAY,
    PurchaseErrorCode.SEAT_RESERVATION_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidPurchaseError)
    async def invalid_purchase_handler(
        request: Request, exc: InvalidPurchaseError
    ) -> JSONResponse:
        body = PurchaseErrorResponse(code=exc.code.value, message=exc.message)
        return JSONResponse(
            status_code=_STATUS_BY_CODE.get(exc.code, _UNPROCESSABLE),
            content=body.model_dump(),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/purchases")
    def purchase_tickets(
        payload: PurchaseRequest, request: Request
    ) -> PurchaseResponse:
        """Purchase tickets for an account."""
        state_container: AppContainer = request.app.state.container
        receipt = state_container.ticket_service.purchase_tickets(
            payload.account_id,
            [line.to_domain() for line in payload.tickets],
        )
        return PurchaseResponse(
            account_id=receipt.account_id,
            amount=receipt.amount,
            seat_count=receipt.seat_count,
        )

    return app
