"""Purchase error codes and exceptions."""

from enum import Enum


class PurchaseErrorCode(Enum):
    """Reasons a purchase can be rejected."""

    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ZERO_TICKET_QUANTITY = "ZERO_TICKET_QUANTITY"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    ACCOUNT_CHECK_FAILED = "ACCOUNT_CHECK_FAILED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    SEAT_RESERVATION_FAILED = "SEAT_RESERVATION_FAILED"


class InvalidPurchaseError(Exception):
    """Base purchase error with code and user-safe message."""

    def __init__(self, code: PurchaseErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __reduce__(self) -> tuple[object, ...]:
        # Subclass constructors take different arguments than ``args``.
        return (_restore_error, (type(self), self.message, dict(self.__dict__)))

    @property
    def cause(self) -> BaseException | None:
        """The collaborator exception this error was raised from, if any."""
        return self.__cause__


def _restore_error(
    error_type: type[InvalidPurchaseError], message: str, state: dict[str, object]
) -> InvalidPurchaseError:
    """Rebuild a pickled purchase error without calling its constructor."""
    error = error_type.__new__(error_type)
    Exception.__init__(error, message)
    error.__dict__.update(state)
    return error


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when too many seated tickets are requested at once."""

    def __init__(self) -> None:
        super().__init__(
            code=PurchaseErrorCode.TICKET_LIMIT_EXCEEDED,
            message="Number of tickets exceeds the limit",
        )


class ZeroTicketQuantityError(InvalidPurchaseError):
    """Raised when a requested ticket type adds up to zero tickets."""

    def __init__(self) -> None:
        super().__init__(
            code=PurchaseErrorCode.ZERO_TICKET_QUANTITY,
            message="Number of tickets can't be 0",
        )


class AdultTicketRequiredError(InvalidPurchaseError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=PurchaseErrorCode.ADULT_TICKET_REQUIRED,
            message="Child/Infant ticket must be purchased with adult ticket",
        )


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account gateway rejects the account."""

    def __init__(self, account_id: int) -> None:
        super().__init__(
            code=PurchaseErrorCode.INVALID_ACCOUNT,
            message="Invalid account",
        )
        self.account_id = account_id


class InsufficientFundsError(InvalidPurchaseError):
    """Raised when the account balance does not cover the purchase."""

    def __init__(self, balance: int, amount: int) -> None:
        super().__init__(
            code=PurchaseErrorCode.INSUFFICIENT_FUNDS,
            message="Insufficient funds from the account",
        )
        self.balance = balance
        self.amount = amount


class AccountCheckFailedError(InvalidPurchaseError):
    """Raised when the account gateway itself fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=PurchaseErrorCode.ACCOUNT_CHECK_FAILED,
            message=f"Something went wrong during account validation: {reason}",
        )


class PaymentFailedError(InvalidPurchaseError):
    """Raised when the payment gateway fails to charge the account."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=PurchaseErrorCode.PAYMENT_FAILED,
            message=f"Something went wrong during making payment: {reason}",
        )


class SeatReservationFailedError(InvalidPurchaseError):
    """Raised when the seat reservation gateway fails."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=PurchaseErrorCode.SEAT_RESERVATION_FAILED,
            message=f"Something went wrong during seats reservation: {reason}",
        )
