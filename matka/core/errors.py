# matka/core/errors.py

class PayoutError(Exception):
    """Base class for payout computation failures."""


class InvalidResultError(PayoutError):
    """Result number is not 1-3 digits, or a 3-digit number is not a known panna."""

    def __init__(self, number, reason: str):
        self.number = number
        self.reason = reason
        super().__init__(f"Invalid result number {number!r}: {reason}")


class MissingOpenResultError(PayoutError):
    """Close result declared before the open result of the same market day."""

    def __init__(self, close_number: str):
        self.close_number = close_number
        super().__init__(
            f"Open result must be declared before close result {close_number!r}"
        )
