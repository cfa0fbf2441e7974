"""Domain-specific exceptions"""


class BuyVsRentError(Exception):
    """Base exception for the comparison engine"""

    pass


class InvalidInputError(BuyVsRentError):
    """Parameters are out of range or the computation produced a non-finite number"""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
