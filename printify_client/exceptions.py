"""Errors raised by the Printify client."""


class PrintifyError(Exception):
    """Base class for every error raised by this package."""


class PrintifyRequestError(PrintifyError):
    """Raised when Printify answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"{status_code} {reason}")


class MissingShopIdError(PrintifyError, ValueError):
    """Raised when a shop-scoped call is made without a shop id."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"{operation} needs a shop id: set ClientConfig.shop_id or pass shop_id="
        )
