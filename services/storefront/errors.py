"""
Error taxonomy of the storefront workflows.

``str(error)`` is always the human-readable message shown to the shopper or
administrator; ``status_code`` is what the storefront API answers with.
"""
import httpx


class StorefrontError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CheckoutValidationError(StorefrontError):
    """Raised before anything is written: empty cart, missing shipping data, bad quantity."""


class ProductUnavailableError(CheckoutValidationError):
    status_code = 404


class InsufficientStockError(CheckoutValidationError):
    status_code = 409

    def __init__(self, product_name: str, remaining: int | None = None, message: str | None = None):
        if message is None:
            message = f"Insufficient stock for {product_name}. Remaining: {remaining}"
        super().__init__(message)
        self.product_name = product_name
        self.remaining = remaining


class BackendError(StorefrontError):
    """A backend call answered with an error status or never got an answer."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.backend_status = status_code
        # Unreachable or crashing backends surface as a bad gateway
        self.status_code = status_code if 400 <= status_code < 500 else 502

    @classmethod
    def from_response(cls, response: httpx.Response) -> "BackendError":
        try:
            detail = response.json().get("detail")
        except (ValueError, AttributeError):
            detail = None
        if isinstance(detail, list):
            # FastAPI validation errors
            detail = "; ".join(str(err.get("msg", err)) for err in detail)
        return cls(response.status_code, str(detail or response.text or response.reason_phrase))

    @classmethod
    def from_transport(cls, exc: httpx.HTTPError) -> "BackendError":
        return cls(0, f"Backend unreachable: {exc}")


class ActionFailedError(StorefrontError):
    """Wraps the cause of a failed user action behind a fixed message prefix."""

    prefix = "Action failed: "

    def __init__(self, cause: Exception | str):
        super().__init__(f"{self.prefix}{cause}")
        self.cause = cause
        if isinstance(cause, StorefrontError):
            self.status_code = cause.status_code


class CheckoutFailedError(ActionFailedError):
    prefix = "Failed to process order: "


class StatusUpdateFailedError(ActionFailedError):
    prefix = "Failed to update status: "


class OrderDeleteFailedError(ActionFailedError):
    prefix = "Failed to delete order: "


class ProductSaveFailedError(ActionFailedError):
    prefix = "Failed to save product: "


class ProductDeleteFailedError(ActionFailedError):
    prefix = "Failed to delete product: "
