"""Exceptions raised by the checkout page objects."""
from typing import Optional

from .output_sanitizer import sanitize_output


class CheckoutError(Exception):
    """Base error for checkout interactions.

    Carries the name of the operation that failed and the underlying cause so a
    failing scenario can be diagnosed from the report alone.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.operation = operation
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        text = self.message
        if self.operation:
            text = f"{self.operation}: {text}"
        if self.cause is not None:
            text = f"{text} (caused by {type(self.cause).__name__}: {self.cause})"
        return sanitize_output(text, max_chars=2000)


class FieldInteractionError(CheckoutError):
    """A mandatory field or control is absent or not interactable."""
    pass


class OptionNotFoundError(CheckoutError):
    """Every match strategy failed on a rendered dropdown."""
    pass


class ShippingMethodNotFoundError(CheckoutError):
    """No rendered shipping rate matches the requested key."""

    def __init__(self, message: str, available: Optional[list[str]] = None, **kwargs):
        self.available = available or []
        super().__init__(message, **kwargs)


class StepTimeoutError(CheckoutError):
    """A bounded readiness wait ran out."""

    def __init__(self, message: str, timeout_ms: int, **kwargs):
        self.timeout_ms = timeout_ms
        super().__init__(message, **kwargs)

    def __str__(self) -> str:
        return f"{super().__str__()} [timeout={self.timeout_ms}ms]"


class CheckoutStepError(CheckoutError):
    """Orchestrator-level wrapper naming the checkout step that failed."""

    def __init__(self, step: str, cause: BaseException, operation: Optional[str] = None):
        self.step = step
        super().__init__(f"checkout step '{step}' failed", operation=operation, cause=cause)
