"""
Payment gateway collaborator.

The gateway only logs: processing a payment and failure notices have no
result beyond the call succeeding or raising.
"""
import logging
from typing import Optional, TYPE_CHECKING

from restaurant.config import settings
from restaurant.domain.validators import require_text

if TYPE_CHECKING:
    from restaurant.domain.payment import Payment

logger = logging.getLogger(__name__)


class PaymentGateway:
    """External payment processor, identified by name (settings.DEFAULT_GATEWAY_NAME when omitted)."""

    def __init__(self, name: Optional[str] = None):
        self.name = name if name is not None else settings.DEFAULT_GATEWAY_NAME

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = require_text(value, "Gateway name cannot be empty.")

    def process_payment(self, payment: "Payment") -> None:
        if payment is None:
            raise ValueError("Payment cannot be None.")
        logger.info(f"[Gateway: {self._name}] Processing payment {payment.payment_id}...")

    def notify_failure(self, message: str) -> None:
        logger.warning(f"[Gateway: {self._name}] FAILURE NOTICE: {message}")

    def __repr__(self) -> str:
        return f"PaymentGateway(name={self._name!r})"


__all__ = ["PaymentGateway"]
