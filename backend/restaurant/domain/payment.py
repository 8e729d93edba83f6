"""
restaurant/domain/payment.py

Payment - linear state machine reporting refusals to its gateway
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING
import logging

from core.engine.extent import ExtentMember, ExtentRegistry
from core.engine.state_machine import StateMachine, StateMachineConfig, StateTransition
from core.exceptions import InvalidOperationError
from core.ontology.base import BaseEntity
from restaurant.domain.validators import Number, require_text, to_money
from restaurant.models.enums import PaymentStatus
from restaurant.models.schemas import PaymentRecord

if TYPE_CHECKING:
    from restaurant.services.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)


# ============== State machine ==============

def _create_payment_state_machine(
    initial_status: PaymentStatus, on_refund: Callable[[], None]
) -> StateMachine:
    """Pending -> Authorized -> Captured -> Refunded, no way back"""
    return StateMachine(
        config=StateMachineConfig(
            name="Payment",
            states=[status.value for status in PaymentStatus],
            transitions=[
                StateTransition(
                    from_state=PaymentStatus.PENDING.value,
                    to_state=PaymentStatus.AUTHORIZED.value,
                    trigger="authorize",
                ),
                StateTransition(
                    from_state=PaymentStatus.AUTHORIZED.value,
                    to_state=PaymentStatus.CAPTURED.value,
                    trigger="capture",
                ),
                StateTransition(
                    from_state=PaymentStatus.CAPTURED.value,
                    to_state=PaymentStatus.REFUNDED.value,
                    trigger="refund",
                    side_effects=[on_refund],
                ),
            ],
            initial_state=initial_status.value,
        )
    )


# ============== Payment ==============

class Payment(ExtentMember, BaseEntity):
    """
    A payment processed through a gateway.

    Invalid transitions do not raise: the gateway receives a failure notice
    and the status stays as it was.

    Attributes:
        payment_id: Non-empty identifier
        amount: Strictly positive
        method: Non-empty payment method label
        payment_time: Creation time
        refund_time: Set on refund, None before
        _state_machine: Status holder
        _gateway: Required at construction; absent only after a reload
    """

    __id_attribute__ = "payment_id"
    __record_schema__ = PaymentRecord

    def __init__(
        self,
        payment_id: str,
        amount: Number,
        method: str,
        gateway: "PaymentGateway",
        registry: Optional[ExtentRegistry] = None,
    ):
        self.payment_id = payment_id
        self.amount = amount
        self.method = method
        if gateway is None:
            raise ValueError("Payment gateway cannot be None.")

        self.payment_time = datetime.now()
        self.refund_time: Optional[datetime] = None
        self._gateway: Optional["PaymentGateway"] = gateway
        self._state_machine = _create_payment_state_machine(PaymentStatus.PENDING, self._record_refund)

        self._register(registry)

    # ============== Attributes ==============

    @property
    def payment_id(self) -> str:
        return self._payment_id

    @payment_id.setter
    def payment_id(self, value: str) -> None:
        self._payment_id = require_text(value, "Payment ID cannot be empty.")

    @property
    def amount(self) -> Decimal:
        return self._amount

    @amount.setter
    def amount(self, value: Number) -> None:
        amount = to_money(value, "Amount")
        if amount <= 0:
            raise ValueError("Amount must be greater than zero.")
        self._amount = amount

    @property
    def method(self) -> str:
        return self._method

    @method.setter
    def method(self, value: str) -> None:
        self._method = require_text(value, "Payment method required.")

    @property
    def status(self) -> PaymentStatus:
        return PaymentStatus(self._state_machine.current_state)

    # ============== Gateway ==============

    @property
    def has_gateway(self) -> bool:
        return self._gateway is not None

    @property
    def gateway(self) -> "PaymentGateway":
        """
        Raises:
            InvalidOperationError: If no gateway is attached
        """
        if self._gateway is None:
            raise InvalidOperationError(
                f"Payment {self._payment_id} is not associated with any PaymentGateway."
            )
        return self._gateway

    def attach_gateway(self, gateway: "PaymentGateway") -> None:
        if gateway is None:
            raise ValueError("Payment gateway cannot be None.")
        self._gateway = gateway

    # ============== Transitions ==============

    def _record_refund(self) -> None:
        self.refund_time = datetime.now()

    def _fire(
        self,
        trigger: str,
        failure_message: str,
        before: Optional[Callable[["PaymentGateway"], None]] = None,
    ) -> bool:
        gateway = self.gateway
        if not self._state_machine.can_fire(trigger):
            gateway.notify_failure(failure_message)
            return False
        if before is not None:
            before(gateway)
        return self._state_machine.fire(trigger)

    def authorize(self) -> bool:
        """
        Pending -> Authorized

        Returns:
            True if the status changed

        Raises:
            InvalidOperationError: If no gateway is attached
        """
        if not self._fire(
            "authorize",
            f"Cannot authorize payment {self._payment_id}. Current status: {self.status.value}",
        ):
            return False
        logger.info(f"Payment {self._payment_id} authorized")
        return True

    def capture(self) -> bool:
        """
        Authorized -> Captured; the gateway processes the payment first

        Returns:
            True if the status changed
        """
        if not self._fire(
            "capture",
            f"Cannot capture payment {self._payment_id}. It must be Authorized first.",
            before=lambda gateway: gateway.process_payment(self),
        ):
            return False
        logger.info(f"Payment {self._payment_id} captured")
        return True

    def refund(self) -> bool:
        """
        Captured -> Refunded; records the refund time

        Returns:
            True if the status changed
        """
        if not self._fire(
            "refund",
            f"Cannot refund payment {self._payment_id}. It has not been captured.",
        ):
            return False
        logger.info(f"Payment {self._payment_id} refunded at {self.refund_time}")
        return True

    # ============== Persistence ==============

    def to_record(self) -> PaymentRecord:
        return PaymentRecord(
            payment_id=self._payment_id,
            amount=self._amount,
            status=self.status,
            method=self._method,
            payment_time=self.payment_time,
            refund_time=self.refund_time,
        )

    @classmethod
    def from_record(cls, record: PaymentRecord, registry: Optional[ExtentRegistry] = None) -> "Payment":
        """Restore scalar state; the gateway must be re-attached by the caller"""
        payment = cls.__new__(cls)
        payment.payment_id = record.payment_id
        payment.amount = record.amount
        payment.method = record.method
        payment.payment_time = record.payment_time
        payment.refund_time = record.refund_time
        payment._gateway = None
        payment._state_machine = _create_payment_state_machine(record.status, payment._record_refund)
        payment._bind(registry)
        return payment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "payment_id": self._payment_id,
            "amount": self._amount,
            "status": self.status.value,
            "method": self._method,
            "payment_time": self.payment_time.isoformat(),
            "refund_time": self.refund_time.isoformat() if self.refund_time else None,
        }


__all__ = ["Payment", "PaymentStatus"]
