"""
Tests for restaurant.domain.payment - Payment state machine and gateway calls
"""
import pytest
from datetime import datetime
from decimal import Decimal

from core.exceptions import InvalidOperationError
from restaurant.domain.payment import Payment, PaymentStatus
from restaurant.models.schemas import PaymentRecord


@pytest.fixture
def payment(mock_gateway):
    return Payment("P1", Decimal("99.90"), "Card", mock_gateway)


class TestPaymentCreation:
    def test_creation(self, payment, mock_gateway):
        assert payment.payment_id == "P1"
        assert payment.amount == Decimal("99.90")
        assert payment.method == "Card"
        assert payment.status == PaymentStatus.PENDING
        assert isinstance(payment.payment_time, datetime)
        assert payment.refund_time is None
        assert payment.gateway is mock_gateway

    def test_registers_in_extent(self, payment):
        assert Payment.get_extent() == (payment,)

    def test_blank_id_rejected(self, gateway):
        with pytest.raises(ValueError, match="Payment ID"):
            Payment(" ", 10, "Card", gateway)

    @pytest.mark.parametrize("amount", [0, -5, "-0.01"])
    def test_non_positive_amount_rejected(self, gateway, amount):
        with pytest.raises(ValueError, match="greater than zero"):
            Payment("P1", amount, "Card", gateway)

    @pytest.mark.parametrize("amount", [float("nan"), "NaN", float("inf"), "Infinity"])
    def test_non_finite_amount_rejected(self, gateway, amount):
        with pytest.raises(ValueError, match="Amount must be a number"):
            Payment("P1", amount, "Card", gateway)
        assert Payment.get_extent() == ()

    def test_blank_method_rejected(self, gateway):
        with pytest.raises(ValueError, match="method"):
            Payment("P1", 10, "", gateway)

    def test_missing_gateway_rejected(self):
        with pytest.raises(ValueError, match="gateway"):
            Payment("P1", 10, "Card", None)
        assert Payment.get_extent() == ()

    def test_status_value(self):
        assert PaymentStatus.CAPTURED.value == "Captured"
        assert PaymentStatus("Refunded") is PaymentStatus.REFUNDED


class TestHappyPath:
    def test_full_lifecycle(self, payment, mock_gateway):
        assert payment.authorize() is True
        assert payment.status == PaymentStatus.AUTHORIZED

        assert payment.capture() is True
        assert payment.status == PaymentStatus.CAPTURED
        mock_gateway.process_payment.assert_called_once_with(payment)

        assert payment.refund() is True
        assert payment.status == PaymentStatus.REFUNDED
        assert payment.refund_time is not None

        mock_gateway.notify_failure.assert_not_called()

    def test_with_real_gateway(self, gateway, caplog):
        import logging

        payment = Payment("P2", 15, "Cash", gateway)
        with caplog.at_level(logging.INFO):
            payment.authorize()
            payment.capture()
        assert "[Gateway: TestGateway] Processing payment P2" in caplog.text


class TestInvalidTransitions:
    def test_capture_from_pending(self, payment, mock_gateway):
        assert payment.capture() is False
        assert payment.status == PaymentStatus.PENDING
        mock_gateway.process_payment.assert_not_called()
        mock_gateway.notify_failure.assert_called_once()
        message = mock_gateway.notify_failure.call_args[0][0]
        assert "must be Authorized first" in message

    def test_authorize_twice(self, payment, mock_gateway):
        payment.authorize()
        assert payment.authorize() is False
        assert payment.status == PaymentStatus.AUTHORIZED
        message = mock_gateway.notify_failure.call_args[0][0]
        assert "Current status: Authorized" in message

    def test_refund_before_capture(self, payment, mock_gateway):
        payment.authorize()
        assert payment.refund() is False
        assert payment.status == PaymentStatus.AUTHORIZED
        assert payment.refund_time is None
        mock_gateway.notify_failure.assert_called_once()

    def test_no_way_back_after_refund(self, payment, mock_gateway):
        payment.authorize()
        payment.capture()
        payment.refund()
        for action in (payment.authorize, payment.capture, payment.refund):
            assert action() is False
        assert payment.status == PaymentStatus.REFUNDED
        assert mock_gateway.notify_failure.call_count == 3

    def test_failed_process_keeps_status(self, payment, mock_gateway):
        payment.authorize()
        mock_gateway.process_payment.side_effect = ValueError("declined")
        with pytest.raises(ValueError):
            payment.capture()
        assert payment.status == PaymentStatus.AUTHORIZED


class TestPaymentRecord:
    def test_to_record(self, payment):
        payment.authorize()
        record = payment.to_record()
        assert record.status == PaymentStatus.AUTHORIZED
        assert record.amount == Decimal("99.90")
        assert "gateway" not in record.model_dump()

    def test_reloaded_payment_needs_gateway(self, payment, gateway, registry):
        payment.authorize()
        loaded = Payment.from_record(payment.to_record(), registry=registry)
        assert loaded.status == PaymentStatus.AUTHORIZED
        assert loaded.has_gateway is False
        with pytest.raises(InvalidOperationError):
            loaded.capture()
        assert loaded.status == PaymentStatus.AUTHORIZED

        loaded.attach_gateway(gateway)
        assert loaded.capture() is True
        assert loaded.status == PaymentStatus.CAPTURED

    def test_reloaded_payment_records_refund_time(self, payment, gateway, registry):
        payment.authorize()
        payment.capture()
        loaded = Payment.from_record(payment.to_record(), registry=registry)
        assert loaded.refund_time is None
        loaded.attach_gateway(gateway)
        assert loaded.refund() is True
        assert isinstance(loaded.refund_time, datetime)
        assert payment.refund_time is None

    def test_attach_none_rejected(self, payment):
        with pytest.raises(ValueError):
            payment.attach_gateway(None)

    def test_from_record_keeps_refund_time(self, registry):
        refunded_at = datetime(2026, 3, 1, 12, 0)
        record = PaymentRecord(
            payment_id="P9",
            amount=Decimal("5"),
            status=PaymentStatus.REFUNDED,
            method="Card",
            payment_time=datetime(2026, 2, 1, 12, 0),
            refund_time=refunded_at,
        )
        loaded = Payment.from_record(record, registry=registry)
        assert loaded.refund_time == refunded_at
        assert loaded.to_dict()["status"] == "Refunded"
