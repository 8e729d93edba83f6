"""
Pytest configuration and shared fixtures
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

from core.engine.extent import ExtentRegistry, extent_registry
from restaurant.domain.menu import MenuItem
from restaurant.services.payment_gateway import PaymentGateway


@pytest.fixture(autouse=True)
def _reset_extents():
    """Keep tests isolated: every extent and shared value starts fresh"""
    extent_registry.reset()
    yield
    extent_registry.reset()


@pytest.fixture
def registry():
    """A private extent registry, independent of the global one"""
    return ExtentRegistry()


# ============== Menu fixtures ==============

@pytest.fixture
def burger():
    return MenuItem("I1", "Burger", "Beef patty", Decimal("10.00"), "Food", True)


@pytest.fixture
def fries():
    return MenuItem("I2", "Fries", "Salted", Decimal("6.00"), "Food", True)


@pytest.fixture
def cola():
    return MenuItem("I3", "Cola", "Chilled", Decimal("3.50"), "Drinks", True)


# ============== Payment fixtures ==============

@pytest.fixture
def gateway():
    return PaymentGateway("TestGateway")


@pytest.fixture
def mock_gateway():
    """Gateway double recording process_payment / notify_failure calls"""
    return MagicMock(spec=PaymentGateway)


# ============== Time fixtures ==============

@pytest.fixture
def future_time():
    return datetime.now() + timedelta(days=7)
