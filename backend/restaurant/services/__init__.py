"""Restaurant services."""
from restaurant.services.payment_gateway import PaymentGateway
from restaurant.services.persistence_service import PersistenceService

__all__ = ["PaymentGateway", "PersistenceService"]
