"""
Application configuration
Read from environment variables or a .env file
"""
import logging
from decimal import Decimal
from typing import Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "RestaurantSystem"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Extent persistence
    DATA_DIR: str = "./data"
    ORDER_ITEMS_FILE: str = "order_items.json"
    STAFF_FILE: str = "staff.json"
    TABLES_FILE: str = "tables.json"
    RESERVATIONS_FILE: str = "reservations.json"
    PAYMENTS_FILE: str = "payments.json"

    # Domain defaults
    DEFAULT_MINIMUM_WAGE: Decimal = Decimal("30.00")
    DEFAULT_GATEWAY_NAME: str = "DefaultGateway"

    model_config = ConfigDict(env_file=".env", case_sensitive=True)


# Global settings instance
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings.LOG_LEVEL"""
    level = level or ("DEBUG" if settings.DEBUG else settings.LOG_LEVEL)
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
