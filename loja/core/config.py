"""
Store configuration - process-wide settings shared by every order.

Usage:
    from loja.core.config import get_store_config

    config = get_store_config()
    config.name          # "Loja do João"
    config.delivery_fee  # Decimal("10.0")

The instance is built on first access (from STORE_NAME / STORE_DELIVERY_FEE
when set) and the same object is returned for the rest of the process.
Orders also accept an explicit StoreConfig, which is what tests use.
"""

import logging
import os
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from loja.core.exceptions import InvalidStoreConfig
from loja.utils.money import to_decimal

logger = logging.getLogger(__name__)

DEFAULT_STORE_NAME = "Loja do João"
DEFAULT_DELIVERY_FEE = Decimal("10.0")


@dataclass(frozen=True)
class StoreConfig:
    """Store-level settings. Immutable once created."""
    name: str = DEFAULT_STORE_NAME
    delivery_fee: Decimal = DEFAULT_DELIVERY_FEE

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build a config from the environment, falling back to the defaults."""
        name = (os.getenv("STORE_NAME") or "").strip() or DEFAULT_STORE_NAME
        raw_fee = os.getenv("STORE_DELIVERY_FEE")
        if raw_fee is None or not raw_fee.strip():
            return cls(name=name, delivery_fee=DEFAULT_DELIVERY_FEE)
        try:
            fee = to_decimal(raw_fee)
        except ValueError as e:
            raise InvalidStoreConfig(f"STORE_DELIVERY_FEE={raw_fee!r}") from e
        if not fee.is_finite() or fee < 0:
            raise InvalidStoreConfig("STORE_DELIVERY_FEE deve ser um valor não negativo")
        return cls(name=name, delivery_fee=fee)


_instance: Optional[StoreConfig] = None
_lock = threading.Lock()


def get_store_config() -> StoreConfig:
    """
    Get the process-wide store configuration.

    The first call creates it; later calls return the identical object.

    Returns:
        StoreConfig singleton
    """
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = StoreConfig.from_env()
                logger.info(
                    f"Store configuration created: {_instance.name} "
                    f"(delivery fee {_instance.delivery_fee})"
                )
    return _instance


def reset_store_config() -> None:
    """
    Drop the cached configuration so the next access rebuilds it.

    Warning: This is mainly for testing.
    """
    global _instance
    with _lock:
        _instance = None
