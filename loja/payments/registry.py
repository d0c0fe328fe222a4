"""
Payment Method Registry

Keeps the in-memory map of payment kinds ("cartao", "pix", "boleto") to the
PaymentMethod classes that implement them. Classes register themselves with
the register_payment_method decorator when loja.payments is imported.
"""

from typing import Dict, List, Optional, Type
from loja.payments.base import PaymentMethod
import logging

logger = logging.getLogger(__name__)


class PaymentMethodRegistry:
    """
    Central registry for all payment methods.

    This singleton class maps each kind identifier (lower case) to its
    PaymentMethod class.
    """

    _instance: Optional['PaymentMethodRegistry'] = None
    _registry: Dict[str, Type[PaymentMethod]] = {}

    def __new__(cls):
        """Singleton pattern - only one registry instance exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Initialize the registry."""
        self._registry = {}
        logger.debug("PaymentMethodRegistry initialized")

    def register(
        self,
        method_class: Type[PaymentMethod],
        kind: Optional[str] = None
    ) -> None:
        """
        Register a payment method.

        Args:
            method_class: The class to register (must inherit from PaymentMethod)
            kind: Optional kind override (uses method_class.KIND if not provided)

        Raises:
            TypeError: If method_class doesn't inherit from PaymentMethod
        """
        if not isinstance(method_class, type) or not issubclass(method_class, PaymentMethod):
            raise TypeError(
                f"{getattr(method_class, '__name__', method_class)} must inherit from PaymentMethod"
            )

        kind_key = (kind or method_class.KIND).strip().lower()

        if kind_key in self._registry:
            existing = self._registry[kind_key]
            logger.warning(
                f"Payment kind {kind_key} already registered "
                f"({existing.__name__}), overwriting with {method_class.__name__}"
            )

        self._registry[kind_key] = method_class
        logger.debug(f"Registered payment method: {method_class.__name__} (kind={kind_key})")

    def unregister(self, kind: str) -> bool:
        """
        Unregister a payment method by kind.

        Returns:
            True if it was unregistered, False if not found
        """
        kind_key = kind.strip().lower()
        if kind_key not in self._registry:
            return False
        del self._registry[kind_key]
        logger.debug(f"Unregistered payment kind {kind_key}")
        return True

    def get(self, kind: str) -> Optional[Type[PaymentMethod]]:
        """
        Get a payment method class by kind (case-insensitive).

        Returns:
            The class if found, None otherwise
        """
        return self._registry.get(kind.strip().lower())

    def list_kinds(self) -> List[str]:
        """List all registered kinds, in registration order."""
        return list(self._registry.keys())

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, kind: str) -> bool:
        return kind.strip().lower() in self._registry

    def __repr__(self) -> str:
        return f"<PaymentMethodRegistry kinds={self.list_kinds()}>"


# Decorator for easy registration
def register_payment_method(kind: Optional[str] = None):
    """
    Decorator to register a payment method class.

    Usage:
        @register_payment_method()
        class PixPayment(PaymentMethod):
            KIND = "pix"
            ...
    """
    def decorator(method_class: Type[PaymentMethod]):
        get_registry().register(method_class, kind)
        return method_class
    return decorator


def get_registry() -> PaymentMethodRegistry:
    """
    Get the global payment method registry.

    Returns:
        PaymentMethodRegistry singleton
    """
    return PaymentMethodRegistry()
