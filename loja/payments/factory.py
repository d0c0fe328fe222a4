"""
Payment Method Factory

Builds a PaymentMethod from its textual kind. Without credentials the
variant's example credentials are used; otherwise the credentials are passed
as keyword arguments to the variant's constructor.
"""

from typing import Any, Dict, List, Optional
from loja.core.exceptions import InvalidPaymentCredentials, UnknownPaymentKind
from loja.payments.base import PaymentMethod
from loja.payments.registry import get_registry
import logging

logger = logging.getLogger(__name__)


class PaymentMethodFactory:
    """Factory for creating payment method instances."""

    @staticmethod
    def create(kind: str, credentials: Optional[Dict[str, Any]] = None) -> PaymentMethod:
        """
        Create a payment method for a kind.

        Args:
            kind: Kind identifier, case-insensitive ("cartao", "pix", "boleto")
            credentials: Constructor arguments, e.g. {"key": "ana@email.com"}
                for "pix". Example credentials are used when omitted.

        Returns:
            PaymentMethod instance

        Raises:
            UnknownPaymentKind: kind is not registered
            InvalidPaymentCredentials: credentials don't match the constructor
            MalformedCardNumber: card number too short (kind "cartao")

        Example:
            method = PaymentMethodFactory.create("PIX")
            order.select_payment_method(method)
        """
        registry = get_registry()
        method_class = registry.get(kind)

        if method_class is None:
            logger.debug(f"No payment method found for kind {kind!r}")
            raise UnknownPaymentKind(kind, registry.list_kinds())

        kwargs = dict(method_class.EXAMPLE_CREDENTIALS if credentials is None else credentials)
        try:
            method = method_class(**kwargs)
        except TypeError as e:
            raise InvalidPaymentCredentials(method_class.KIND, str(e)) from e

        logger.debug(f"Created payment method {method!r}")
        return method

    @staticmethod
    def list_available() -> List[str]:
        """
        List all available payment kinds.

        Example:
            kinds = PaymentMethodFactory.list_available()
            print(f"Available: {', '.join(kinds)}")
        """
        return get_registry().list_kinds()
