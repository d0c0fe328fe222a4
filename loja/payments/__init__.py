"""
Payment methods - interchangeable ways of paying an order.

Usage:
    from loja.payments import PaymentMethodFactory

    method = PaymentMethodFactory.create("pix")
    outcome = method.process(Decimal("169.90"))

Importing this package registers the built-in kinds: cartao, pix, boleto.
"""

from loja.payments.base import PaymentMethod, PaymentOutcome
from loja.payments.registry import (
    PaymentMethodRegistry,
    get_registry,
    register_payment_method,
)
from loja.payments.card import CardPayment  # noqa: F401 - registers "cartao"
from loja.payments.pix import PixPayment  # noqa: F401 - registers "pix"
from loja.payments.boleto import BoletoPayment  # noqa: F401 - registers "boleto"
from loja.payments.factory import PaymentMethodFactory


__all__ = [
    "PaymentMethodFactory",
    "PaymentMethod",
    "PaymentOutcome",
    "PaymentMethodRegistry",
    "get_registry",
    "register_payment_method",
    "CardPayment",
    "PixPayment",
    "BoletoPayment",
]
