"""
Card Payment - credit card, approved without any real authorization.

Only the last four digits ever leave this class (masked_number).
"""

import logging
from decimal import Decimal

from loja.core.exceptions import MalformedCardNumber
from loja.payments.base import PaymentMethod, PaymentOutcome
from loja.payments.registry import register_payment_method

logger = logging.getLogger(__name__)

CARD_MIN_DIGITS = 16


@register_payment_method()
class CardPayment(PaymentMethod):
    """Credit card payment identified by card number and holder."""

    KIND = "cartao"
    LABEL = "PAGAMENTO COM CARTÃO"
    EXAMPLE_CREDENTIALS = {"card_number": "1234567890123456", "holder": "Maria Silva"}

    def __init__(self, card_number: str, holder: str):
        digits = str(card_number).replace(" ", "")
        if len(digits) < CARD_MIN_DIGITS:
            raise MalformedCardNumber(digits, CARD_MIN_DIGITS)
        self._card_number = digits
        self.holder = holder

    @property
    def masked_number(self) -> str:
        return f"**** **** **** {self._card_number[-4:]}"

    def process(self, amount: Decimal) -> PaymentOutcome:
        logger.debug(f"Card payment of {amount} for {self.holder} ({self.masked_number})")
        return self._outcome(
            amount,
            "Pagamento aprovado!",
            holder=self.holder,
            card=self.masked_number,
        )

    def __repr__(self) -> str:
        return f"<CardPayment holder={self.holder!r} card={self.masked_number!r}>"
