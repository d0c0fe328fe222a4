"""
PIX Payment - instant transfer identified by a PIX key.
"""

import logging
from decimal import Decimal

from loja.payments.base import PaymentMethod, PaymentOutcome
from loja.payments.registry import register_payment_method

logger = logging.getLogger(__name__)


@register_payment_method()
class PixPayment(PaymentMethod):
    """PIX payment; settles instantly once the QR code is generated."""

    KIND = "pix"
    LABEL = "PAGAMENTO COM PIX"
    EXAMPLE_CREDENTIALS = {"key": "maria@email.com"}

    def __init__(self, key: str):
        self.key = key

    def process(self, amount: Decimal) -> PaymentOutcome:
        logger.debug(f"PIX payment of {amount} to key {self.key}")
        return self._outcome(
            amount,
            "QR Code gerado! Pagamento instantâneo!",
            key=self.key,
        )

    def __repr__(self) -> str:
        return f"<PixPayment key={self.key!r}>"
