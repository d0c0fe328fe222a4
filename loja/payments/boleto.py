"""
Boleto Payment - bank slip issued for the payer's CPF, due in 3 days.

The slip code is a fixed example; no bank is contacted.
"""

import logging
from decimal import Decimal

from loja.payments.base import PaymentMethod, PaymentOutcome
from loja.payments.registry import register_payment_method

logger = logging.getLogger(__name__)

BOLETO_EXAMPLE_CODE = "34191.79001 01043.510047 91020.150008"
BOLETO_DUE_DAYS = 3


@register_payment_method()
class BoletoPayment(PaymentMethod):
    """Boleto payment identified by the payer's tax ID (CPF)."""

    KIND = "boleto"
    LABEL = "PAGAMENTO COM BOLETO"
    EXAMPLE_CREDENTIALS = {"tax_id": "123.456.789-00"}

    def __init__(self, tax_id: str):
        self.tax_id = tax_id

    def process(self, amount: Decimal) -> PaymentOutcome:
        logger.debug(f"Boleto of {amount} issued for {self.tax_id}")
        return self._outcome(
            amount,
            f"Boleto gerado! Vence em {BOLETO_DUE_DAYS} dias.",
            tax_id=self.tax_id,
            code=BOLETO_EXAMPLE_CODE,
            due_in_days=str(BOLETO_DUE_DAYS),
        )

    def __repr__(self) -> str:
        return f"<BoletoPayment tax_id={self.tax_id!r}>"
