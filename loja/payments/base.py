"""
Payment Method - abstract base for the interchangeable ways of paying an order.

Implementations: CardPayment, PixPayment, BoletoPayment.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, Dict


@dataclass(frozen=True)
class PaymentOutcome:
    """Result of processing a payment."""
    succeeded: bool
    description: str
    method: str = ""
    amount: Decimal = Decimal("0")
    details: Dict[str, str] = field(default_factory=dict)


class PaymentMethod(ABC):
    """
    Abstract payment method.

    Attributes:
        KIND: identifier used by the factory (e.g. "pix")
        LABEL: title shown on receipts
        EXAMPLE_CREDENTIALS: constructor keyword arguments used when the
            caller does not supply credentials
    """

    KIND: ClassVar[str] = "unknown"
    LABEL: ClassVar[str] = "PAGAMENTO"
    EXAMPLE_CREDENTIALS: ClassVar[Dict[str, Any]] = {}

    def get_name(self) -> str:
        """Kind identifier of this method."""
        return self.KIND

    @abstractmethod
    def process(self, amount: Decimal) -> PaymentOutcome:
        """Charge the given amount (amount >= 0) and return the outcome."""
        pass

    def _outcome(self, amount: Decimal, description: str, **details: str) -> PaymentOutcome:
        return PaymentOutcome(
            succeeded=True,
            description=description,
            method=self.KIND,
            amount=amount,
            details=details,
        )
