"""
Order - line items, the chosen payment method and the checkout total.

    order = Order()
    order.add_item("Headset", "159.90")
    order.select_payment_method(PaymentMethodFactory.create("pix"))
    outcome = order.finalize()   # total = 159.90 + delivery fee

The total is always recomputed from the current items and the store
configuration; nothing is cached between calls.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

from loja.core.config import StoreConfig, get_store_config
from loja.core.exceptions import NoPaymentMethodSelected
from loja.payments.base import PaymentMethod, PaymentOutcome
from loja.utils.money import Number, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineItem:
    name: str
    price: Decimal


@dataclass(frozen=True)
class OrderSummary:
    """Itemized breakdown: products subtotal, delivery fee and total."""
    store_name: str
    items: Tuple[LineItem, ...]
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal


class Order:
    """
    An in-progress purchase.

    The order is "open" until a payment method is selected and "ready"
    afterwards; items can be added in both states. finalize() is only
    allowed when ready and may be called again (it recomputes).

    Args:
        config: Store configuration to charge the delivery fee from. When
            omitted, get_store_config() is read at summary/finalize time.
    """

    def __init__(self, config: Optional[StoreConfig] = None):
        self._items: list = []
        self._config = config
        self._payment_method: Optional[PaymentMethod] = None

    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def payment_method(self) -> Optional[PaymentMethod]:
        return self._payment_method

    @property
    def is_ready(self) -> bool:
        return self._payment_method is not None

    @property
    def config(self) -> StoreConfig:
        return self._config if self._config is not None else get_store_config()

    def add_item(self, name: str, price: Number) -> LineItem:
        """Append a line item. The price sign is not checked."""
        item = LineItem(name=name, price=to_decimal(price))
        self._items.append(item)
        logger.debug(f"Item added: {item.name} - {item.price}")
        return item

    def select_payment_method(self, method: PaymentMethod) -> None:
        """Set or replace the payment method; the last call wins."""
        self._payment_method = method

    def summary(self) -> OrderSummary:
        config = self.config
        subtotal = sum((item.price for item in self._items), Decimal("0"))
        return OrderSummary(
            store_name=config.name,
            items=self.items,
            subtotal=subtotal,
            delivery_fee=config.delivery_fee,
            total=subtotal + config.delivery_fee,
        )

    def finalize(self) -> PaymentOutcome:
        """
        Charge items + delivery fee through the selected payment method.

        Returns:
            PaymentOutcome produced by the payment method

        Raises:
            NoPaymentMethodSelected: no payment method was selected
        """
        if self._payment_method is None:
            raise NoPaymentMethodSelected()

        summary = self.summary()
        logger.debug(
            f"Finalizing order: {len(summary.items)} item(s), total {summary.total} "
            f"via {self._payment_method.get_name()}"
        )
        return self._payment_method.process(summary.total)
