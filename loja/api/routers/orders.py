"""
Orders Router - checkout, store configuration and payment kinds.
"""

import logging

from fastapi import APIRouter

from loja.api.schemas import (
    CheckoutRequest,
    CheckoutResponse,
    ErrorResponse,
    LineItemOut,
    PaymentMethodsResponse,
    PaymentOutcomeResponse,
    StoreResponse,
)
from loja.core.config import get_store_config
from loja.orders import Order
from loja.payments import PaymentMethodFactory

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/store", response_model=StoreResponse)
async def get_store():
    """Current store configuration (name and delivery fee)."""
    return StoreResponse.model_validate(get_store_config())


@router.get("/payment-methods", response_model=PaymentMethodsResponse)
async def list_payment_methods():
    """Payment kinds accepted by POST /orders/checkout."""
    return PaymentMethodsResponse(kinds=PaymentMethodFactory.list_available())


@router.post(
    "/orders/checkout",
    response_model=CheckoutResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Unknown payment kind or invalid credentials"},
        409: {"model": ErrorResponse, "description": "No payment method selected"},
        422: {"model": ErrorResponse, "description": "Malformed card number"},
    },
)
async def checkout(body: CheckoutRequest):
    """
    Build an order from the request, charge it and return the breakdown.

    Domain errors (unknown kind, no method, bad card) are turned into JSON
    responses by the LojaError handler in loja.api.main.
    """
    order = Order()
    for item in body.items:
        order.add_item(item.name, item.price)

    if body.payment_method is not None:
        order.select_payment_method(
            PaymentMethodFactory.create(body.payment_method, body.credentials)
        )

    outcome = order.finalize()
    summary = order.summary()
    logger.info(
        f"Checkout via {outcome.method}: total {summary.total} "
        f"({'aprovado' if outcome.succeeded else 'recusado'})"
    )
    return CheckoutResponse(
        store_name=summary.store_name,
        items=[LineItemOut.model_validate(i) for i in summary.items],
        subtotal=summary.subtotal,
        delivery_fee=summary.delivery_fee,
        total=summary.total,
        payment=PaymentOutcomeResponse.model_validate(outcome),
    )
