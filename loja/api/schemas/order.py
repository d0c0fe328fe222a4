from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class LineItemIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0)


class CheckoutRequest(BaseModel):
    items: List[LineItemIn] = Field(default_factory=list)
    payment_method: Optional[str] = Field(None, description="cartao | pix | boleto")
    credentials: Optional[Dict[str, str]] = None


class LineItemOut(BaseModel):
    name: str
    price: Decimal
    model_config = ConfigDict(from_attributes=True)


class PaymentOutcomeResponse(BaseModel):
    succeeded: bool
    description: str
    method: str
    amount: Decimal
    details: Dict[str, str] = Field(default_factory=dict)
    model_config = ConfigDict(from_attributes=True)


class CheckoutResponse(BaseModel):
    store_name: str
    items: List[LineItemOut]
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal
    payment: PaymentOutcomeResponse


class StoreResponse(BaseModel):
    name: str
    delivery_fee: Decimal
    model_config = ConfigDict(from_attributes=True)


class PaymentMethodsResponse(BaseModel):
    kinds: List[str]


class ErrorResponse(BaseModel):
    error: str
    message: str
