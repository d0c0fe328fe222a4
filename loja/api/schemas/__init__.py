from loja.api.schemas.order import (
    CheckoutRequest,
    CheckoutResponse,
    ErrorResponse,
    LineItemIn,
    LineItemOut,
    PaymentMethodsResponse,
    PaymentOutcomeResponse,
    StoreResponse,
)
