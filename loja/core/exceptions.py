"""
Domain errors for the order / payment flow.

Every error raised by the core derives from LojaError so presentation layers
(CLI, HTTP API) can catch a single type and render the message.
"""

from typing import Optional


class LojaError(Exception):
    """Base class for recoverable domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownPaymentKind(LojaError):
    """Raised by the factory when the payment kind is not registered."""

    def __init__(self, kind: str, available: Optional[list] = None):
        self.kind = kind
        self.available = list(available or [])
        message = f"Tipo de pagamento '{kind}' não existe!"
        if self.available:
            message += f" Disponíveis: {', '.join(self.available)}"
        super().__init__(message)


class NoPaymentMethodSelected(LojaError):
    """Raised when an order is finalized before a payment method is chosen."""

    def __init__(self):
        super().__init__("Escolha uma forma de pagamento!")


class MalformedCardNumber(LojaError):
    """Raised when a card number has too few digits to be masked."""

    def __init__(self, card_number: str, min_digits: int = 16):
        self.card_number = card_number
        self.min_digits = min_digits
        super().__init__(
            f"Número de cartão inválido: esperado pelo menos {min_digits} dígitos, "
            f"recebido {len(card_number)}."
        )


class InvalidPaymentCredentials(LojaError):
    """Raised when supplied credentials do not fit the payment method."""

    def __init__(self, kind: str, reason: str):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Credenciais inválidas para '{kind}': {reason}")


class InvalidStoreConfig(LojaError):
    """Raised when the store configuration read from the environment is unusable."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Configuração da loja inválida: {reason}")
