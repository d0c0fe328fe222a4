"""
Pytest global configuration for Loja.

Este conftest foi projetado para:
- Isolar a configuração da loja entre testes (variáveis de ambiente e cache)
- Testar a API FastAPI sem servidor
- Fornecer pedidos e configurações prontos para os cenários de compra
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from loja.api.main import app
from loja.core.config import StoreConfig, reset_store_config
from loja.orders import Order

# ============================================================================
# STORE CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_store_config(monkeypatch):
    """
    Remove STORE_* do ambiente e descarta a configuração em cache,
    antes e depois de cada teste.
    """
    monkeypatch.delenv("STORE_NAME", raising=False)
    monkeypatch.delenv("STORE_DELIVERY_FEE", raising=False)
    reset_store_config()
    yield
    reset_store_config()


@pytest.fixture
def store_config():
    """Configuração explícita com os valores padrão da loja."""
    return StoreConfig(name="Loja do João", delivery_fee=Decimal("10.0"))


@pytest.fixture
def order(store_config):
    """Pedido vazio usando a configuração explícita."""
    return Order(config=store_config)


# ============================================================================
# FASTAPI CLIENT
# ============================================================================

@pytest.fixture(scope="function")
def test_client():
    """Cria TestClient FastAPI (sem lifespan, sem rede)."""
    client = TestClient(app)
    yield client


# ============================================================================
# PAYLOADS
# ============================================================================

@pytest.fixture
def card_checkout_payload():
    """Compra 1 do exemplo: dois produtos pagos com cartão."""
    return {
        "items": [
            {"name": "Mouse Gamer", "price": "89.90"},
            {"name": "Teclado Mecânico", "price": "299.90"},
        ],
        "payment_method": "cartao",
    }
