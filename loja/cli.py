"""
Demonstração de vendas no console.

Roda as três compras de exemplo (cartão, PIX e boleto) e imprime o resumo
do pedido e a confirmação do pagamento.

Uso (na raiz do projeto):
    python -m loja.cli            # as três compras
    python -m loja.cli pix        # só a compra com PIX
"""

import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from loja.core.config import get_store_config
from loja.core.exceptions import LojaError
from loja.core.logging import setup_logger
from loja.orders import Order, OrderSummary
from loja.payments import PaymentMethodFactory, PaymentOutcome, get_registry
from loja.utils.money import format_brl

LINE = "=" * 40

DEMO_PURCHASES: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("cartao", [("Mouse Gamer", "89.90"), ("Teclado Mecânico", "299.90")]),
    ("pix", [("Headset", "159.90")]),
    ("boleto", [("Webcam HD", "249.90"), ("Microfone USB", "179.90")]),
]

_DETAIL_LABELS = {
    "holder": "Titular",
    "card": "Cartão",
    "key": "Chave",
    "tax_id": "CPF",
    "code": "Código",
}


def render_summary(summary: OrderSummary) -> str:
    return "\n".join([
        "",
        LINE,
        f"  {summary.store_name}",
        LINE,
        f"Produtos: {format_brl(summary.subtotal)}",
        f"Entrega: {format_brl(summary.delivery_fee)}",
        f"TOTAL: {format_brl(summary.total)}",
        LINE,
    ])


def render_outcome(outcome: PaymentOutcome) -> str:
    method_class = get_registry().get(outcome.method)
    title = method_class.LABEL if method_class is not None else outcome.method.upper()
    lines = ["", f"--- {title} ---", f"Valor: {format_brl(outcome.amount)}"]
    for key, label in _DETAIL_LABELS.items():
        if key in outcome.details:
            lines.append(f"{label}: {outcome.details[key]}")
    mark = "✓" if outcome.succeeded else "✗"
    lines.append(f"{mark} {outcome.description}")
    return "\n".join(lines)


def run_purchase(kind: str, items: List[Tuple[str, str]]) -> PaymentOutcome:
    order = Order()
    for name, price in items:
        item = order.add_item(name, price)
        print(f"+ Adicionado: {item.name} - {format_brl(item.price)}")

    order.select_payment_method(PaymentMethodFactory.create(kind))
    outcome = order.finalize()
    print(render_summary(order.summary()))
    print(render_outcome(outcome))
    return outcome


def check_store_config() -> bool:
    first = get_store_config()
    second = get_store_config()
    if first is second:
        print("✓ É a mesma instância! Configuração única da loja funcionando!")
        return True
    print("✗ Instâncias diferentes da configuração da loja!")
    return False


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    load_dotenv()
    setup_logger()

    purchases = DEMO_PURCHASES
    if argv:
        kind = argv[0].strip().lower()
        purchases = [p for p in DEMO_PURCHASES if p[0] == kind]
        if not purchases:
            # kind desconhecido: a fábrica decide e reporta o erro
            purchases = [(kind, DEMO_PURCHASES[0][1])]

    print("SISTEMA DE VENDAS\n")
    print("=== CONFIGURAÇÃO DA LOJA ===")
    check_store_config()

    for number, (kind, items) in enumerate(purchases, start=1):
        print(f"\n\n=== COMPRA {number} ===")
        try:
            run_purchase(kind, items)
        except LojaError as e:
            print(f"ERRO: {e.message}")
            return 1

    print("\n\nFIM DAS DEMONSTRAÇÕES!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
