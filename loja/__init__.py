# Loja - pedidos, taxa de entrega e formas de pagamento intercambiáveis.
#
# Subpacotes:
#   loja.core      configuração da loja, exceções e logging
#   loja.payments  formas de pagamento, registro e fábrica
#   loja.orders    pedido e resumo (subtotal, entrega, total)
#   loja.api       aplicação FastAPI

__version__ = "1.0.0"
