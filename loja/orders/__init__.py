from loja.orders.order import LineItem, Order, OrderSummary

__all__ = ["LineItem", "Order", "OrderSummary"]
