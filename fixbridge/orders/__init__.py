"""
Order ingestion and normalization.

Converts the exchange's v1 order records into the canonical order
representation used by the bridge.
"""
from .models import ExchangeOrder, Order, OrderStatus, OrderType
from .normalizer import OrderNormalizer

__all__ = ["ExchangeOrder", "Order", "OrderNormalizer", "OrderStatus", "OrderType"]
