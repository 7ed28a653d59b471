"""
Order normalization from exchange v1 records to canonical orders.

This module provides the OrderNormalizer class that transcribes v1 order
fields into the canonical Order, mapping state flags and type strings onto
the canonical enumerations.
"""

import logging
from typing import Any, Mapping, Optional, Union

from ..errors import MalformedDataError
from .models import ExchangeOrder, Order, OrderStatus, OrderType
from .parsers import parse_decimal, parse_exchange_order, parse_json_payload, parse_timestamp

logger = logging.getLogger(__name__)

SELL_SIDE = "sell"

ORDER_TYPES: dict[str, OrderType] = {
    "market": OrderType.MARKET,
    "limit": OrderType.LIMIT,
    "exchange limit": OrderType.EXCHANGE_LIMIT,
    "stop": OrderType.STOP,
    "trailing-stop": OrderType.TRAILING_STOP,
}


def map_status(source: ExchangeOrder) -> Optional[OrderStatus]:
    """Map v1 state flags to a canonical status; cancellation wins over liveness."""
    if source.is_canceled:
        return OrderStatus.CANCELED
    if source.is_live:
        return OrderStatus.ACTIVE
    return None


def map_type(order_type: str) -> Optional[OrderType]:
    """Map a v1 type string to a canonical type, None if unrecognized."""
    return ORDER_TYPES.get(order_type)


def side_multiplier(side: str) -> int:
    # Anything other than an explicit sell counts as a buy
    return -1 if side == SELL_SIDE else 1


class OrderNormalizer:
    """
    Converts exchange order records into canonical orders.

    Stateless; a single instance may be shared by every ingestion path.
    """

    def normalize(self, source: ExchangeOrder) -> Order:
        """
        Normalize a single exchange order.

        Args:
            source: Typed exchange order record

        Returns:
            Canonical Order

        Raises:
            MalformedDataError: If any numeric field cannot be parsed
        """
        ts = parse_timestamp("timestamp", source.timestamp)
        price = parse_decimal("price", source.price)
        price_avg = parse_decimal("avg_execution_price", source.avg_execution_price)
        amount_orig = parse_decimal("original_amount", source.original_amount)
        remaining = parse_decimal("remaining_amount", source.remaining_amount)

        order_type = map_type(source.type)
        if order_type is None:
            logger.debug(f"Unrecognized order type {source.type!r} for order {source.id}")

        return Order(
            id=source.id,
            symbol=source.symbol,
            mts_created=ts,
            mts_updated=ts,
            amount=remaining * side_multiplier(source.side),
            amount_orig=amount_orig,
            price=price,
            price_avg=price_avg,
            status=map_status(source),
            type=order_type,
            hidden=source.is_hidden,
        )

    def normalize_record(self, record: Mapping[str, Any]) -> Order:
        """Parse and normalize a decoded v1 order object."""
        return self.normalize(parse_exchange_order(record))

    def normalize_payload(self, raw_data: Union[str, bytes]) -> list[Order]:
        """
        Normalize a raw JSON payload holding one order or a list of orders.

        Args:
            raw_data: JSON text as received from the exchange

        Returns:
            Canonical orders in payload order

        Raises:
            MalformedDataError: If the payload or any order in it is malformed
            MissingDataError: If any order lacks a required field
        """
        payload = parse_json_payload(raw_data)

        if isinstance(payload, dict):
            return [self.normalize_record(payload)]
        if isinstance(payload, list):
            return [self.normalize_record(record) for record in payload]

        raise MalformedDataError(
            f"Order payload must be an object or a list, got {type(payload).__name__}",
            raw_data=str(raw_data)[:100],
            expected_format="object or list",
        )
