"""
Order data models.

ExchangeOrder mirrors the exchange's v1 order record, with numeric fields
still held as the decimal strings the exchange sends. Order is the canonical
representation used by the rest of the bridge.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OrderStatus(str, Enum):
    """
    Canonical order statuses.

    The canonical set is wider than what v1 records can express. The v1 mapping
    only yields ACTIVE, CANCELED or no status.
    """
    ACTIVE = "ACTIVE"
    EXECUTED = "EXECUTED"
    PARTIALLY_FILLED = "PARTIALLY FILLED"
    CANCELED = "CANCELED"


class OrderType(str, Enum):
    """Canonical order types."""
    MARKET = "MARKET"
    LIMIT = "LIMIT"
    EXCHANGE_LIMIT = "EXCHANGE LIMIT"
    STOP = "STOP"
    TRAILING_STOP = "TRAILING STOP"


@dataclass(frozen=True)
class ExchangeOrder:
    """Exchange v1 order record with explicitly typed fields."""
    id: int
    symbol: str
    price: str                  # Decimal string
    avg_execution_price: str    # Decimal string
    side: str                   # "buy" / "sell"
    type: str                   # "market", "exchange limit", ...
    timestamp: str              # Epoch seconds as decimal string
    original_amount: str        # Decimal string
    remaining_amount: str       # Decimal string, unsigned
    executed_amount: str = ""
    exchange: str = ""
    is_live: bool = False
    is_canceled: bool = False
    is_hidden: bool = False
    was_forced: bool = False


@dataclass(frozen=True)
class Order:
    """Canonical order representation."""
    id: int
    symbol: str
    mts_created: int
    mts_updated: int
    amount: float               # Remaining amount, negative for sells
    amount_orig: float
    price: float
    price_avg: float
    status: Optional[OrderStatus] = None
    type: Optional[OrderType] = None
    hidden: bool = False
