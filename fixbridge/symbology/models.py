"""
Symbol mapping data models.

A SymbolSet holds one counterparty's mapping from exchange-native symbols to
the counterparty's own symbols. Sets are assembled by SymbolSetBuilder while a
mapping file is parsed and frozen before any query can reach them.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


class MissReason(str, Enum):
    """Reasons a translation produced no symbol."""
    UNKNOWN_COUNTERPARTY = "unknown_counterparty"
    UNKNOWN_SYMBOL = "unknown_symbol"


@dataclass(frozen=True)
class SymbolSet:
    """Immutable exchange-to-counterparty symbol mapping for one counterparty."""

    entries: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    passthrough: bool = False

    def to_counterparty(self, exchange_symbol: str) -> Optional[str]:
        """Keyed lookup by exchange symbol."""
        return self.entries.get(exchange_symbol)

    def to_exchange(self, counterparty_symbol: str) -> Optional[str]:
        """Reverse lookup; scans every entry since the set is keyed by exchange symbol."""
        for exchange_symbol, mapped in self.entries.items():
            if mapped == counterparty_symbol:
                return exchange_symbol
        return None

    def __len__(self) -> int:
        return len(self.entries)


class SymbolSetBuilder:
    """Mutable accumulator used only while a mapping file is being parsed."""

    def __init__(self):
        self._entries: dict[str, str] = {}
        self._passthrough = False

    def set(self, exchange_symbol: str, counterparty_symbol: str) -> None:
        self._entries[exchange_symbol] = counterparty_symbol

    def enable_passthrough(self) -> None:
        self._passthrough = True

    def freeze(self) -> SymbolSet:
        return SymbolSet(
            entries=MappingProxyType(dict(self._entries)),
            passthrough=self._passthrough,
        )


@dataclass(frozen=True)
class Translation:
    """Outcome of a symbol translation."""

    symbol: str = ""
    found: bool = False
    reason: Optional[MissReason] = None

    @classmethod
    def hit(cls, symbol: str) -> "Translation":
        """Create a successful translation."""
        return cls(symbol=symbol, found=True)

    @classmethod
    def miss(cls, reason: MissReason) -> "Translation":
        """Create a failed translation."""
        return cls(symbol="", found=False, reason=reason)

    def __iter__(self) -> Iterator:
        # Unpacks as (symbol, found)
        yield self.symbol
        yield self.found

    def __bool__(self) -> bool:
        return self.found
