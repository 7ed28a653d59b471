"""
File-backed symbology table.

The table is built once from a mapping file and never mutated afterwards.
Replacing the mapping means loading a new table instance. Queries from any
number of protocol handlers are serialized through a single lock.
"""

import threading
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from ..errors import SymbologyLoadError
from ..logging import get_symbology_logger, log_translation_miss
from .base import Symbology
from .models import MissReason, SymbolSet, Translation
from .parser import parse_symbology


class SymbologyTable(Symbology):
    """
    Counterparty-scoped bidirectional symbol mapping.

    Exchange symbols map to counterparty symbols. Lookups toward the
    counterparty are keyed; lookups toward the exchange scan the
    counterparty's entries.
    """

    def __init__(self, counterparties: Mapping[str, SymbolSet]):
        self._counterparties = MappingProxyType(dict(counterparties))
        self._lock = threading.Lock()
        self.logger = get_symbology_logger(__name__)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SymbologyTable":
        """
        Load a symbology table from a mapping file.

        Args:
            path: Path to the mapping file

        Returns:
            Fully parsed SymbologyTable

        Raises:
            SymbologyLoadError: If the file cannot be opened or read
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                counterparties = parse_symbology(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SymbologyLoadError(
                f"Could not load symbology from {path}: {e}",
                path=str(path),
            ) from e

        table = cls(counterparties)
        table.logger.info(
            "Symbology loaded",
            path=str(path),
            counterparty_count=len(counterparties),
        )
        return table

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "SymbologyTable":
        """Build a table from already-split mapping lines."""
        return cls(parse_symbology(lines))

    @classmethod
    def from_text(cls, text: str) -> "SymbologyTable":
        """Build a table from the full text of a mapping file."""
        return cls.from_lines(text.split("\n"))

    def to_exchange(self, symbol: str, counterparty: str) -> Translation:
        """
        Translate a counterparty symbol into the exchange symbol.

        Args:
            symbol: Symbol in the counterparty's naming
            counterparty: Counterparty identifier

        Returns:
            Translation carrying the exchange symbol, or a miss
        """
        with self._lock:
            symbols = self._counterparties.get(counterparty)
            if symbols is None:
                return self._miss("to_exchange", symbol, counterparty,
                                  MissReason.UNKNOWN_COUNTERPARTY)
            if symbols.passthrough:
                return Translation.hit(symbol)

            exchange_symbol = symbols.to_exchange(symbol)
            if exchange_symbol is None:
                return self._miss("to_exchange", symbol, counterparty,
                                  MissReason.UNKNOWN_SYMBOL)
            return Translation.hit(exchange_symbol)

    def to_counterparty(self, symbol: str, counterparty: str) -> Translation:
        """
        Translate an exchange symbol into the counterparty symbol.

        Args:
            symbol: Exchange-native symbol
            counterparty: Counterparty identifier

        Returns:
            Translation carrying the counterparty symbol, or a miss
        """
        with self._lock:
            symbols = self._counterparties.get(counterparty)
            if symbols is None:
                return self._miss("to_counterparty", symbol, counterparty,
                                  MissReason.UNKNOWN_COUNTERPARTY)
            if symbols.passthrough:
                return Translation.hit(symbol)

            counterparty_symbol = symbols.to_counterparty(symbol)
            if counterparty_symbol is None:
                return self._miss("to_counterparty", symbol, counterparty,
                                  MissReason.UNKNOWN_SYMBOL)
            return Translation.hit(counterparty_symbol)

    def _miss(self, direction: str, symbol: str, counterparty: str,
              reason: MissReason) -> Translation:
        log_translation_miss(self.logger, direction, symbol, counterparty, reason.value)
        return Translation.miss(reason)

    @property
    def counterparties(self) -> tuple[str, ...]:
        """Configured counterparty names, sorted."""
        with self._lock:
            return tuple(sorted(self._counterparties))

    def is_passthrough(self, counterparty: str) -> bool:
        with self._lock:
            symbols = self._counterparties.get(counterparty)
            return symbols is not None and symbols.passthrough

    def __contains__(self, counterparty: object) -> bool:
        with self._lock:
            return counterparty in self._counterparties

    def __len__(self) -> int:
        return len(self._counterparties)
