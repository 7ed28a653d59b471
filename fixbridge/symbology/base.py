"""Symbology interface consumed by protocol handlers."""

from abc import ABC, abstractmethod

from .models import Translation


class Symbology(ABC):
    """Translates symbols between exchange form and a counterparty's form."""

    @abstractmethod
    def to_exchange(self, symbol: str, counterparty: str) -> Translation:
        """Translate a counterparty symbol into the exchange symbol."""

    @abstractmethod
    def to_counterparty(self, symbol: str, counterparty: str) -> Translation:
        """Translate an exchange symbol into the counterparty symbol."""


class PassthroughSymbology(Symbology):
    """Symbology that treats every counterparty's symbols as exchange symbols."""

    def to_exchange(self, symbol: str, counterparty: str) -> Translation:
        return Translation.hit(symbol)

    def to_counterparty(self, symbol: str, counterparty: str) -> Translation:
        return Translation.hit(symbol)
