"""
Symbol translation between exchange-native and counterparty naming.

Mapping files are parsed once into an immutable SymbologyTable that protocol
handlers query concurrently.
"""
from .base import PassthroughSymbology, Symbology
from .models import MissReason, SymbolSet, Translation
from .table import SymbologyTable

__all__ = [
    "MissReason",
    "PassthroughSymbology",
    "Symbology",
    "SymbolSet",
    "SymbologyTable",
    "Translation",
]
