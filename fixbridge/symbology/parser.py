"""
Parser for the line-oriented symbology mapping format.

Counterparty names are wrapped in [square brackets] and head a block of
mapping lines. Left-hand values are exchange symbols, right-hand values are
counterparty symbols:

    [Bloomberg]
    tBTCUSD=BXY

    [Reuters]
    passthrough=true

Lines that do not fit the grammar are skipped rather than rejected.
"""

import logging
from typing import Iterable, Optional

from .models import SymbolSet, SymbolSetBuilder

logger = logging.getLogger(__name__)

PASSTHROUGH_KEY = "passthrough"
PASSTHROUGH_VALUE = "true"


def parse_section_header(line: str) -> Optional[str]:
    """Return the counterparty name if line is a `[name]` header."""
    if len(line) > 2 and line.startswith("[") and line.endswith("]"):
        return line[1:-1]
    return None


def parse_mapping_line(line: str) -> Optional[tuple[str, str]]:
    """Return (left, right) if line contains exactly one '=' delimiter."""
    parts = line.split("=")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def is_passthrough_entry(left: str, right: str) -> bool:
    return left.lower() == PASSTHROUGH_KEY and right.lower() == PASSTHROUGH_VALUE


class SymbologyBuilder:
    """Accumulates per-counterparty symbol sets during a single load."""

    def __init__(self):
        self._sections: dict[str, SymbolSetBuilder] = {}

    def section(self, counterparty: str) -> SymbolSetBuilder:
        """Get or create the builder for a counterparty."""
        if counterparty not in self._sections:
            self._sections[counterparty] = SymbolSetBuilder()
        return self._sections[counterparty]

    def freeze(self) -> dict[str, SymbolSet]:
        return {name: section.freeze() for name, section in self._sections.items()}


def feed_lines(builder: SymbologyBuilder, lines: Iterable[str]) -> int:
    """
    Feed mapping lines into a builder.

    Args:
        builder: Builder receiving the parsed sections
        lines: Raw lines, with or without trailing line terminators

    Returns:
        Number of lines that were skipped as uninterpretable
    """
    current: Optional[SymbolSetBuilder] = None
    skipped = 0

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")

        counterparty = parse_section_header(line)
        if counterparty is not None:
            current = builder.section(counterparty)
            continue

        pair = parse_mapping_line(line)
        if pair is None or current is None:
            if line:
                skipped += 1
            continue

        left, right = pair
        if is_passthrough_entry(left, right):
            current.enable_passthrough()
        else:
            current.set(left, right)

    return skipped


def parse_symbology(lines: Iterable[str]) -> dict[str, SymbolSet]:
    """Parse mapping lines into frozen symbol sets keyed by counterparty."""
    builder = SymbologyBuilder()
    skipped = feed_lines(builder, lines)
    if skipped:
        logger.debug(f"Skipped {skipped} uninterpretable symbology lines")
    return builder.freeze()
