"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Dict, Any

from fixbridge.symbology import SymbologyTable


SAMPLE_SYMBOLOGY = """[Bloomberg]
tBTCUSD=BXY
tETHUSD=EXY
tLTCUSD=LXY

[Reuters]
passthrough=true

[Empty]
"""


@pytest.fixture
def symbology_text() -> str:
    """Mapping file text covering mapped, passthrough and empty counterparties."""
    return SAMPLE_SYMBOLOGY


@pytest.fixture
def symbology_table(symbology_text: str) -> SymbologyTable:
    """Table parsed from the sample mapping text."""
    return SymbologyTable.from_text(symbology_text)


@pytest.fixture
def symbology_file(tmp_path: Path, symbology_text: str) -> Path:
    """Sample mapping text written to disk."""
    path = tmp_path / "symbology.conf"
    path.write_text(symbology_text, encoding="utf-8")
    return path


@pytest.fixture
def sample_v1_order() -> Dict[str, Any]:
    """Exchange v1 order record as decoded from JSON."""
    return {
        "id": 448364249,
        "symbol": "btcusd",
        "exchange": "bitfinex",
        "price": "9500.5",
        "avg_execution_price": "9499.75",
        "side": "buy",
        "type": "exchange limit",
        "timestamp": "1567590617.442",
        "is_live": True,
        "is_cancelled": False,
        "is_hidden": False,
        "was_forced": False,
        "original_amount": "2.0",
        "remaining_amount": "1.5",
        "executed_amount": "0.5",
    }
