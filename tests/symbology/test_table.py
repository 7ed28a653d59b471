"""Tests for the symbology table query operations."""

import pytest
from pathlib import Path
from types import MappingProxyType
from unittest.mock import Mock

from fixbridge.errors import SymbologyLoadError, SystemFailureError
from fixbridge.symbology import (
    MissReason,
    PassthroughSymbology,
    Symbology,
    SymbolSet,
    SymbologyTable,
    Translation,
)


class TestScenarios:
    """Test the documented translation scenarios."""

    def test_bloomberg_mapping(self):
        table = SymbologyTable.from_text("[Bloomberg]\ntBTCUSD=BXY\n")

        assert tuple(table.to_counterparty("tBTCUSD", "Bloomberg")) == ("BXY", True)
        assert tuple(table.to_exchange("BXY", "Bloomberg")) == ("tBTCUSD", True)
        assert tuple(table.to_exchange("ZZZ", "Bloomberg")) == ("", False)

    def test_reuters_passthrough(self):
        table = SymbologyTable.from_text("[Reuters]\npassthrough=true\n")

        assert tuple(table.to_exchange("tETHUSD", "Reuters")) == ("tETHUSD", True)


class TestToCounterparty:
    """Test exchange-to-counterparty translation."""

    def test_mapped_symbol(self, symbology_table):
        result = symbology_table.to_counterparty("tETHUSD", "Bloomberg")

        assert result == Translation.hit("EXY")
        assert result.reason is None

    def test_unmapped_symbol(self, symbology_table):
        result = symbology_table.to_counterparty("tXRPUSD", "Bloomberg")

        assert result.found is False
        assert result.symbol == ""
        assert result.reason == MissReason.UNKNOWN_SYMBOL

    def test_unknown_counterparty(self, symbology_table):
        result = symbology_table.to_counterparty("tBTCUSD", "Nobody")

        assert result.found is False
        assert result.reason == MissReason.UNKNOWN_COUNTERPARTY

    def test_empty_counterparty_identifier(self, symbology_table):
        result = symbology_table.to_counterparty("tBTCUSD", "")

        assert result.reason == MissReason.UNKNOWN_COUNTERPARTY

    def test_passthrough_returns_input(self, symbology_table):
        assert symbology_table.to_counterparty("anything", "Reuters") == Translation.hit("anything")

    def test_empty_section_has_no_symbols(self, symbology_table):
        result = symbology_table.to_counterparty("tBTCUSD", "Empty")

        assert result.reason == MissReason.UNKNOWN_SYMBOL


class TestToExchange:
    """Test counterparty-to-exchange translation."""

    def test_mapped_symbol(self, symbology_table):
        assert symbology_table.to_exchange("LXY", "Bloomberg") == Translation.hit("tLTCUSD")

    def test_exchange_symbol_is_not_a_counterparty_symbol(self, symbology_table):
        result = symbology_table.to_exchange("tBTCUSD", "Bloomberg")

        assert result.reason == MissReason.UNKNOWN_SYMBOL

    def test_unknown_counterparty(self, symbology_table):
        result = symbology_table.to_exchange("BXY", "Nobody")

        assert result.found is False
        assert result.reason == MissReason.UNKNOWN_COUNTERPARTY

    def test_passthrough_returns_input(self, symbology_table):
        assert symbology_table.to_exchange("BXY", "Reuters") == Translation.hit("BXY")

    def test_counterparties_are_isolated(self):
        table = SymbologyTable.from_text(
            "[Bloomberg]\ntBTCUSD=BXY\n[Kraken]\ntBTCUSD=XXBTZUSD\n"
        )

        assert not table.to_exchange("XXBTZUSD", "Bloomberg").found
        assert not table.to_exchange("BXY", "Kraken").found
        assert table.to_exchange("XXBTZUSD", "Kraken").symbol == "tBTCUSD"


class TestRoundTrip:
    """Test that configured pairs translate in both directions."""

    def test_every_configured_pair_round_trips(self, symbology_table):
        pairs = [("tBTCUSD", "BXY"), ("tETHUSD", "EXY"), ("tLTCUSD", "LXY")]

        for exchange_symbol, counterparty_symbol in pairs:
            assert symbology_table.to_counterparty(exchange_symbol, "Bloomberg") == \
                Translation.hit(counterparty_symbol)
            assert symbology_table.to_exchange(counterparty_symbol, "Bloomberg") == \
                Translation.hit(exchange_symbol)

    def test_passthrough_is_identity_both_ways(self, symbology_table):
        for symbol in ["tBTCUSD", "BXY", "x", "EUR/USD"]:
            assert tuple(symbology_table.to_exchange(symbol, "Reuters")) == (symbol, True)
            assert tuple(symbology_table.to_counterparty(symbol, "Reuters")) == (symbol, True)

    def test_unconfigured_counterparty_misses_both_ways(self, symbology_table):
        for symbol in ["tBTCUSD", "BXY", ""]:
            assert not symbology_table.to_exchange(symbol, "Unknown").found
            assert not symbology_table.to_counterparty(symbol, "Unknown").found

    def test_last_write_wins(self):
        table = SymbologyTable.from_text("[Bloomberg]\ntBTCUSD=OLD\ntBTCUSD=NEW\n")

        assert table.to_counterparty("tBTCUSD", "Bloomberg").symbol == "NEW"
        assert table.to_exchange("NEW", "Bloomberg").symbol == "tBTCUSD"
        assert not table.to_exchange("OLD", "Bloomberg").found


class TestTranslation:
    """Test the translation result type."""

    def test_unpacks_as_symbol_and_found(self):
        symbol, found = Translation.hit("BXY")

        assert symbol == "BXY"
        assert found is True

    def test_truthiness_follows_found(self):
        assert Translation.hit("BXY")
        assert not Translation.miss(MissReason.UNKNOWN_SYMBOL)


class TestTableIntrospection:
    """Test read-only table accessors."""

    def test_counterparties_sorted(self, symbology_table):
        assert symbology_table.counterparties == ("Bloomberg", "Empty", "Reuters")
        assert len(symbology_table) == 3

    def test_contains(self, symbology_table):
        assert "Empty" in symbology_table
        assert "Nobody" not in symbology_table

    def test_is_passthrough(self, symbology_table):
        assert symbology_table.is_passthrough("Reuters") is True
        assert symbology_table.is_passthrough("Bloomberg") is False
        assert symbology_table.is_passthrough("Nobody") is False

    def test_table_is_a_symbology(self, symbology_table):
        assert isinstance(symbology_table, Symbology)

    def test_source_mapping_changes_do_not_leak(self):
        counterparties = {"Bloomberg": SymbolSet(entries=MappingProxyType({"tBTCUSD": "BXY"}))}
        table = SymbologyTable(counterparties)

        counterparties["Kraken"] = SymbolSet()

        assert "Kraken" not in table
        assert table.counterparties == ("Bloomberg",)


class TestLoad:
    """Test loading tables from disk."""

    def test_load_from_file(self, symbology_file: Path):
        table = SymbologyTable.load(symbology_file)

        assert table.counterparties == ("Bloomberg", "Empty", "Reuters")
        assert table.to_counterparty("tBTCUSD", "Bloomberg").symbol == "BXY"

    def test_load_accepts_str_path(self, symbology_file: Path):
        table = SymbologyTable.load(str(symbology_file))

        assert "Reuters" in table

    def test_load_windows_line_endings(self, tmp_path: Path):
        path = tmp_path / "crlf.conf"
        path.write_bytes(b"[Bloomberg]\r\ntBTCUSD=BXY\r\n")

        table = SymbologyTable.load(path)

        assert table.to_exchange("BXY", "Bloomberg").symbol == "tBTCUSD"

    def test_missing_file_raises_load_error(self, tmp_path: Path):
        missing = tmp_path / "missing.conf"

        with pytest.raises(SymbologyLoadError) as exc_info:
            SymbologyTable.load(missing)

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert isinstance(exc_info.value, SystemFailureError)
        assert exc_info.value.recoverable is False

    def test_directory_raises_load_error(self, tmp_path: Path):
        with pytest.raises(SymbologyLoadError):
            SymbologyTable.load(tmp_path)

    def test_undecodable_file_raises_load_error(self, tmp_path: Path):
        path = tmp_path / "latin1.conf"
        path.write_bytes(b"[Bloomberg]\ntBTCUSD=\xff\xfe\n")

        with pytest.raises(SymbologyLoadError) as exc_info:
            SymbologyTable.load(path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_reload_produces_independent_table(self, symbology_file: Path):
        first = SymbologyTable.load(symbology_file)
        symbology_file.write_text("[Kraken]\ntBTCUSD=XXBTZUSD\n", encoding="utf-8")

        second = SymbologyTable.load(symbology_file)

        assert first.counterparties == ("Bloomberg", "Empty", "Reuters")
        assert second.counterparties == ("Kraken",)


class TestMissLogging:
    """Test diagnostic logging on failed translations."""

    def setup_method(self):
        self.table = SymbologyTable.from_text("[Bloomberg]\ntBTCUSD=BXY\n[Reuters]\npassthrough=true\n")
        self.mock_logger = Mock()
        self.table.logger = self.mock_logger

    def test_unknown_counterparty_is_logged(self):
        self.table.to_exchange("BXY", "Nobody")

        self.mock_logger.warning.assert_called_once_with(
            "Symbol translation failed",
            direction="to_exchange",
            symbol="BXY",
            counterparty="Nobody",
            reason="unknown_counterparty",
        )

    def test_unknown_symbol_is_logged(self):
        self.table.to_exchange("ZZZ", "Bloomberg")

        kwargs = self.mock_logger.warning.call_args.kwargs
        assert kwargs["symbol"] == "ZZZ"
        assert kwargs["counterparty"] == "Bloomberg"
        assert kwargs["reason"] == "unknown_symbol"

    def test_counterparty_direction_misses_are_logged(self):
        self.table.to_counterparty("tETHUSD", "Bloomberg")
        self.table.to_counterparty("tETHUSD", "Nobody")

        assert self.mock_logger.warning.call_count == 2
        directions = {c.kwargs["direction"] for c in self.mock_logger.warning.call_args_list}
        assert directions == {"to_counterparty"}

    def test_hits_are_not_logged(self):
        self.table.to_exchange("BXY", "Bloomberg")
        self.table.to_counterparty("tBTCUSD", "Bloomberg")
        self.table.to_exchange("anything", "Reuters")

        self.mock_logger.warning.assert_not_called()


class TestPassthroughSymbology:
    """Test the mapping-free symbology."""

    def test_every_counterparty_is_identity(self):
        symbology = PassthroughSymbology()

        assert symbology.to_exchange("BXY", "Bloomberg") == Translation.hit("BXY")
        assert symbology.to_counterparty("tBTCUSD", "") == Translation.hit("tBTCUSD")
