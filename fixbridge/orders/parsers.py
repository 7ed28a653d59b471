"""
Exchange order record parsers.

Raw order records arrive as JSON objects with loosely typed values. Every
field is read through a typed accessor that raises on a wrong type instead of
substituting zero, false or an empty string.
"""

import math
from typing import Any, Mapping, Union

import orjson

from ..errors import MalformedDataError, MissingDataError
from .models import ExchangeOrder


def parse_json_payload(raw_data: Union[str, bytes]) -> Any:
    """
    Decode a JSON payload.

    Raises:
        MalformedDataError: If the payload is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(
            f"Invalid JSON payload: {e}",
            raw_data=str(raw_data)[:100],
            expected_format="json",
        ) from e


def _require(record: Mapping[str, Any], field: str) -> Any:
    if field not in record or record[field] is None:
        raise MissingDataError(f"Missing required field: {field}", data_type=field)
    return record[field]


def _wrong_type(field: str, value: Any, expected: str) -> MalformedDataError:
    return MalformedDataError(
        f"Field {field} must be {expected}, got {type(value).__name__}",
        raw_data=repr(value)[:100],
        expected_format=expected,
        field=field,
    )


def require_str(record: Mapping[str, Any], field: str) -> str:
    value = _require(record, field)
    if not isinstance(value, str):
        raise _wrong_type(field, value, "str")
    return value


def require_int(record: Mapping[str, Any], field: str) -> int:
    value = _require(record, field)
    # bool is an int subclass and never a valid identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(field, value, "int")
    return value


def require_bool(record: Mapping[str, Any], field: str) -> bool:
    value = _require(record, field)
    if not isinstance(value, bool):
        raise _wrong_type(field, value, "bool")
    return value


def optional_str(record: Mapping[str, Any], field: str, default: str = "") -> str:
    if record.get(field) is None:
        return default
    return require_str(record, field)


def optional_bool(record: Mapping[str, Any], field: str, default: bool = False) -> bool:
    if record.get(field) is None:
        return default
    return require_bool(record, field)


def parse_decimal(field: str, value: str) -> float:
    """
    Parse a decimal string field.

    Padding whitespace and digit-grouping underscores, both of which float()
    tolerates, are rejected.

    Raises:
        MalformedDataError: If value is not a finite decimal number
    """
    if not isinstance(value, str) or value != value.strip() or "_" in value:
        raise MalformedDataError(
            f"Field {field} is not a decimal number: {value!r}",
            raw_data=str(value)[:100],
            expected_format="decimal",
            field=field,
        )

    try:
        number = float(value)
    except ValueError as e:
        raise MalformedDataError(
            f"Field {field} is not a decimal number: {value!r}",
            raw_data=str(value)[:100],
            expected_format="decimal",
            field=field,
        ) from e

    if not math.isfinite(number):
        raise MalformedDataError(
            f"Field {field} is not a finite number: {value!r}",
            raw_data=str(value)[:100],
            expected_format="decimal",
            field=field,
        )
    return number


def parse_timestamp(field: str, value: str) -> int:
    """Parse an epoch-seconds decimal string, truncating the fraction."""
    return int(parse_decimal(field, value))


def parse_exchange_order(record: Mapping[str, Any]) -> ExchangeOrder:
    """
    Parse a raw v1 order object into an ExchangeOrder.

    Expected format:
    {
        "id": 448364249,
        "symbol": "btcusd",
        "exchange": "bitfinex",
        "price": "0.02",
        "avg_execution_price": "0.0",
        "side": "buy",
        "type": "exchange limit",
        "timestamp": "1444272165.252370982",
        "is_live": true,
        "is_cancelled": false,
        "is_hidden": false,
        "was_forced": false,
        "original_amount": "0.02",
        "remaining_amount": "0.02",
        "executed_amount": "0.0"
    }

    Args:
        record: Decoded JSON object

    Returns:
        ExchangeOrder with typed fields

    Raises:
        MissingDataError: If a required field is absent
        MalformedDataError: If a field has the wrong type
    """
    if not isinstance(record, Mapping):
        raise MalformedDataError(
            "Order record must be an object",
            raw_data=repr(record)[:100],
            expected_format="object",
        )

    return ExchangeOrder(
        id=require_int(record, "id"),
        symbol=require_str(record, "symbol"),
        price=require_str(record, "price"),
        avg_execution_price=require_str(record, "avg_execution_price"),
        side=require_str(record, "side"),
        type=require_str(record, "type"),
        timestamp=require_str(record, "timestamp"),
        original_amount=require_str(record, "original_amount"),
        remaining_amount=require_str(record, "remaining_amount"),
        executed_amount=optional_str(record, "executed_amount"),
        exchange=optional_str(record, "exchange"),
        is_live=optional_bool(record, "is_live"),
        is_canceled=optional_bool(record, "is_cancelled"),
        is_hidden=optional_bool(record, "is_hidden"),
        was_forced=optional_bool(record, "was_forced"),
    )
