"""Loaders for securities data."""

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from .models import Security

# Each entry: (price, annual dividend yield)
REFERENCE_SECURITIES: dict[str, tuple[Decimal, Decimal]] = {
    "XUT": (Decimal("26.80"), Decimal("0.095")),
    "XTR": (Decimal("10.50"), Decimal("0.05")),
    "XRE": (Decimal("15.00"), Decimal("0.058")),
    "FIE": (Decimal("6.34"), Decimal("0.04")),
}

REQUIRED_FIELDS = ("symbol", "price", "dividend_yield")


def load_reference_securities() -> list[Security]:
    """Return the four reference securities (XUT, XTR, XRE, FIE)."""
    return [
        Security(symbol=symbol, price=price, dividend_yield=dividend_yield)
        for symbol, (price, dividend_yield) in REFERENCE_SECURITIES.items()
    ]


def load_securities(path: str | Path) -> list[Security]:
    """Load securities from a JSON file.

    The file holds an array of objects, for example:

        [{"symbol": "XUT", "price": 26.8, "dividend_yield": 0.095}]

    Args:
        path: Path to the JSON file.

    Returns:
        Securities in file order.

    Raises:
        ValueError: If the file is not an array or an entry is malformed.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_securities(data)


def parse_securities(data: object) -> list[Security]:
    if not isinstance(data, list):
        raise ValueError("Securities data must be a JSON array")

    securities: list[Security] = []
    seen: set[str] = set()
    for index, entry in enumerate(data):
        security = _parse_security(index, entry)
        if security.symbol in seen:
            raise ValueError(f"Entry {index} duplicates symbol '{security.symbol}'")
        seen.add(security.symbol)
        securities.append(security)

    return securities


def _parse_security(index: int, entry: object) -> Security:
    """Build a Security from one decoded JSON object.

    Raises:
        ValueError: If a field is missing or not numeric.
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Entry {index} must be an object, got {type(entry).__name__}")

    missing = [name for name in REQUIRED_FIELDS if name not in entry]
    if missing:
        raise ValueError(f"Entry {index} is missing fields: {', '.join(missing)}")

    symbol = str(entry["symbol"]).strip()
    if not symbol:
        raise ValueError(f"Entry {index} has an empty symbol")

    return Security(
        symbol=symbol,
        price=_parse_decimal(entry["price"], index, "price"),
        dividend_yield=_parse_decimal(entry["dividend_yield"], index, "dividend_yield"),
    )


def _parse_decimal(value: object, index: int, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"Entry {index} field '{field}' must be a number")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(
            f"Entry {index} field '{field}' must be a number, got {value!r}"
        ) from None
