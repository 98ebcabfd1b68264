"""
Huobi vendor code tables.

Each lookup is total over its closed input domain and returns ``None`` for
anything else; callers turn ``None`` into an input validation error before any
request is issued.
"""

from typing import Any, Optional, Union

from huobi_adapter.core.models import OrderType, Period, StockType

STOCK_CODES = {
    StockType.BTC: "1",
    StockType.LTC: "2",
}

ORDER_TYPE_CODES = {
    "1": OrderType.BUY,
    "2": OrderType.SELL,
    "3": OrderType.BUY_MARKET,
    "4": OrderType.SELL_MARKET,
}

PERIOD_CODES = {
    Period.M: "001",
    Period.M5: "005",
    Period.M15: "015",
    Period.M30: "030",
    Period.H: "060",
    Period.D: "100",
    Period.W: "200",
}


def parse_stock(stock: Union[str, StockType, None]) -> Optional[StockType]:
    try:
        return StockType(stock)
    except ValueError:
        return None


def parse_period(period: Union[str, Period, None]) -> Optional[Period]:
    try:
        return Period(period)
    except ValueError:
        return None


def stock_code(stock: Union[str, StockType, None]) -> Optional[str]:
    parsed = parse_stock(stock)
    if parsed is None:
        return None
    return STOCK_CODES[parsed]


def period_code(period: Union[str, Period, None]) -> Optional[str]:
    parsed = parse_period(period)
    if parsed is None:
        return None
    return PERIOD_CODES[parsed]


def order_type(vendor_code: Any) -> Optional[OrderType]:
    # the vendor sends the type as a number or a string
    if vendor_code is None or isinstance(vendor_code, bool):
        return None
    return ORDER_TYPE_CODES.get(str(vendor_code))
