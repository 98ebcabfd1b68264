from decimal import Decimal

from huobi_adapter.core.models import Account, MarketOrder, Order, OrderType, StockType, Ticker
from huobi_adapter.services.formatter import ExchangeFormatter
from conftest import bar

def test_records_frame():
    df = ExchangeFormatter.records_frame([bar(1704067200, 1), bar(1704067260, "2.5")])
    assert list(df.columns) == ["open", "high", "low", "close", "volume"]
    assert len(df) == 2
    assert df["close"].iloc[-1] == 2.5
    assert str(df.index[0]) == "2024-01-01 00:00:00+00:00"

def test_records_frame_empty():
    df = ExchangeFormatter.records_frame([])
    assert df.empty
    assert "close" in df.columns

def test_format_records_empty():
    assert ExchangeFormatter.format_records([]) == "No records."

def test_format_record():
    msg = ExchangeFormatter.format_record(bar(1704067200, 3))
    assert msg.startswith("2024-01-01 00:00")
    assert "C:3" in msg

def test_format_account():
    d = Decimal
    account = Account(d("10"), d("9"), d("5"), d("0"), d("1"), d("0"), d("2"), d("0.5"), d("2"), d("0.5"))
    msg = ExchangeFormatter.format_account(account, "LTC")
    assert "LTC (main): 2 (frozen 0.5)" in msg
    assert "CNY: 5" in msg

def test_format_ticker():
    ticker = Ticker(
        buy=Decimal("100"), sell=Decimal("102"), mid=Decimal("101"),
        bids=[MarketOrder(Decimal("100"), Decimal("1")), MarketOrder(Decimal("99"), Decimal("2"))],
        asks=[MarketOrder(Decimal("102"), Decimal("3"))],
    )
    lines = ExchangeFormatter.format_ticker(ticker).splitlines()
    assert lines[0] == "📈 Buy 100 / Sell 102 / Mid 101"
    assert lines[1] == "  ask 102 x 3"
    assert lines[-1] == "  bid 99 x 2"

def test_format_orders():
    orders = [
        Order("7", Decimal("10"), Decimal("1"), Decimal("0"), OrderType.SELL, StockType.BTC),
        Order("8", Decimal("0"), Decimal("2"), Decimal("2"), None, StockType.LTC),
    ]
    msg = ExchangeFormatter.format_orders(orders)
    assert "1) #7 BTC SELL" in msg
    assert "2) #8 LTC UNKNOWN" in msg
    assert ExchangeFormatter.format_orders([]) == "No orders."
