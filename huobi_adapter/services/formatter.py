from datetime import datetime, timezone
from typing import List

import pandas as pd

from huobi_adapter.core.models import Account, Order, Record, Ticker

RECORD_COLUMNS = ["open", "high", "low", "close", "volume"]


class ExchangeFormatter:
    @staticmethod
    def records_frame(records: List[Record]) -> pd.DataFrame:
        """
        Builds a DataFrame indexed by bar time (UTC), oldest bar first.
        """
        if not records:
            return pd.DataFrame(columns=RECORD_COLUMNS)

        df = pd.DataFrame(
            [[r.open, r.high, r.low, r.close, r.volume] for r in records],
            columns=RECORD_COLUMNS,
            index=pd.to_datetime([r.time for r in records], unit="s", utc=True),
        )
        df.index.name = "time"
        return df.astype(float)

    @staticmethod
    def format_records(records: List[Record]) -> str:
        if not records:
            return "No records."
        return ExchangeFormatter.records_frame(records).to_string()

    @staticmethod
    def format_record(record: Record) -> str:
        ts = datetime.fromtimestamp(record.time, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")
        return (
            f"{ts} O:{record.open} H:{record.high} L:{record.low} "
            f"C:{record.close} V:{record.volume}"
        )

    @staticmethod
    def format_account(account: Account, main_stock: str) -> str:
        lines = ["💰 Account"]
        lines.append(f"Total: {account.total}")
        lines.append(f"Net: {account.net}")
        lines.append(f"CNY: {account.balance} (frozen {account.frozen_balance})")
        lines.append(f"BTC: {account.btc} (frozen {account.frozen_btc})")
        lines.append(f"LTC: {account.ltc} (frozen {account.frozen_ltc})")
        lines.append(f"{main_stock} (main): {account.stock} (frozen {account.frozen_stock})")
        return "\n".join(lines)

    @staticmethod
    def format_ticker(ticker: Ticker, levels: int = 5) -> str:
        lines = [f"📈 Buy {ticker.buy} / Sell {ticker.sell} / Mid {ticker.mid}"]
        # asks 由遠到近印出，讓價格由上到下遞減
        for ask in reversed(ticker.asks[:levels]):
            lines.append(f"  ask {ask.price} x {ask.amount}")
        lines.append("  ----")
        for bid in ticker.bids[:levels]:
            lines.append(f"  bid {bid.price} x {bid.amount}")
        return "\n".join(lines)

    @staticmethod
    def format_orders(orders: List[Order]) -> str:
        if not orders:
            return "No orders."
        lines = []
        for i, o in enumerate(orders, 1):
            kind = o.order_type.name if o.order_type is not None else "UNKNOWN"
            lines.append(
                f"{i}) #{o.id} {o.stock_type.value} {kind} "
                f"price={o.price} amount={o.amount} filled={o.deal_amount}"
            )
        return "\n".join(lines)
