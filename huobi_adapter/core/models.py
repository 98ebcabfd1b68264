from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, IntEnum
from typing import List, Optional

from huobi_adapter.core.exceptions import ConfigurationError


class StockType(str, Enum):
    """支援的基礎資產 (base asset)。"""
    BTC = "BTC"
    LTC = "LTC"


class OrderType(IntEnum):
    """正規化的訂單類型：正數為買，負數為賣；1 為限價，2 為市價。"""
    BUY = 1
    SELL = -1
    BUY_MARKET = 2
    SELL_MARKET = -2


class Period(str, Enum):
    """K 線週期，從 1 分鐘到 1 週。"""
    M = "M"
    M5 = "M5"
    M15 = "M15"
    M30 = "M30"
    H = "H"
    D = "D"
    W = "W"


@dataclass(frozen=True)
class Account:
    """
    帳戶快照 (Domain Model)。
    每次查詢重新建立，不做快取。Stock/FrozenStock 依 main stock 從 BTC 或 LTC 欄位取值。
    """
    total: Decimal           # 總資產折合
    net: Decimal             # 淨資產
    balance: Decimal         # 可用 CNY
    frozen_balance: Decimal  # 凍結 CNY
    btc: Decimal
    frozen_btc: Decimal
    ltc: Decimal
    frozen_ltc: Decimal
    stock: Decimal           # main stock 可用
    frozen_stock: Decimal    # main stock 凍結


@dataclass(frozen=True)
class Order:
    id: str                  # 交易所端的訂單 ID，一律視為不透明字串
    price: Decimal
    amount: Decimal
    deal_amount: Decimal     # 累計成交量
    order_type: Optional[OrderType]
    stock_type: StockType

    def is_buy(self) -> bool:
        return self.order_type is not None and self.order_type > 0


@dataclass(frozen=True)
class MarketOrder:
    price: Decimal
    amount: Decimal


@dataclass(frozen=True)
class Ticker:
    """
    行情與深度快照。
    Bids/Asks 依距離中間價由近到遠排列 (最佳價在前)。
    """
    buy: Decimal
    sell: Decimal
    mid: Decimal
    bids: List[MarketOrder] = field(default_factory=list)
    asks: List[MarketOrder] = field(default_factory=list)


@dataclass(frozen=True)
class Record:
    """One candlestick bar. `time` is Unix epoch seconds aligned to the minute."""
    time: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal


@dataclass(frozen=True)
class ExchangeOption:
    """
    Per-adapter configuration input.
    `type` is the exchange category, also used as the log channel tag.
    """
    type: str = "huobi"
    access_key: str = ""
    secret_key: str = field(default="", repr=False)
    main_stock: str = StockType.BTC.value
    host: str = "https://api.huobi.com/apiv3"
    market_host: str = "http://api.huobi.com"
    timezone: str = "Asia/Shanghai"
    timeout: float = 10.0
    records_size: int = 200
    ticker_depth: int = 20

    @classmethod
    def from_settings(cls, settings) -> "ExchangeOption":
        if settings is None:
            raise ConfigurationError("Settings failed to load, cannot build ExchangeOption")
        return cls(
            type=settings.EXCHANGE_TYPE,
            access_key=settings.HUOBI_ACCESS_KEY,
            secret_key=settings.HUOBI_SECRET_KEY,
            main_stock=settings.HUOBI_MAIN_STOCK,
            host=settings.HUOBI_HOST,
            market_host=settings.HUOBI_MARKET_HOST,
            timezone=settings.HUOBI_TIMEZONE,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            records_size=settings.RECORDS_SIZE,
            ticker_depth=settings.TICKER_DEPTH,
        )
