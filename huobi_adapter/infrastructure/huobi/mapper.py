from datetime import datetime, timezone, tzinfo
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from huobi_adapter.config.logging import logger
from huobi_adapter.core.exceptions import MalformedResponseError, VendorRejectionError
from huobi_adapter.core.models import (
    Account,
    MarketOrder,
    Order,
    Record,
    StockType,
    Ticker,
)
from . import codes

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Best-effort numeric coercion; anything that is not a finite number becomes zero."""
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not number.is_finite():
        return ZERO
    return number


def to_order_id(value: Any) -> str:
    # 訂單 ID 不假設為固定寬度整數，數字或字串都原樣保留
    if value is None or isinstance(value, (bool, dict, list)) or value == "":
        raise MalformedResponseError(f"Missing or invalid order id: {value!r}")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone {name}, falling back to UTC")
        return timezone.utc


def parse_record_time(value: Any, tz: tzinfo) -> int:
    """
    Parse the compact vendor datetime (``YYYYMMDDHHMMSSmmm``) into Unix epoch
    seconds. Only the first 12 characters (minute precision) are significant.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or len(value) < 12 or not value[:12].isdigit():
        raise MalformedResponseError(f"Invalid record datetime: {value!r}")
    try:
        moment = datetime.strptime(value[:12], "%Y%m%d%H%M")
    except ValueError:
        raise MalformedResponseError(f"Invalid record datetime: {value!r}")
    return int(moment.replace(tzinfo=tz).timestamp())


def _index(values: Any, i: int) -> Any:
    if isinstance(values, (list, tuple)) and len(values) > i:
        return values[i]
    return None


def _require_dict(raw: Any, what: str) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"Expected an object for {what}, got {type(raw).__name__}")
    return raw


def _require_list(raw: Any, what: str) -> List[Any]:
    if not isinstance(raw, list):
        raise MalformedResponseError(f"Expected an array for {what}, got {type(raw).__name__}")
    return raw


class HuobiMapper:
    """
    負責將 Huobi API 的原始 JSON 資料轉換為核心 Domain Models。
    數值欄位寬鬆轉換 (無法轉換時為 0)；錯誤碼與結構錯誤則直接拋出例外，不回傳部分結果。
    """

    @staticmethod
    def check_code(raw: Any) -> None:
        """
        成功的回應通常沒有 code 欄位；有 code 且非 0 即為交易所拒絕。
        """
        if not isinstance(raw, dict) or raw.get("code") is None:
            return
        code = raw["code"]
        if isinstance(code, bool):
            raise MalformedResponseError(f"Invalid status code: {code!r}")
        try:
            code = int(code)
        except (TypeError, ValueError):
            raise MalformedResponseError(f"Invalid status code: {code!r}")
        if code != 0:
            raise VendorRejectionError(code, raw.get("msg") or raw.get("message"))

    @staticmethod
    def to_account(raw: Any, main_stock: StockType) -> Account:
        raw = _require_dict(raw, "account")
        btc = to_decimal(raw.get("available_btc_display"))
        frozen_btc = to_decimal(raw.get("frozen_btc_display"))
        ltc = to_decimal(raw.get("available_ltc_display"))
        frozen_ltc = to_decimal(raw.get("frozen_ltc_display"))
        if main_stock == StockType.LTC:
            stock, frozen_stock = ltc, frozen_ltc
        else:
            stock, frozen_stock = btc, frozen_btc
        return Account(
            total=to_decimal(raw.get("total")),
            net=to_decimal(raw.get("net_asset")),
            balance=to_decimal(raw.get("available_cny_display")),
            frozen_balance=to_decimal(raw.get("frozen_cny_display")),
            btc=btc,
            frozen_btc=frozen_btc,
            ltc=ltc,
            frozen_ltc=frozen_ltc,
            stock=stock,
            frozen_stock=frozen_stock,
        )

    @staticmethod
    def to_order_id(raw: Any) -> str:
        return to_order_id(_require_dict(raw, "order result").get("id"))

    @staticmethod
    def to_order(raw: Any, stock_type: StockType) -> Order:
        raw = _require_dict(raw, "order")
        return Order(
            id=to_order_id(raw.get("id")),
            price=to_decimal(raw.get("order_price")),
            amount=to_decimal(raw.get("order_amount")),
            deal_amount=to_decimal(raw.get("processed_amount")),
            order_type=codes.order_type(raw.get("type")),
            stock_type=stock_type,
        )

    @staticmethod
    def to_orders(raw: Any, stock_type: StockType) -> List[Order]:
        return [HuobiMapper.to_order(o, stock_type) for o in _require_list(raw, "orders")]

    @staticmethod
    def to_market_orders(levels: Any) -> List[MarketOrder]:
        if levels is None:
            return []
        return [
            MarketOrder(price=to_decimal(_index(level, 0)), amount=to_decimal(_index(level, 1)))
            for level in _require_list(levels, "depth")
        ]

    @staticmethod
    def to_ticker(raw: Any) -> Ticker:
        raw = _require_dict(raw, "depth")
        bids = HuobiMapper.to_market_orders(raw.get("bids"))
        asks = HuobiMapper.to_market_orders(raw.get("asks"))
        if not bids or not asks:
            raise MalformedResponseError("can not get enough Bids or Asks")
        buy = bids[0].price
        sell = asks[0].price
        return Ticker(buy=buy, sell=sell, mid=(buy + sell) / 2, bids=bids, asks=asks)

    @staticmethod
    def to_record(raw: Sequence[Any], tz: tzinfo) -> Record:
        if not isinstance(raw, (list, tuple)) or not raw:
            raise MalformedResponseError(f"Invalid record entry: {raw!r}")
        return Record(
            time=parse_record_time(raw[0], tz),
            open=to_decimal(_index(raw, 1)),
            high=to_decimal(_index(raw, 2)),
            low=to_decimal(_index(raw, 3)),
            close=to_decimal(_index(raw, 4)),
            volume=to_decimal(_index(raw, 5)),
        )

    @staticmethod
    def to_records(raw: Any, tz: tzinfo) -> List[Record]:
        """
        Huobi 回傳的 K 線由舊到新；這裡反轉成由新到舊，交給 RecordWindow 對帳。
        """
        entries = _require_list(raw, "records")
        return [HuobiMapper.to_record(entry, tz) for entry in reversed(entries)]
