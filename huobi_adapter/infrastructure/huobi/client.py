import time
from decimal import Decimal
from typing import Any, Callable, List, Optional

from huobi_adapter.core.exceptions import VendorRejectionError
from huobi_adapter.core.models import Account, ExchangeOption, Order, Period, Record, StockType, Ticker
from huobi_adapter.infrastructure.http import HttpTransport, decode_json
from .codes import PERIOD_CODES, STOCK_CODES
from .mapper import HuobiMapper, resolve_timezone
from .signer import RequestSigner, format_number

class HuobiClient:
    """
    Huobi v3 API 客戶端。
    負責處理簽章、請求，並將資料交給 Mapper 轉換。
    輸入須為已驗證的 StockType/Period；任何失敗都以 AdapterError 拋出，由呼叫端決定如何處理。
    """

    MARKET_PARAM = "market=cny"

    def __init__(
        self,
        option: ExchangeOption,
        transport: Optional[HttpTransport] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.host = option.host
        self.market_host = option.market_host.rstrip("/")
        self.transport = transport or HttpTransport(timeout=option.timeout)
        self.signer = RequestSigner(option.access_key, option.secret_key, clock=clock)
        self.tz = resolve_timezone(option.timezone)

    def _post_auth(self, params: List[str], *optionals: str) -> Any:
        signed = self.signer.sign(params)
        # optionals 不參與簽章
        form = RequestSigner.to_form(signed)
        form.extend(tuple(o.split("=", 1)) for o in optionals)
        data = decode_json(self.transport.post(self.host, form))
        HuobiMapper.check_code(data)
        return data

    def _get_public(self, url: str) -> Any:
        data = decode_json(self.transport.get(url))
        HuobiMapper.check_code(data)
        return data

    def get_account(self, main_stock: StockType) -> Account:
        """查詢帳戶資產，Stock/FrozenStock 依 main_stock 決定"""
        raw = self._post_auth(["method=get_account_info"], self.MARKET_PARAM)
        return HuobiMapper.to_account(raw, main_stock)

    def place_order(self, side: str, stock_type: StockType, price: Decimal, amount: Decimal) -> str:
        """
        下單。price > 0 為限價單，否則為市價單。
        side: "buy" 或 "sell"
        """
        params = [
            "coin_type=" + STOCK_CODES[stock_type],
            "amount=" + format_number(amount),
        ]
        method_param = f"method={side}_market"
        if price > 0:
            method_param = f"method={side}"
            params.append("price=" + format_number(price))
        params.append(method_param)
        raw = self._post_auth(params, self.MARKET_PARAM)
        return HuobiMapper.to_order_id(raw)

    def get_order(self, stock_type: StockType, order_id: str) -> Order:
        params = [
            "method=order_info",
            "coin_type=" + STOCK_CODES[stock_type],
            "id=" + order_id,
        ]
        raw = self._post_auth(params, self.MARKET_PARAM)
        return HuobiMapper.to_order(raw, stock_type)

    def cancel_order(self, stock_type: StockType, order_id: str) -> None:
        params = [
            "method=cancel_order",
            "coin_type=" + STOCK_CODES[stock_type],
            "id=" + order_id,
        ]
        raw = self._post_auth(params, self.MARKET_PARAM)
        if not isinstance(raw, dict) or raw.get("result") != "success":
            message = raw.get("msg") if isinstance(raw, dict) else None
            raise VendorRejectionError(message=message or f"unexpected cancel result: {raw!r}")

    def get_orders(self, stock_type: StockType) -> List[Order]:
        """獲取所有未成交訂單"""
        params = [
            "method=get_orders",
            "coin_type=" + STOCK_CODES[stock_type],
        ]
        return HuobiMapper.to_orders(self._post_auth(params), stock_type)

    def get_trades(self, stock_type: StockType) -> List[Order]:
        """獲取最近成交的訂單"""
        params = [
            "method=get_new_deal_orders",
            "coin_type=" + STOCK_CODES[stock_type],
        ]
        return HuobiMapper.to_orders(self._post_auth(params), stock_type)

    def get_ticker(self, stock_type: StockType, size: int) -> Ticker:
        url = f"{self.market_host}/staticmarket/depth_{stock_type.value.lower()}_{size}.js"
        return HuobiMapper.to_ticker(self._get_public(url))

    def get_records(self, stock_type: StockType, period: Period) -> List[Record]:
        """獲取 K 線，回傳由新到舊"""
        url = (
            f"{self.market_host}/staticmarket/"
            f"{stock_type.value.lower()}_kline_{PERIOD_CODES[period]}_json.js"
        )
        return HuobiMapper.to_records(self._get_public(url), self.tz)
