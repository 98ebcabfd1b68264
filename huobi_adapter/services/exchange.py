from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from huobi_adapter.config.logging import TradeLogger
from huobi_adapter.config.settings import settings
from huobi_adapter.core.exceptions import AdapterError, InputValidationError
from huobi_adapter.core.exchange import ExchangeAdapter
from huobi_adapter.core.models import (
    Account,
    ExchangeOption,
    Order,
    Period,
    Record,
    StockType,
    Ticker,
)
from huobi_adapter.infrastructure.http import HttpTransport
from huobi_adapter.infrastructure.huobi.client import HuobiClient
from huobi_adapter.infrastructure.huobi.codes import parse_period, parse_stock
from huobi_adapter.services.records import RecordWindow

class HuobiExchange(ExchangeAdapter):
    """
    Huobi adapter。
    流程：驗證輸入 → HuobiClient (簽章、請求、正規化) → K 線對帳 → 回傳。
    失敗時寫入 trade log 並記在 last_error，回傳零值，不向呼叫端拋出例外。
    """

    def __init__(
        self,
        option: Optional[ExchangeOption] = None,
        client: Optional[HuobiClient] = None,
        trade_log: Optional[TradeLogger] = None,
        transport: Optional[HttpTransport] = None,
    ):
        self.option = option or ExchangeOption.from_settings(settings)
        self.trade_log = trade_log or TradeLogger(self.option.type)
        self.client = client or HuobiClient(self.option, transport=transport)
        self.records = RecordWindow()
        self.last_error: Optional[AdapterError] = None
        self._main_stock = parse_stock(self.option.main_stock) or StockType.BTC

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _fail(self, operation: str, error: AdapterError) -> None:
        self.last_error = error
        self.trade_log.do("error", 0, 0, f"{operation}() error, {error}")

    def _stock(self, stock_type: Any) -> StockType:
        stock = parse_stock(stock_type)
        if stock is None:
            raise InputValidationError(f"unrecognized stockType: {stock_type}")
        return stock

    def _period(self, period: Any) -> Period:
        parsed = parse_period(period)
        if parsed is None:
            raise InputValidationError(f"unrecognized period: {period}")
        return parsed

    @staticmethod
    def _number(value: Any, name: str) -> Decimal:
        try:
            number = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InputValidationError(f"invalid {name}: {value}")
        if not number.is_finite():
            raise InputValidationError(f"invalid {name}: {value}")
        return number

    @staticmethod
    def _order_id(order_id: Any) -> str:
        if order_id is None or str(order_id) == "":
            raise InputValidationError(f"unrecognized order id: {order_id!r}")
        return str(order_id)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def log(self, *messages: Any) -> None:
        self.trade_log.do("info", 0, 0, *messages)

    def get_main_stock(self) -> str:
        return self._main_stock.value

    def set_main_stock(self, stock: str) -> str:
        parsed = parse_stock(stock)
        if parsed is not None:
            self._main_stock = parsed
        return self._main_stock.value

    def get_account(self) -> Optional[Account]:
        try:
            account = self.client.get_account(self._main_stock)
        except AdapterError as e:
            self._fail("GetAccount", e)
            return None
        self.last_error = None
        return account

    def buy(self, stock_type: str, price: Any, amount: Any, *messages: Any) -> str:
        return self._place("buy", "Buy", stock_type, price, amount, messages)

    def sell(self, stock_type: str, price: Any, amount: Any, *messages: Any) -> str:
        return self._place("sell", "Sell", stock_type, price, amount, messages)

    def _place(self, side: str, operation: str, stock_type: Any, price: Any, amount: Any, messages) -> str:
        try:
            stock = self._stock(stock_type)
            price_value = self._number(price, "price")
            amount_value = self._number(amount, "amount")
            if amount_value <= 0:
                raise InputValidationError(f"invalid amount: {amount}")
            if price_value < 0:
                raise InputValidationError(f"invalid price: {price}")
            order_id = self.client.place_order(side, stock, price_value, amount_value)
        except AdapterError as e:
            self._fail(operation, e)
            return ""
        self.last_error = None
        self.trade_log.do(side, price, amount, *messages)
        return order_id

    def get_order(self, stock_type: str, order_id: str) -> Optional[Order]:
        try:
            stock = self._stock(stock_type)
            order = self.client.get_order(stock, self._order_id(order_id))
        except AdapterError as e:
            self._fail("GetOrder", e)
            return None
        self.last_error = None
        return order

    def cancel_order(self, order: Order) -> bool:
        try:
            stock = self._stock(getattr(order, "stock_type", None))
            self.client.cancel_order(stock, self._order_id(getattr(order, "id", None)))
        except AdapterError as e:
            self._fail("CancelOrder", e)
            return False
        self.last_error = None
        self.trade_log.do("cancel", 0, 0, repr(order))
        return True

    def get_orders(self, stock_type: str) -> List[Order]:
        try:
            orders = self.client.get_orders(self._stock(stock_type))
        except AdapterError as e:
            self._fail("GetOrders", e)
            return []
        self.last_error = None
        return orders

    def get_trades(self, stock_type: str) -> List[Order]:
        try:
            trades = self.client.get_trades(self._stock(stock_type))
        except AdapterError as e:
            self._fail("GetTrades", e)
            return []
        self.last_error = None
        return trades

    def get_ticker(self, stock_type: str, size: Optional[int] = None) -> Optional[Ticker]:
        depth = self.option.ticker_depth
        if size is not None and size > depth:
            depth = size
        try:
            ticker = self.client.get_ticker(self._stock(stock_type), depth)
        except AdapterError as e:
            self._fail("GetTicker", e)
            return None
        self.last_error = None
        return ticker

    def get_records(self, stock_type: str, period: str, size: Optional[int] = None) -> List[Record]:
        if size is None:
            size = self.option.records_size
        try:
            stock = self._stock(stock_type)
            parsed_period = self._period(period)
            if not isinstance(size, int) or size < 1:
                raise InputValidationError(f"invalid size: {size}")
            incoming = self.client.get_records(stock, parsed_period)
        except AdapterError as e:
            self._fail("GetRecords", e)
            return []
        self.last_error = None
        return self.records.reconcile(stock, parsed_period, incoming, size)
