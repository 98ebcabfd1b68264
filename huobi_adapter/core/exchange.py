from abc import ABC, abstractmethod
from typing import Any, List, Optional

from huobi_adapter.core.models import Account, Order, Record, Ticker


class ExchangeAdapter(ABC):
    """
    Abstract base class for exchange adapters.
    It defines the uniform interface the trading engine calls, so strategies
    can work against any exchange in a standardized way.

    Every operation returns its zero value on failure (None, "", False or an
    empty list) instead of raising.
    """

    @abstractmethod
    def log(self, *messages: Any) -> None:
        pass

    @abstractmethod
    def get_main_stock(self) -> str:
        pass

    @abstractmethod
    def set_main_stock(self, stock: str) -> str:
        """
        Switches the main stock if `stock` is supported.

        Returns:
            The main stock in effect after the call.
        """
        pass

    @abstractmethod
    def get_account(self) -> Optional[Account]:
        pass

    @abstractmethod
    def buy(self, stock_type: str, price: Any, amount: Any, *messages: Any) -> str:
        """
        Places a buy order. A price above zero means a limit order, otherwise
        a market order.

        Returns:
            The exchange order id, or "" on failure.
        """
        pass

    @abstractmethod
    def sell(self, stock_type: str, price: Any, amount: Any, *messages: Any) -> str:
        pass

    @abstractmethod
    def get_order(self, stock_type: str, order_id: str) -> Optional[Order]:
        pass

    @abstractmethod
    def cancel_order(self, order: Order) -> bool:
        pass

    @abstractmethod
    def get_orders(self, stock_type: str) -> List[Order]:
        """Fetches all unfilled orders."""
        pass

    @abstractmethod
    def get_trades(self, stock_type: str) -> List[Order]:
        """Fetches recently filled orders."""
        pass

    @abstractmethod
    def get_ticker(self, stock_type: str, size: Optional[int] = None) -> Optional[Ticker]:
        pass

    @abstractmethod
    def get_records(self, stock_type: str, period: str, size: Optional[int] = None) -> List[Record]:
        """
        Fetches candlesticks and merges them into the adapter's window.

        Args:
            stock_type: The base asset, e.g. "BTC".
            period: The timeframe code, e.g. "M5".
            size: Window cap; the most recent `size` bars are kept.

        Returns:
            A copy of the window, oldest bar first.
        """
        pass
