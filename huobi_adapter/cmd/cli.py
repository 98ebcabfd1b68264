import time
import argparse
import sys
from huobi_adapter.config.logging import logger
from huobi_adapter.services.exchange import HuobiExchange
from huobi_adapter.services.formatter import ExchangeFormatter

def run_poll_loop(exchange: HuobiExchange, stock: str, period: str, interval: int, size=None, rounds=None):
    """持續抓取 K 線並合併進同一個視窗"""
    logger.info(f"Polling {stock} {period} records. Interval: {interval} seconds")

    count = 0
    while rounds is None or count < rounds:
        records = exchange.get_records(stock, period, size)
        if records:
            print(f"[{len(records)} bars] {ExchangeFormatter.format_record(records[-1])}")
        else:
            logger.warning(f"No records this round: {exchange.last_error}")
        count += 1
        if rounds is None or count < rounds:
            time.sleep(interval)

def _fail(exchange: HuobiExchange) -> int:
    print(f"Failed: {exchange.last_error}", file=sys.stderr)
    return 1

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Huobi exchange adapter CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("account", help="Show account balances")

    ticker_parser = subparsers.add_parser("ticker", help="Show ticker and depth")
    ticker_parser.add_argument("stock")
    ticker_parser.add_argument("--size", type=int, default=None)

    records_parser = subparsers.add_parser("records", help="Show candlesticks")
    records_parser.add_argument("stock")
    records_parser.add_argument("period")
    records_parser.add_argument("--size", type=int, default=None)

    for name, help_text in (("orders", "List unfilled orders"), ("trades", "List recent filled orders")):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("stock")

    for name in ("buy", "sell"):
        p = subparsers.add_parser(name, help=f"Place a {name} order (price 0 = market)")
        p.add_argument("stock")
        p.add_argument("price")
        p.add_argument("amount")

    cancel_parser = subparsers.add_parser("cancel", help="Cancel an order")
    cancel_parser.add_argument("stock")
    cancel_parser.add_argument("order_id")

    poll_parser = subparsers.add_parser("poll", help="Poll candlesticks into the record window")
    poll_parser.add_argument("stock")
    poll_parser.add_argument("period")
    poll_parser.add_argument("--interval", type=int, default=60)
    poll_parser.add_argument("--size", type=int, default=None)

    return parser

def main(argv=None, exchange: HuobiExchange = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    exchange = exchange or HuobiExchange()

    if args.command == "account":
        account = exchange.get_account()
        if account is None:
            return _fail(exchange)
        print(ExchangeFormatter.format_account(account, exchange.get_main_stock()))

    elif args.command == "ticker":
        ticker = exchange.get_ticker(args.stock, args.size)
        if ticker is None:
            return _fail(exchange)
        print(ExchangeFormatter.format_ticker(ticker))

    elif args.command == "records":
        records = exchange.get_records(args.stock, args.period, args.size)
        if exchange.last_error is not None:
            return _fail(exchange)
        print(ExchangeFormatter.format_records(records))

    elif args.command in ("orders", "trades"):
        fetch = exchange.get_orders if args.command == "orders" else exchange.get_trades
        orders = fetch(args.stock)
        if exchange.last_error is not None:
            return _fail(exchange)
        print(ExchangeFormatter.format_orders(orders))

    elif args.command in ("buy", "sell"):
        place = exchange.buy if args.command == "buy" else exchange.sell
        order_id = place(args.stock, args.price, args.amount)
        if not order_id:
            return _fail(exchange)
        print(f"Order placed: {order_id}")

    elif args.command == "cancel":
        order = exchange.get_order(args.stock, args.order_id)
        if order is None or not exchange.cancel_order(order):
            return _fail(exchange)
        print(f"Order cancelled: {order.id}")

    elif args.command == "poll":
        try:
            run_poll_loop(exchange, args.stock, args.period, args.interval, args.size)
        except KeyboardInterrupt:
            logger.info("Polling stopped by user.")

    return 0

if __name__ == "__main__":
    sys.exit(main())
