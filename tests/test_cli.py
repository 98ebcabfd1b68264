import pytest

from huobi_adapter.cmd import cli

KLINE = [
    ["20240101000000000", 1, 2, 0.5, 1.5, 10],
    ["20240101000500000", 1.5, 2, 1, 1.8, 12],
]

def test_no_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out

def test_records_command(exchange, transport, capsys):
    transport.queue(KLINE)
    assert cli.main(["records", "BTC", "M5"], exchange=exchange) == 0
    out = capsys.readouterr().out
    assert "2024-01-01 00:05:00+00:00" in out
    assert "close" in out

def test_ticker_unsupported_stock(exchange, transport, capsys):
    assert cli.main(["ticker", "ETH"], exchange=exchange) == 1
    assert "Failed: unrecognized stockType: ETH" in capsys.readouterr().err
    assert transport.calls == []

def test_buy_command(exchange, transport, capsys):
    transport.queue({"result": "success", "id": 42})
    assert cli.main(["buy", "LTC", "30.5", "2"], exchange=exchange) == 0
    assert "Order placed: 42" in capsys.readouterr().out

def test_orders_command_empty(exchange, transport, capsys):
    transport.queue([])
    assert cli.main(["orders", "BTC"], exchange=exchange) == 0
    assert "No orders." in capsys.readouterr().out

def test_cancel_command(exchange, transport, capsys):
    transport.queue({"id": 5, "type": 1}, {"result": "success"})
    assert cli.main(["cancel", "BTC", "5"], exchange=exchange) == 0
    assert "Order cancelled: 5" in capsys.readouterr().out

def test_poll_loop_reconciles(exchange, transport, monkeypatch, capsys):
    sleeps = []
    monkeypatch.setattr(cli.time, "sleep", sleeps.append)
    transport.queue(KLINE[:1], KLINE)
    cli.run_poll_loop(exchange, "BTC", "M5", interval=5, rounds=2)
    assert sleeps == [5]
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("[1 bars]")
    assert lines[1].startswith("[2 bars]")

def test_poll_stops_on_keyboard_interrupt(exchange, transport, monkeypatch):
    def interrupt(_):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli.time, "sleep", interrupt)
    transport.queue(KLINE)
    assert cli.main(["poll", "BTC", "M5", "--interval", "1"], exchange=exchange) == 0
    assert len(exchange.records.get(exchange._stock("BTC"), exchange._period("M5"))) == 2

@pytest.mark.parametrize("argv", [["records", "BTC"], ["buy", "BTC", "1"]])
def test_missing_arguments_exit(argv):
    with pytest.raises(SystemExit):
        cli.main(argv)
