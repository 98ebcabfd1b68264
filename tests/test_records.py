import threading
from decimal import Decimal

from huobi_adapter.core.models import Period, StockType
from huobi_adapter.services.records import RecordWindow, merge_records
from conftest import bar

def times(records):
    return [r.time for r in records]

def test_empty_window_appends_in_chronological_order():
    merged = merge_records([], [bar(3), bar(2), bar(1)], 10)
    assert times(merged) == [1, 2, 3]

def test_equal_timestamp_replaces_last_bar():
    window = [bar(1), bar(2)]
    merged = merge_records(window, [bar(2, close=9), bar(1)], 10)
    assert times(merged) == [1, 2]
    assert merged[-1].close == Decimal("9")
    # 原視窗不受影響
    assert window[-1].close == Decimal("1")

def test_newer_and_revised_bars():
    merged = merge_records([bar(1), bar(2)], [bar(3), bar(2, close=7), bar(1)], 10)
    assert times(merged) == [1, 2, 3]
    assert merged[1].close == Decimal("7")

def test_several_new_bars_keep_order():
    merged = merge_records([bar(1)], [bar(4), bar(3), bar(2), bar(1, close=5)], 10)
    assert times(merged) == [1, 2, 3, 4]
    assert merged[0].close == Decimal("5")

def test_cap_evicts_oldest():
    merged = merge_records([bar(1), bar(2)], [bar(3)], 2)
    assert times(merged) == [2, 3]

def test_empty_incoming_is_a_no_op():
    window = [bar(1), bar(2), bar(3)]
    assert merge_records(window, [], 10) == window
    assert merge_records(window, [], 2) == window

def test_older_bars_stop_the_walk():
    merged = merge_records([bar(5)], [bar(4), bar(6)], 10)
    assert times(merged) == [5]

def test_duplicate_timestamps_in_one_batch_are_skipped():
    merged = merge_records([], [bar(3, close=2), bar(3, close=1), bar(2)], 10)
    assert times(merged) == [2, 3]
    assert merged[-1].close == Decimal("2")

def test_window_is_kept_per_stock_and_period():
    window = RecordWindow()
    window.reconcile(StockType.BTC, Period.M, [bar(2), bar(1)], 10)
    window.reconcile(StockType.BTC, Period.M5, [bar(10)], 10)
    window.reconcile(StockType.LTC, Period.M, [bar(7)], 10)
    assert times(window.get(StockType.BTC, Period.M)) == [1, 2]
    assert times(window.get(StockType.BTC, Period.M5)) == [10]
    assert times(window.get(StockType.LTC, Period.M)) == [7]
    assert window.get(StockType.LTC, Period.D) == []
    assert len(window) == 3

def test_window_returns_copies():
    window = RecordWindow()
    result = window.reconcile(StockType.BTC, Period.H, [bar(1)], 10)
    result.append(bar(99))
    window.get(StockType.BTC, Period.H).clear()
    assert times(window.get(StockType.BTC, Period.H)) == [1]

def test_clear():
    window = RecordWindow()
    window.reconcile(StockType.BTC, Period.H, [bar(1)], 10)
    window.clear()
    assert window.get(StockType.BTC, Period.H) == []

def test_concurrent_reconcile_keeps_strict_order():
    window = RecordWindow()

    def poll(latest):
        for n in range(1, latest + 1):
            incoming = [bar(t) for t in range(n, max(0, n - 5), -1)]
            window.reconcile(StockType.BTC, Period.M, incoming, 50)

    threads = [threading.Thread(target=poll, args=(40,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    result = times(window.get(StockType.BTC, Period.M))
    assert result == sorted(set(result))
    assert result[-1] == 40
