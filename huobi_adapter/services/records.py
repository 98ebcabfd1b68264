import threading
from typing import Dict, List, Sequence, Tuple

from huobi_adapter.core.models import Period, Record, StockType


def merge_records(window: Sequence[Record], incoming: Sequence[Record], size: int) -> List[Record]:
    """
    Merge freshly fetched bars into a chronological window.

    `incoming` is newest-first, as HuobiMapper.to_records returns it. Walking it:
    a bar newer than the last held bar is new, a bar with the same timestamp
    is the still-forming bar and replaces the last held one, and the first
    older bar ends the walk. New bars are appended oldest-first, then the
    window is cut back to the most recent `size` bars.
    """
    merged = list(window)
    if not incoming:
        return merged
    last_time = merged[-1].time if merged else None
    fresh: List[Record] = []
    replaced = False

    for record in incoming:
        if last_time is not None and record.time < last_time:
            break
        if last_time is not None and record.time == last_time:
            if not replaced:
                merged[-1] = record
                replaced = True
            continue
        # 同一批內時間必須嚴格遞減，否則略過 (避免重複時間戳)
        if fresh and record.time >= fresh[-1].time:
            continue
        fresh.append(record)

    merged.extend(reversed(fresh))
    if len(merged) > size:
        del merged[:len(merged) - size]
    return merged


class RecordWindow:
    """
    每個 adapter 實例專屬的 K 線視窗，依 (幣種, 週期) 分開保存。
    reconcile 以 lock 序列化，同一實例可被多個呼叫端共用。
    """

    def __init__(self):
        self._records: Dict[Tuple[StockType, Period], List[Record]] = {}
        self._lock = threading.Lock()

    def get(self, stock_type: StockType, period: Period) -> List[Record]:
        with self._lock:
            return list(self._records.get((stock_type, period), []))

    def reconcile(
        self,
        stock_type: StockType,
        period: Period,
        incoming: Sequence[Record],
        size: int,
    ) -> List[Record]:
        key = (stock_type, period)
        with self._lock:
            merged = merge_records(self._records.get(key, []), incoming, size)
            self._records[key] = merged
            return list(merged)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
