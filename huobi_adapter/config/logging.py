import logging
import sys
from typing import Any

try:
    from huobi_adapter.config.settings import settings
    LOG_LEVEL = settings.LOG_LEVEL.upper() if settings else "INFO"
except Exception:
    LOG_LEVEL = "INFO"

def setup_logging(name: str = "huobi_adapter") -> logging.Logger:
    """
    統一的日誌配置。
    目前輸出到 Console (Stdout)。子 logger (如 huobi_adapter.huobi) 會沿用這裡的 handler。
    """
    logger = logging.getLogger(name)

    # 防止重複添加 Handler
    if logger.handlers:
        return logger

    level = getattr(logging, LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    return logger


class TradeLogger:
    """
    交易日誌 sink。
    do(action, price, amount, *messages)：action 為 error 時記 ERROR，其餘 (info/buy/sell/cancel) 記 INFO。
    price/amount 不適用時傳 0。
    """

    def __init__(self, category: str = "huobi", logger: logging.Logger = None):
        self.category = category
        self.logger = logger or logging.getLogger(f"huobi_adapter.{category}")

    def do(self, action: str, price: Any = 0, amount: Any = 0, *messages: Any) -> None:
        level = logging.ERROR if action == "error" else logging.INFO
        text = " ".join(str(m) for m in messages)
        if action in ("buy", "sell"):
            text = f"price={price} amount={amount} {text}".rstrip()
        self.logger.log(
            level,
            f"[{action}] {text}",
            extra={"action": action, "price": price, "amount": amount},
        )


# 預設 Logger
logger = setup_logging()
