import sys
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """
    應用程式全域設定。
    自動從環境變數 (.env) 讀取並驗證型別。
    """
    # Huobi 憑證
    HUOBI_ACCESS_KEY: str = ""
    HUOBI_SECRET_KEY: str = ""
    HUOBI_MAIN_STOCK: str = "BTC"  # 不支援的幣種會在建立 adapter 時退回 BTC

    # Huobi 端點
    HUOBI_HOST: str = "https://api.huobi.com/apiv3"
    HUOBI_MARKET_HOST: str = "http://api.huobi.com"
    HUOBI_TIMEZONE: str = "Asia/Shanghai"  # K 線時間字串使用的時區

    # Exchange 分類，同時作為 log channel
    EXCHANGE_TYPE: str = "huobi"

    # 應用程式行為
    LOG_LEVEL: str = "INFO"
    HTTP_TIMEOUT_SECONDS: float = 10.0
    RECORDS_SIZE: int = 200
    TICKER_DEPTH: int = 20

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

# Singleton Instance
try:
    settings = Settings()
except Exception as e:
    # logging 依賴 settings，這裡只能 print
    print(f"CRITICAL: Failed to load configuration. Invalid env vars? {e}", file=sys.stderr)
    settings = None
