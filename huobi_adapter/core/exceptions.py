from typing import Optional


class AdapterError(Exception):
    """所有 adapter 自定義錯誤的基類"""
    pass

class ConfigurationError(AdapterError):
    """設定錯誤 (如缺少環境變數)"""
    pass

class InputValidationError(AdapterError):
    """輸入錯誤 (不支援的幣種、週期或訂單)，在任何網路請求之前偵測"""
    pass

class TransportError(AdapterError):
    """連線錯誤 (如 Huobi API 連線失敗或逾時)"""
    pass

class VendorRejectionError(AdapterError):
    """交易所回傳非零錯誤碼"""

    def __init__(self, code: Optional[int] = None, message: Optional[str] = None):
        self.code = code
        self.vendor_message = message
        if code is None:
            detail = str(message or "request rejected")
        else:
            detail = f"the error number is {code}"
            if message:
                detail += f" ({message})"
        super().__init__(detail)

class MalformedResponseError(AdapterError):
    """回應內容無法解析 (非 JSON 或結構不符)"""
    pass
