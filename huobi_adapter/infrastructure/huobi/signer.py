import hashlib
import time
from decimal import Decimal
from typing import Any, Callable, List, Sequence


class RequestSigner:
    """
    Huobi v3 簽章。
    參數為 "key=value" 字串；加入 access_key、secret_key、created 後整體排序，
    以 "&" 串接後取 MD5 (小寫 hex)，最後附加 sign=...
    """

    def __init__(self, access_key: str, secret_key: str, clock: Callable[[], float] = time.time):
        self.access_key = access_key
        self._secret_key = secret_key
        self.clock = clock

    def __repr__(self) -> str:
        return f"RequestSigner(access_key={self.access_key!r})"

    def sign(self, params: Sequence[str]) -> List[str]:
        signed = list(params) + [
            "access_key=" + self.access_key,
            "secret_key=" + self._secret_key,
            f"created={int(self.clock())}",
        ]
        signed.sort()
        signed.append("sign=" + sign_md5(signed))
        return signed

    @staticmethod
    def to_form(signed: Sequence[str]) -> List[tuple]:
        """Wire form of a signed parameter list; secret_key only takes part in the signature."""
        form = []
        for param in signed:
            key, _, value = param.partition("=")
            if key != "secret_key":
                form.append((key, value))
        return form


def sign_md5(params: Sequence[str]) -> str:
    return hashlib.md5("&".join(params).encode("utf-8")).hexdigest()


def format_number(value: Any) -> str:
    """Plain decimal rendering for request parameters (no exponent, no trailing zeros)."""
    text = format(Decimal(str(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"
