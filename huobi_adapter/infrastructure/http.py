import json
from typing import Any, List, Tuple

import requests

from huobi_adapter.core.exceptions import MalformedResponseError, TransportError


class HttpTransport:
    """
    阻塞式 HTTP 傳輸層。
    只負責 GET/POST 並回傳原始 bytes；不做重試，逾時由 timeout 控制。
    """

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": "huobi-adapter/1.0",
        })

    def get(self, url: str) -> bytes:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}")

    def post(self, url: str, form: List[Tuple[str, str]]) -> bytes:
        try:
            response = self.session.post(url, data=form, timeout=self.timeout)
            response.raise_for_status()
            return response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"POST {url} failed: {e}")

    def close(self) -> None:
        self.session.close()


def decode_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Failed to decode JSON response: {e}")
