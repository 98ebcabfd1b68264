import json
from decimal import Decimal

import pytest

from huobi_adapter.core.models import ExchangeOption, Record
from huobi_adapter.infrastructure.huobi.client import HuobiClient
from huobi_adapter.services.exchange import HuobiExchange

FIXED_NOW = 1700000000
SECRET = "sk-very-secret"


class FakeTransport:
    """依序回傳預先排好的回應；Exception 物件會被拋出。"""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def get(self, url):
        self.calls.append(("GET", url, None))
        return self._next()

    def post(self, url, form):
        self.calls.append(("POST", url, list(form)))
        return self._next()

    def _next(self):
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, bytes):
            return response
        return json.dumps(response).encode("utf-8")


class RecordingTradeLog:
    def __init__(self):
        self.entries = []

    def do(self, action, price=0, amount=0, *messages):
        self.entries.append((action, price, amount, messages))

    def actions(self):
        return [e[0] for e in self.entries]

    def text(self):
        return " ".join(" ".join(str(m) for m in e[3]) for e in self.entries)


def bar(t, close=1):
    value = Decimal(str(close))
    return Record(time=t, open=value, high=value, low=value, close=value, volume=Decimal("1"))


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def trade_log():
    return RecordingTradeLog()


@pytest.fixture
def option():
    return ExchangeOption(type="test", access_key="ak-123", secret_key=SECRET, timezone="UTC")


@pytest.fixture
def make_exchange(transport, trade_log):
    def _make(option):
        client = HuobiClient(option, transport=transport, clock=lambda: FIXED_NOW)
        return HuobiExchange(option=option, client=client, trade_log=trade_log)
    return _make


@pytest.fixture
def exchange(make_exchange, option):
    return make_exchange(option)
