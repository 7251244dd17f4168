import json
import socket
import types
from urllib.error import URLError
from contract_notifier.adapters.driven.telegram_alerting import TelegramAlerting

MODULE = "contract_notifier.adapters.driven.telegram_alerting"


class _Resp:
    def read(self):
        return b'{"ok": true}'

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def _patch_settings(monkeypatch, **overrides):
    base = dict(TELEGRAM_BOT_TOKEN="123:abc", TELEGRAM_CHAT_ID="-100", TELEGRAM_TIMEOUT=2)
    base.update(overrides)
    monkeypatch.setattr(f"{MODULE}.settings", types.SimpleNamespace(**base), raising=True)


def test_sends_message_with_details(monkeypatch):
    _patch_settings(monkeypatch)
    seen = {}

    def _urlopen(req, timeout):
        seen["url"] = req.full_url
        seen["body"] = json.loads(req.data)
        seen["timeout"] = timeout
        return _Resp()

    monkeypatch.setattr("urllib.request.urlopen", _urlopen)

    TelegramAlerting().notify_operators("falhou:", ["d:c1", "d:c2"])

    assert seen["url"] == "https://api.telegram.org/bot123:abc/sendMessage"
    assert seen["body"] == {"chat_id": "-100", "text": "falhou:\nd:c1\nd:c2"}
    assert seen["timeout"] == 2


def test_not_configured_does_nothing(monkeypatch):
    _patch_settings(monkeypatch, TELEGRAM_BOT_TOKEN=None)

    def _urlopen(*a, **k):
        raise AssertionError("não deveria chamar a rede")

    monkeypatch.setattr("urllib.request.urlopen", _urlopen)
    TelegramAlerting().notify_operators("x", ["d:c1"])


def test_transport_errors_are_swallowed(monkeypatch):
    _patch_settings(monkeypatch)
    for err in (URLError("down"), socket.timeout("slow")):
        def _urlopen(req, timeout, err=err):
            raise err

        monkeypatch.setattr("urllib.request.urlopen", _urlopen)
        assert TelegramAlerting().notify_operators("x", ["d:c1"]) is None
