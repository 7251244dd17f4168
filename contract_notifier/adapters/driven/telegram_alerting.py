import json
import logging
import socket
import urllib.request
from urllib.error import URLError
from typing import Sequence
from infra.settings import settings
from contract_notifier.domain.ports import Alerting

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org"
_MAX_TEXT = 4096

class TelegramAlerting(Alerting):
    def notify_operators(self, message: str, details: Sequence[str]) -> None:
        if not settings.TELEGRAM_BOT_TOKEN or not settings.TELEGRAM_CHAT_ID:
            logger.info("Telegram não configurado, alerta não enviado")
            return
        text = "\n".join([message, *details])[:_MAX_TEXT]
        req = urllib.request.Request(
            url=f"{TELEGRAM_API}/bot{settings.TELEGRAM_BOT_TOKEN}/sendMessage",
            data=json.dumps({"chat_id": settings.TELEGRAM_CHAT_ID, "text": text}).encode("utf-8"),
            method="POST",
            headers={"Content-Type": "application/json"},
        )
        try:
            with urllib.request.urlopen(req, timeout=settings.TELEGRAM_TIMEOUT) as r:
                r.read()
        except (URLError, socket.timeout) as e:
            # alerta é best-effort: não derruba o lote
            logger.error("Falha ao enviar alerta ao Telegram: %s", e)
