# contract_notifier/adapters/driven/veda_client.py
import json
import socket
import threading
import urllib.parse
import urllib.request
from urllib.error import HTTPError, URLError
from typing import Optional
from infra.settings import settings
from contract_notifier.domain.errors import LoadError

# 470 ticket inexistente, 471 ticket expirado
_TICKET_ERRORS = (470, 471)

class VedaClient:
    """Cliente HTTP/JSON mínimo do Veda, com ticket de sessão compartilhado entre threads."""

    def __init__(self):
        self._ticket: Optional[str] = None
        self._lock = threading.Lock()

    def authenticate(self) -> str:
        query = urllib.parse.urlencode({"login": settings.VEDA_LOGIN or "", "password": settings.VEDA_PASSWORD or ""})
        data = self._request("GET", f"/authenticate?{query}", resource="authenticate")
        ticket = (data or {}).get("id")
        if not ticket:
            raise LoadError("authenticate", "Veda não retornou ticket")
        return ticket

    def ticket(self) -> str:
        with self._lock:
            if self._ticket is None:
                self._ticket = self.authenticate()
            return self._ticket

    def _drop_ticket(self, stale: str) -> None:
        with self._lock:
            if self._ticket == stale:
                self._ticket = None

    def get_individual(self, uri: str) -> dict:
        data = self._call("GET", "/get_individual", {"uri": uri}, resource=uri)
        if not isinstance(data, dict) or not data.get("@"):
            raise LoadError(uri, "indivíduo vazio")
        return data

    def stored_query(self, query_uri: str) -> list[str]:
        params = {
            "@": "params",
            "v-s:storedQuery": [{"data": query_uri, "type": "Uri"}],
            "v-s:resultFormat": [{"data": "cols", "type": "String"}],
        }
        data = self._call("POST", "/stored_query", None, body=params, resource=query_uri)
        if isinstance(data, dict):
            return list(data.get("id") or [])
        return [row[0] for row in (data or []) if row]

    def put_individual(self, individual: dict) -> None:
        payload = {
            "individual": individual,
            "prepare_events": True,
            "event_id": "",
            "transaction_id": "",
        }
        self._call("PUT", "/put_individual", None, body=payload, resource=individual.get("@", ""), ticket_in_body=True)

    def _call(self, method: str, path: str, params: Optional[dict], *, body=None, resource: str, ticket_in_body=False):
        for attempt in (1, 2):
            ticket = self.ticket()
            query = dict(params or {})
            payload = body
            if ticket_in_body:
                payload = {"ticket": ticket, **(body or {})}
            else:
                query["ticket"] = ticket
            try:
                return self._request(method, f"{path}?{urllib.parse.urlencode(query)}", body=payload, resource=resource)
            except LoadError as e:
                if attempt == 1 and e.status in _TICKET_ERRORS:
                    self._drop_ticket(ticket)
                    continue
                raise

    def _request(self, method: str, path: str, *, body=None, resource: str):
        url = f"{settings.VEDA_URL.rstrip('/')}{path}"
        data = json.dumps(body).encode("utf-8") if body is not None else None
        req = urllib.request.Request(
            url=url,
            data=data,
            method=method,
            headers={"Accept": "application/json", "Content-Type": "application/json"},
        )
        try:
            with urllib.request.urlopen(req, timeout=settings.VEDA_TIMEOUT) as r:
                raw = r.read().decode("utf-8")
        except HTTPError as e:
            reason = "não encontrado" if e.code == 404 else f"HTTP {e.code}"
            raise LoadError(resource, reason, status=e.code) from e
        except (URLError, socket.timeout) as e:
            raise LoadError(resource, str(e)) from e
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise LoadError(resource, "resposta inválida") from e
