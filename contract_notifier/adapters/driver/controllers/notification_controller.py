from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from contract_notifier.bootstrap import build_service

router = APIRouter()

_aggregator, _service = build_service()

class ResponsiblesPayload(BaseModel):
    contract_ids: list[str] = Field(..., min_length=1, description="URIs dos contratos")

class NotifyPayload(BaseModel):
    contract_ids: list[str] | None = Field(None, description="URIs dos contratos; vazio usa a consulta armazenada")

@router.post("/responsibles")
def post_responsibles(p: ResponsiblesPayload):
    responsibles = _aggregator.resolve_all(p.contract_ids)
    return {
        "groups": [
            {"person": g.person_uri, "reason": g.reason.value, "contracts": list(g.contract_uris)}
            for g in responsibles.groups()
        ],
        "failed": list(responsibles.failed_contracts),
    }

@router.post("/notify")
def post_notify(p: NotifyPayload):
    try:
        result = _service.execute(p.contract_ids)
    except Exception as e:
        raise HTTPException(400, str(e))
    if not result.get("ok"):
        raise HTTPException(502, result.get("error") or "Falha ao consultar contratos")
    return result
