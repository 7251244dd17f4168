import logging
from infra.log import setup_logging
from infra.settings import settings
from contract_notifier.bootstrap import build_service

logger = logging.getLogger(__name__)

# Serviço reutilizado entre invocações (o container é mantido vivo)
_service = None


def _get_service():
    global _service
    if _service is None:
        _, _service = build_service()
    return _service


def handler(event, _context):
    """
    Trigger: agendador (cron/EventBridge) ou chamada manual.
    `event["contract_ids"]` restringe o lote; sem ele usa a consulta armazenada.
    Falhas de contratos individuais não derrubam o lote; só a consulta inicial pode falhar.
    """
    setup_logging(settings.LOG_LEVEL)
    contract_ids = (event or {}).get("contract_ids")
    result = _get_service().execute(contract_ids)
    if not result.get("ok"):
        raise RuntimeError(f"Falha ao consultar contratos: {result.get('error')}")
    logger.info(
        "Lote concluído: %s contratos, %s falhas, %s notificações",
        result["contracts"], len(result["failed"]), len(result["notifications"]),
    )
    return result
