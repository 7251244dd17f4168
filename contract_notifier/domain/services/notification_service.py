import logging
from dataclasses import asdict
from typing import Optional, Sequence
from contract_notifier.domain.errors import LoadError
from contract_notifier.domain.ports import DirectoryGateway
from contract_notifier.domain.services.notification_composer import NotificationComposer
from contract_notifier.domain.services.responsibility_aggregator import ResponsibilityAggregator

logger = logging.getLogger(__name__)

class ContractNotificationService:
    def __init__(self, directory: DirectoryGateway, aggregator: ResponsibilityAggregator, composer: NotificationComposer):
        self._directory = directory
        self._aggregator = aggregator
        self._composer = composer

    def execute(self, contract_uris: Optional[Sequence[str]] = None) -> dict:
        if contract_uris is None:
            try:
                contract_uris = self._directory.run_stored_query()
            except LoadError as e:
                logger.error("Falha ao consultar contratos: %s", e)
                return {"ok": False, "error": str(e)}

        responsibles = self._aggregator.resolve_all(contract_uris)
        results = [self._composer.notify(group) for group in responsibles.groups()]
        return {
            "ok": True,
            "contracts": len(responsibles.contract_uris()),
            "failed": list(responsibles.failed_contracts),
            "notifications": [asdict(r) for r in results],
        }
