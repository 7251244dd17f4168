import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence
from contract_notifier.domain.entities import Reason, Responsibility, Responsible, ResponsibleList
from contract_notifier.domain.ports import Alerting
from contract_notifier.domain.services.responsibility_resolver import ResponsibilityResolver

logger = logging.getLogger(__name__)

ALERT_MESSAGE = "Não foi possível determinar o responsável destes contratos, enviados ao controlador:"

class ResponsibilityAggregator:
    def __init__(
        self,
        resolver: ResponsibilityResolver,
        controller_uri: str,
        alerting: Optional[Alerting] = None,
        max_workers: int = 1,
    ):
        self._resolver = resolver
        self._controller_uri = controller_uri
        self._alerting = alerting
        self._max_workers = max(1, max_workers)

    def resolve_all(self, contract_uris: Sequence[str]) -> ResponsibleList:
        """
        Resolve o responsável de cada contrato. Nunca lança exceção: contratos
        que falham vão para o controlador e ficam em `failed_contracts`.
        """
        uris = list(dict.fromkeys(contract_uris))
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            outcomes = list(pool.map(self._resolve_one, uris))

        responsibles = ResponsibleList()
        for uri, (responsible, failed) in zip(uris, outcomes):
            responsibles.add_responsible(responsible)
            if failed:
                responsibles.failed_contracts.append(uri)

        if responsibles.failed_contracts:
            self._alert(responsibles.failed_contracts)
        return responsibles

    def _resolve_one(self, contract_uri: str) -> tuple[Responsible, bool]:
        logger.info("Buscando responsável do contrato: %s", contract_uri)
        try:
            responsible = self._resolver.resolve(contract_uri)
        except Exception as e:
            logger.error("Responsável do contrato %s não calculado, enviando ao controlador: %s", contract_uri, e)
            return Responsible(self._controller_uri, Responsibility(Reason.CONTROLLER, contract_uri)), True
        logger.info("Responsável do contrato %s: %s (%s)", contract_uri, responsible.person_uri, responsible.responsibility.reason.value)
        return responsible, False

    def _alert(self, failed: list[str]) -> None:
        logger.error("%s\n%s", ALERT_MESSAGE, "\n".join(failed))
        if self._alerting is None:
            return
        try:
            self._alerting.notify_operators(ALERT_MESSAGE, list(failed))
        except Exception as e:
            logger.error("Falha ao alertar operadores: %s", e)
