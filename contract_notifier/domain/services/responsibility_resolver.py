import logging
from contract_notifier.domain.entities import ContractRole, Document, Reason, Responsibility, Responsible
from contract_notifier.domain.errors import ResolutionError
from contract_notifier.domain.ports import DirectoryGateway

logger = logging.getLogger(__name__)

class ResponsibilityResolver:
    """
    Decide quem deve ser notificado sobre um contrato.

    Executor inválido -> chefe do departamento responsável -> controlador.
    Executor válido com a cadeia de controle incompleta -> o próprio executor.
    Contrato totalmente preenchido -> controlador (revisão centralizada).
    """

    def __init__(self, directory: DirectoryGateway, org_root_uri: str, controller_uri: str):
        self._directory = directory
        self._org_root_uri = org_root_uri
        self._controller_uri = controller_uri

    def resolve(self, contract_uri: str) -> Responsible:
        try:
            contract = self._directory.load_document(contract_uri)
        except Exception as e:
            logger.error("Falha ao carregar contrato %s: %s", contract_uri, e)
            raise ResolutionError(contract_uri) from e

        # todas as verificações rodam, mesmo as que o ramo escolhido não usa
        executor_valid = self._is_role_valid(contract, ContractRole.EXECUTOR)
        supporter_valid = self._is_role_valid(contract, ContractRole.SUPPORTER)
        manager_valid = self._is_role_valid(contract, ContractRole.MANAGER)
        department_valid = self._is_role_valid(contract, ContractRole.DEPARTMENT)

        if not executor_valid:
            return self._escalate_to_department(contract)
        if not (supporter_valid and manager_valid and department_valid):
            return Responsible(
                contract.first(ContractRole.EXECUTOR.value),
                Responsibility(Reason.EXECUTOR, contract.uri),
            )
        return self._controller(contract.uri, Reason.CONTROLLER)

    def _is_role_valid(self, contract: Document, role: ContractRole) -> bool:
        uri = contract.first(role.value)
        if not uri:
            return False
        try:
            return bool(self._directory.is_individual_valid(self._directory.load_document(uri)))
        except Exception as e:
            logger.warning("Falha ao validar %s (%s) do contrato %s: %s", role.name.lower(), uri, contract.uri, e)
            return False

    def _escalate_to_department(self, contract: Document) -> Responsible:
        department_uri = contract.first(ContractRole.DEPARTMENT.value)
        if not department_uri:
            return self._controller(contract.uri, Reason.CONTROLLER)
        try:
            department = self._directory.load_document(department_uri)
            if not self._directory.is_sub_unit_of(department, self._org_root_uri):
                return self._controller(contract.uri, Reason.CONTROLLER_NOT_UZ)
            if not self._directory.is_individual_valid(department):
                return self._controller(contract.uri, Reason.CONTROLLER)
            chief_uri = self._directory.get_department_chief(department)
            if chief_uri and self._directory.is_individual_valid(self._directory.load_document(chief_uri)):
                return Responsible(chief_uri, Responsibility(Reason.DEPARTMENT, contract.uri))
        except Exception as e:
            logger.error("Falha ao tratar o departamento %s do contrato %s: %s", department_uri, contract.uri, e)
        return self._controller(contract.uri, Reason.CONTROLLER)

    def _controller(self, contract_uri: str, reason: Reason) -> Responsible:
        return Responsible(self._controller_uri, Responsibility(reason, contract_uri))
