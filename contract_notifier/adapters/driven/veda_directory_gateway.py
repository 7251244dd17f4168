import logging
from typing import Optional
from infra.settings import settings
from contract_notifier.domain.entities import Document
from contract_notifier.domain.errors import LoadError, ValidationCheckError
from contract_notifier.domain.ports import DirectoryGateway
from contract_notifier.adapters.driven.veda_client import VedaClient

logger = logging.getLogger(__name__)

PARENT_UNIT = "v-s:parentUnit"
HAS_CHIEF = "v-s:hasChief"
DELETED = "v-s:deleted"
VALID = "v-s:valid"

_MAX_ORG_DEPTH = 32

def to_document(individual: dict) -> Document:
    props = {}
    for prop, values in individual.items():
        if prop == "@" or not isinstance(values, list):
            continue
        props[prop] = tuple(v.get("data") for v in values if isinstance(v, dict))
    return Document(uri=individual["@"], props=props)

class VedaDirectoryGateway(DirectoryGateway):
    def __init__(self, client: VedaClient):
        self._client = client

    def load_document(self, uri: str) -> Document:
        return to_document(self._client.get_individual(uri))

    def is_individual_valid(self, document: Document) -> bool:
        if True in document.props.get(DELETED, ()):
            return False
        if False in document.props.get(VALID, ()):
            return False
        return True

    def is_sub_unit_of(self, department: Document, root_uri: str) -> bool:
        seen = set()
        current = department
        while current.uri not in seen and len(seen) < _MAX_ORG_DEPTH:
            if current.uri == root_uri:
                return True
            seen.add(current.uri)
            parent_uri = current.first(PARENT_UNIT)
            if not parent_uri:
                return False
            try:
                current = self.load_document(parent_uri)
            except LoadError as e:
                raise ValidationCheckError(f"Falha ao subir a estrutura de {department.uri}: {e}") from e
        logger.warning("Estrutura organizacional de %s cíclica ou profunda demais", department.uri)
        return False

    def get_department_chief(self, department: Document) -> Optional[str]:
        return department.first(HAS_CHIEF)

    def run_stored_query(self) -> list[str]:
        return self._client.stored_query(settings.VEDA_STORED_QUERY)
