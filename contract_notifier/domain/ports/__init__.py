from abc import ABC, abstractmethod
from typing import Mapping, Optional, Sequence
from contract_notifier.domain.entities import Document, Letter, MailObject

class DirectoryGateway(ABC):
    @abstractmethod
    def load_document(self, uri: str) -> Document:
        ...

    @abstractmethod
    def is_individual_valid(self, document: Document) -> bool:
        ...

    @abstractmethod
    def is_sub_unit_of(self, department: Document, root_uri: str) -> bool:
        ...

    @abstractmethod
    def get_department_chief(self, department: Document) -> Optional[str]:
        ...

    @abstractmethod
    def run_stored_query(self) -> list[str]:
        ...

class MailGateway(ABC):
    @abstractmethod
    def get_template(self, key: str) -> Letter:
        ...

    @abstractmethod
    def prepare_letter(self, recipient_uri: str, letter: Letter) -> MailObject:
        ...

class TemplateRenderer(ABC):
    @abstractmethod
    def render(self, template: str, view: Mapping[str, object]) -> str:
        ...

class Alerting(ABC):
    @abstractmethod
    def notify_operators(self, message: str, details: Sequence[str]) -> None:
        ...
