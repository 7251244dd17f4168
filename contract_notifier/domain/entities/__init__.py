from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Literal, Mapping, Optional

Status = Literal["prepared", "template_not_found", "failed"]


class Reason(str, Enum):
    """Motivo pelo qual alguém foi escolhido como responsável por um contrato."""

    EXECUTOR = "executor"
    DEPARTMENT = "department"
    CONTROLLER = "controller"
    CONTROLLER_NOT_UZ = "controller-not-uz"


class ContractRole(str, Enum):
    EXECUTOR = "mnd-s:executorSpecialistOfContract"
    SUPPORTER = "mnd-s:supportSpecialistOfContract"
    MANAGER = "mnd-s:ContractManager"
    DEPARTMENT = "v-s:responsibleDepartment"


REGISTRATION_NUMBER = "v-s:registrationNumber"


@dataclass(frozen=True)
class Document:
    uri: str
    props: Mapping[str, tuple] = field(default_factory=dict)

    def has_value(self, prop: str) -> bool:
        return bool(self.props.get(prop))

    def first(self, prop: str) -> Optional[str]:
        values = self.props.get(prop)
        return values[0] if values else None


@dataclass(frozen=True)
class Responsibility:
    reason: Reason
    contract_uri: str


@dataclass(frozen=True)
class Responsible:
    person_uri: str
    responsibility: Responsibility


@dataclass(frozen=True)
class ResponsibleGroup:
    person_uri: str
    reason: Reason
    contract_uris: tuple[str, ...]


class ResponsibleList:
    """Multimapa pessoa -> responsabilidades, na ordem em que cada pessoa apareceu."""

    def __init__(self):
        self._by_person: dict[str, list[Responsibility]] = {}
        self.failed_contracts: list[str] = []

    def add_responsible(self, responsible: Responsible) -> None:
        items = self._by_person.setdefault(responsible.person_uri, [])
        if responsible.responsibility not in items:
            items.append(responsible.responsibility)

    def responsibilities_of(self, person_uri: str) -> tuple[Responsibility, ...]:
        return tuple(self._by_person.get(person_uri, ()))

    def groups(self) -> list[ResponsibleGroup]:
        # um grupo por (pessoa, motivo): cada motivo tem o seu próprio modelo de e-mail
        out = []
        for person_uri, items in self._by_person.items():
            by_reason: dict[Reason, list[str]] = {}
            for r in items:
                by_reason.setdefault(r.reason, []).append(r.contract_uri)
            for reason, uris in by_reason.items():
                out.append(ResponsibleGroup(person_uri=person_uri, reason=reason, contract_uris=tuple(uris)))
        return out

    def contract_uris(self) -> list[str]:
        return [r.contract_uri for items in self._by_person.values() for r in items]

    def __iter__(self) -> Iterator[Responsible]:
        for person_uri, items in self._by_person.items():
            for r in items:
                yield Responsible(person_uri=person_uri, responsibility=r)

    def __len__(self) -> int:
        return len(self._by_person)

    def __contains__(self, person_uri: object) -> bool:
        return person_uri in self._by_person


@dataclass(frozen=True)
class Letter:
    subject: str
    body: str


@dataclass(frozen=True)
class MailObject:
    id: str
    recipient: str
    subject: str
    body: str
    sender: Optional[str] = None


@dataclass(frozen=True)
class NotificationResult:
    recipient: str
    reason: str
    status: Status
    mail_id: Optional[str] = None
