import uuid
from infra.settings import settings
from contract_notifier.domain.entities import Letter, MailObject
from contract_notifier.domain.errors import LoadError, TemplateNotFound
from contract_notifier.domain.ports import MailGateway
from contract_notifier.adapters.driven.veda_client import VedaClient

SUBJECT = "v-s:notificationSubject"
BODY = "v-s:notificationBody"

def _value(individual: dict, prop: str) -> str:
    values = individual.get(prop) or []
    return str(values[0].get("data", "")) if values else ""

def _uri(value: str) -> list:
    return [{"data": value, "type": "Uri"}]

def _text(value: str) -> list:
    return [{"data": value, "type": "String", "lang": "NONE"}]

class VedaMailGateway(MailGateway):
    def __init__(self, client: VedaClient):
        self._client = client

    def get_template(self, key: str) -> Letter:
        try:
            individual = self._client.get_individual(key)
        except LoadError as e:
            raise TemplateNotFound(key) from e
        subject, body = _value(individual, SUBJECT), _value(individual, BODY)
        if not subject and not body:
            raise TemplateNotFound(key)
        return Letter(subject=subject, body=body)

    def prepare_letter(self, recipient_uri: str, letter: Letter) -> MailObject:
        mail = MailObject(
            id=f"d:mail_{uuid.uuid4().hex}",
            recipient=recipient_uri,
            subject=letter.subject,
            body=letter.body,
            sender=settings.MAIL_SENDER,
        )
        if settings.MAIL_SAVE:
            self._client.put_individual(to_individual(mail))
        return mail

def to_individual(mail: MailObject) -> dict:
    return {
        "@": mail.id,
        "rdf:type": _uri("v-s:Email"),
        "v-s:hasMessageType": _uri("v-s:OtherNotification"),
        "v-wf:to": _uri(mail.recipient),
        "v-wf:from": _uri(mail.sender) if mail.sender else [],
        "v-s:senderMailbox": _uri(mail.sender) if mail.sender else [],
        "v-s:subject": _text(mail.subject),
        "v-s:messageBody": _text(mail.body),
    }
