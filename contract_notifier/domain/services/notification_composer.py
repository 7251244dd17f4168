import logging
from typing import Mapping, Optional
from contract_notifier.domain.entities import (
    REGISTRATION_NUMBER,
    Letter,
    NotificationResult,
    Reason,
    ResponsibleGroup,
)
from contract_notifier.domain.errors import TemplateNotFound
from contract_notifier.domain.ports import DirectoryGateway, MailGateway, TemplateRenderer

logger = logging.getLogger(__name__)

ESCAPED_SLASH = "&#x2F;"

def unescape_slashes(text: str) -> str:
    return text.replace(ESCAPED_SLASH, "/")

class NotificationComposer:
    def __init__(
        self,
        directory: DirectoryGateway,
        mail: MailGateway,
        renderer: TemplateRenderer,
        template_keys: Mapping[Reason, str],
        *,
        app_name: str,
        server_url: str,
        controller_uri: str,
        no_number_placeholder: str = "s/n",
    ):
        self._directory = directory
        self._mail = mail
        self._renderer = renderer
        self._template_keys = dict(template_keys)
        self._app_name = app_name
        self._server_url = server_url
        self._controller_uri = controller_uri
        self._no_number = no_number_placeholder

    def notify(self, group: ResponsibleGroup) -> NotificationResult:
        reason = getattr(group.reason, "value", group.reason)
        template_key = self._template_keys.get(group.reason)
        if template_key is None:
            logger.error("Sem modelo de e-mail para o motivo %r (destinatário %s)", reason, group.person_uri)
            return NotificationResult(recipient=group.person_uri, reason=reason, status="template_not_found")
        try:
            template = self._mail.get_template(template_key)
        except TemplateNotFound as e:
            logger.error("%s (destinatário %s)", e, group.person_uri)
            return NotificationResult(recipient=group.person_uri, reason=reason, status="template_not_found")

        view = {
            "app_name": self._app_name,
            "contract_list": "\n".join(self._contract_line(uri) for uri in group.contract_uris),
        }
        recipient = self._checked_recipient(group.person_uri)
        try:
            letter = Letter(
                subject=unescape_slashes(self._renderer.render(template.subject, view)),
                body=unescape_slashes(self._renderer.render(template.body, view)),
            )
            mail = self._mail.prepare_letter(recipient, letter)
        except Exception as e:
            # uma carta com falha não impede as demais do lote
            logger.error("Falha ao preparar e-mail para %s (%s): %s", recipient, reason, e)
            return NotificationResult(recipient=recipient, reason=reason, status="failed")
        logger.info("E-mail preparado para %s (%s). Objeto: %s", recipient, reason, mail.id)
        return NotificationResult(recipient=recipient, reason=reason, status="prepared", mail_id=mail.id)

    def _contract_line(self, contract_uri: str) -> str:
        number = self._registration_number(contract_uri) or self._no_number
        return f"{number} {self._server_url}#/{contract_uri}"

    def _registration_number(self, contract_uri: str) -> Optional[str]:
        try:
            return self._directory.load_document(contract_uri).first(REGISTRATION_NUMBER)
        except Exception as e:
            logger.warning("Número de registro indisponível para %s: %s", contract_uri, e)
            return None

    def _checked_recipient(self, recipient: str) -> str:
        if recipient == self._controller_uri:
            return recipient
        try:
            if self._directory.is_individual_valid(self._directory.load_document(recipient)):
                return recipient
        except Exception as e:
            logger.warning("Falha ao validar destinatário %s: %s", recipient, e)
        logger.info("Destinatário %s inválido, redirecionando ao controlador", recipient)
        return self._controller_uri
