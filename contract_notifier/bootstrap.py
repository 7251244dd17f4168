from infra.settings import settings
from contract_notifier.domain.entities import Reason
from contract_notifier.domain.services.notification_composer import NotificationComposer
from contract_notifier.domain.services.notification_service import ContractNotificationService
from contract_notifier.domain.services.responsibility_aggregator import ResponsibilityAggregator
from contract_notifier.domain.services.responsibility_resolver import ResponsibilityResolver
from contract_notifier.adapters.driven.mustache_template_renderer import MustacheTemplateRenderer
from contract_notifier.adapters.driven.telegram_alerting import TelegramAlerting
from contract_notifier.adapters.driven.veda_client import VedaClient
from contract_notifier.adapters.driven.veda_directory_gateway import VedaDirectoryGateway
from contract_notifier.adapters.driven.veda_mail_gateway import VedaMailGateway

def template_keys() -> dict[Reason, str]:
    return {
        Reason.EXECUTOR: settings.MAIL_TEMPLATE_EXECUTOR,
        Reason.DEPARTMENT: settings.MAIL_TEMPLATE_DEPARTMENT,
        Reason.CONTROLLER: settings.MAIL_TEMPLATE_CONTROLLER,
        Reason.CONTROLLER_NOT_UZ: settings.MAIL_TEMPLATE_CONTROLLER_NOT_UZ,
    }

def build_service() -> tuple[ResponsibilityAggregator, ContractNotificationService]:
    client = VedaClient()
    directory = VedaDirectoryGateway(client)
    resolver = ResponsibilityResolver(
        directory,
        org_root_uri=settings.ORG_ROOT_URI,
        controller_uri=settings.CONTROLLER_ROLE_URI,
    )
    aggregator = ResponsibilityAggregator(
        resolver,
        controller_uri=settings.CONTROLLER_ROLE_URI,
        alerting=TelegramAlerting(),
        max_workers=settings.RESOLVE_MAX_WORKERS,
    )
    composer = NotificationComposer(
        directory,
        VedaMailGateway(client),
        MustacheTemplateRenderer(),
        template_keys(),
        app_name=settings.APP_NAME,
        server_url=settings.VEDA_URL,
        controller_uri=settings.CONTROLLER_ROLE_URI,
        no_number_placeholder=settings.NO_NUMBER_PLACEHOLDER,
    )
    return aggregator, ContractNotificationService(directory, aggregator, composer)
