import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    # Veda
    VEDA_URL: str = os.getenv("VEDA_URL", "http://veda:8080")
    VEDA_LOGIN: str | None = os.getenv("VEDA_LOGIN")
    VEDA_PASSWORD: str | None = os.getenv("VEDA_PASSWORD")
    VEDA_TIMEOUT: float = float(os.getenv("VEDA_TIMEOUT", "10"))
    VEDA_STORED_QUERY: str = os.getenv("VEDA_STORED_QUERY", "mnd-s:ContractsWithoutResponsibleQuery")

    # Escalation
    ORG_ROOT_URI: str = os.getenv("ORG_ROOT_URI", "d:org_uz_root")
    CONTROLLER_ROLE_URI: str = os.getenv("CONTROLLER_ROLE_URI", "d:contract_controller_role")
    RESOLVE_MAX_WORKERS: int = int(os.getenv("RESOLVE_MAX_WORKERS", "4"))

    # Mail
    APP_NAME: str = os.getenv("APP_NAME", "Optiflow")
    MAIL_TEMPLATE_EXECUTOR: str = os.getenv("MAIL_TEMPLATE_EXECUTOR", "mnd-s:ContractExecutorNotificationTemplate")
    MAIL_TEMPLATE_DEPARTMENT: str = os.getenv("MAIL_TEMPLATE_DEPARTMENT", "mnd-s:ContractDepartmentChiefNotificationTemplate")
    MAIL_TEMPLATE_CONTROLLER: str = os.getenv("MAIL_TEMPLATE_CONTROLLER", "mnd-s:ContractControllerNotificationTemplate")
    MAIL_TEMPLATE_CONTROLLER_NOT_UZ: str = os.getenv("MAIL_TEMPLATE_CONTROLLER_NOT_UZ", "mnd-s:ContractControllerNotUzNotificationTemplate")
    MAIL_SENDER: str = os.getenv("MAIL_SENDER", "d:optiflow_mailbox")
    MAIL_SAVE: bool = os.getenv("MAIL_SAVE", "false").lower() == "true"
    NO_NUMBER_PLACEHOLDER: str = os.getenv("NO_NUMBER_PLACEHOLDER", "s/n")

    # Telegram
    TELEGRAM_BOT_TOKEN: str | None = os.getenv("TELEGRAM_BOT_TOKEN")
    TELEGRAM_CHAT_ID: str | None = os.getenv("TELEGRAM_CHAT_ID")
    TELEGRAM_TIMEOUT: float = float(os.getenv("TELEGRAM_TIMEOUT", "5"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
