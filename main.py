from fastapi import FastAPI
from infra.log import setup_logging
from infra.settings import settings
from contract_notifier.adapters.driver.controllers.notification_controller import router as notification_router

def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(title="Contract Notifier")
    app.include_router(notification_router, tags=["contracts"])
    return app

app = create_app()
