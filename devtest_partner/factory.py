"""FastAPI application factory."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer
from .logging_config import configure_logging
from .settings import Settings, get_settings
from devtest_partner.modules.deployvs import deployvs_router
from devtest_partner.modules.deployvs.client import DeployClient


def create_app(settings: Optional[Settings] = None, deploy_client: Optional[DeployClient] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.include_router(health_router)
    app.include_router(deployvs_router)
    app.state.container = ServiceContainer(settings, deploy_client=deploy_client)
    return app
