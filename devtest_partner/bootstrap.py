"""Service wiring shared by the application factory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from devtest_partner.modules.deployvs import VirtualServiceDeployer
from devtest_partner.modules.deployvs.client import DeployClient

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    deploy_client: Optional[DeployClient] = None
    vs_deployer: VirtualServiceDeployer = field(init=False)

    def __post_init__(self) -> None:
        self.vs_deployer = VirtualServiceDeployer(self.settings, client=self.deploy_client)
        log.info(
            "Default DevTest Registry %s:%s (timeout=%s)",
            self.settings.devtest_host,
            self.settings.devtest_port,
            self.settings.devtest_timeout,
        )
