"""FastAPI routes triggering virtual service deployments."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from devtest_partner.modules.deployvs.domain import DeployError, DeployVsStep
from devtest_partner.modules.deployvs.resolver import split_mar_paths
from devtest_partner.modules.deployvs.service import (
    VirtualServiceDeployer,
    check_host,
    check_mar_files_paths,
    check_vse_name,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/devtest/vs", tags=["devtest-virtual-service"])


class DeployVsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    vse_name: str = Field("", alias="vseName")
    mar_files_paths: str = Field("", alias="marFilesPaths")
    use_custom_registry: bool = Field(False, alias="useCustomRegistry")
    host: str = ""
    port: str = ""
    username: str = ""
    password: SecretStr = SecretStr("")
    workspace: Optional[str] = None
    parameters: Dict[str, str] = Field(default_factory=dict)

    def to_step(self) -> DeployVsStep:
        return DeployVsStep(
            vse_name=self.vse_name,
            mar_files_paths=split_mar_paths(self.mar_files_paths),
            use_custom_registry=self.use_custom_registry,
            host=self.host,
            port=self.port,
            username=self.username,
            password=self.password,
        )


def get_deployer(request: Request) -> VirtualServiceDeployer:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "vs_deployer", None):
        raise HTTPException(status_code=500, detail="Virtual service deployer not initialized.")
    return container.vs_deployer


@router.post("/deploy")
def deploy_virtual_service(
    payload: DeployVsPayload,
    deployer: VirtualServiceDeployer = Depends(get_deployer),
) -> Dict[str, Any]:
    workspace = payload.workspace or deployer.settings.devtest_workspace
    lines: List[str] = []
    try:
        report = deployer.deploy(payload.to_step(), workspace, payload.parameters, log_line=lines.append)
    except DeployError as exc:
        log.warning("Deploy to VSE %s aborted: %s", payload.vse_name, exc)
        raise HTTPException(status_code=400, detail={"message": str(exc), "log": lines}) from exc
    return report.as_dict()


@router.get("/check")
def check_form(
    vseName: str = "",
    marFilesPaths: str = "",
    useCustomRegistry: bool = False,
    host: str = "",
    port: str = "",
) -> Dict[str, Any]:
    return {
        "vseName": check_vse_name(vseName),
        "marFilesPaths": check_mar_files_paths(marFilesPaths),
        "host": check_host(useCustomRegistry, host, port),
    }
