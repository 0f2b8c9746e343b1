"""Deploy loop for virtual services: resolve, build, post, classify."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from devtest_partner.modules.deployvs.client import DeployClient, build_deploy_url, raise_for_outcome
from devtest_partner.modules.deployvs.domain import (
    DeployReport,
    DeployRequestSpec,
    DeployValidationError,
    DeployVsStep,
    PathOutcome,
)
from devtest_partner.modules.deployvs.domain.constants import (
    MSG_DEPLOYING,
    MSG_ERROR,
    MSG_LOCATION,
    MSG_MISSING_ENDPOINT,
    MSG_MISSING_MAR_FILES,
    MSG_MISSING_VSE,
    MSG_RESPONSE_BODY,
    MSG_SUCCESS,
)
from devtest_partner.modules.deployvs.request import LineSink, RequestBuilder
from devtest_partner.modules.deployvs.resolver import PathResolver, expand_parameter
from devtest_partner.settings import Settings


class VirtualServiceDeployer:
    """Deploy every MAR path of a step to one VSE, stopping at the first failure."""

    def __init__(self, settings: Settings, client: Optional[DeployClient] = None) -> None:
        self.settings = settings
        self.client = client or DeployClient(timeout=settings.devtest_timeout)
        self.log = logging.getLogger(self.__class__.__name__)

    def resolve_spec(
        self,
        step: DeployVsStep,
        workspace: Union[str, Path],
        env: Optional[Mapping[str, str]] = None,
    ) -> DeployRequestSpec:
        """Validate the step and resolve endpoint, credentials and MAR paths.

        Raises before any network activity when the VSE name, the path list or
        the registry endpoint is missing, or when a wildcard matches nothing.
        """
        self.log.debug("MAR paths for VSE %s:\n%s", step.vse_name, step.mar_files_paths_text)
        env = env or {}
        if not step.vse_name:
            raise DeployValidationError(MSG_MISSING_VSE)
        if not step.mar_files_paths:
            raise DeployValidationError(MSG_MISSING_MAR_FILES)

        if step.use_custom_registry:
            host, port = step.host, step.port
            username, password = step.username, step.password
        else:
            host, port = self.settings.devtest_host, self.settings.devtest_port
            username, password = self.settings.devtest_username, self.settings.devtest_password

        host = expand_parameter(host, env)
        port = expand_parameter(port, env)
        if not host or not port:
            raise DeployValidationError(MSG_MISSING_ENDPOINT)

        mar_paths = PathResolver(workspace, env).resolve(step.mar_files_paths)
        return DeployRequestSpec(
            host=host,
            port=port,
            username=username,
            password=password,
            vse_name=expand_parameter(step.vse_name, env),
            mar_path_specs=tuple(mar_paths),
        )

    def deploy(
        self,
        step: DeployVsStep,
        workspace: Union[str, Path],
        env: Optional[Mapping[str, str]] = None,
        log_line: Optional[LineSink] = None,
    ) -> DeployReport:
        spec = self.resolve_spec(step, workspace, env)
        endpoint = build_deploy_url(spec.host, spec.port, spec.vse_name)
        report = DeployReport(vse_name=spec.vse_name, endpoint=endpoint)

        def emit(line: str) -> None:
            report.lines.append(line)
            self.log.info(line)
            if log_line:
                log_line(line)

        builder = RequestBuilder(workspace)
        for mar_path in spec.mar_path_specs:
            emit(MSG_DEPLOYING.format(path=mar_path))
            emit(MSG_LOCATION.format(host=spec.host, port=spec.port))

            body = builder.build(mar_path, log_line=emit)
            outcome = self.client.deploy(endpoint, spec.auth, body)
            report.results.append(PathOutcome(mar_path, outcome))

            if not outcome.ok:
                emit(MSG_ERROR)
                raise_for_outcome(outcome)
            emit(MSG_RESPONSE_BODY.format(body=outcome.response_body))
            emit(MSG_SUCCESS.format(path=mar_path))

        self.log.info("Deployed %d MAR file(s) to VSE %s", len(report.results), spec.vse_name)
        return report
