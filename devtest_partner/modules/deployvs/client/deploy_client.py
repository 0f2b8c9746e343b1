"""HTTP client posting MAR files to the DevTest Registry."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import httpx

from devtest_partner.modules.deployvs.domain import (
    DeployOutcome,
    DeployTransportError,
    DeployValidationError,
    MultipartBody,
)
from devtest_partner.modules.deployvs.domain.constants import DEPLOY_MAR_PATH, VIRTUAL_SERVICE_ACCEPT

from .classifier import classify


def build_deploy_url(host: str, port: str, vse_name: str) -> str:
    # vse_name goes in as-is, it has to be URL safe already
    return f"http://{host}:{port}" + DEPLOY_MAR_PATH.format(vse_name=vse_name)


class DeployClient:
    """Issue one ``deployMar`` POST per MAR path.

    Without an injected client every request opens and closes its own
    connection; an injected client is reused and stays owned by the caller.
    """

    def __init__(self, client: Optional[httpx.Client] = None, timeout: Optional[float] = None) -> None:
        self._client = client
        self.timeout = timeout
        self.log = logging.getLogger(self.__class__.__name__)

    def deploy(self, endpoint: str, auth: Tuple[str, str], body: MultipartBody) -> DeployOutcome:
        self.log.info("POST %s (%s)", endpoint, "upload" if body.is_upload else "reference")
        try:
            if self._client is not None:
                status_code, text = self._post(self._client, endpoint, auth, body)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    status_code, text = self._post(client, endpoint, auth, body)
        except httpx.InvalidURL as exc:
            self.log.error("Invalid registry URL %s: %s", endpoint, exc)
            raise DeployValidationError(f"Invalid DevTest Registry URL {endpoint}: {exc}") from exc
        except httpx.TransportError as exc:
            self.log.error("Transport failure for %s: %s", endpoint, exc)
            raise DeployTransportError(f"Cannot reach DevTest Registry at {endpoint}: {exc}") from exc
        except httpx.HTTPError as exc:
            self.log.error("Request to %s failed: %s", endpoint, exc)
            raise DeployTransportError(f"Request to DevTest Registry at {endpoint} failed: {exc}") from exc
        self.log.info("Registry answered %s for %s", status_code, endpoint)
        return classify(status_code, text)

    @staticmethod
    def _post(
        client: httpx.Client, endpoint: str, auth: Tuple[str, str], body: MultipartBody
    ) -> Tuple[int, str]:
        headers = {"Accept": VIRTUAL_SERVICE_ACCEPT}
        with client.stream(
            "POST",
            endpoint,
            auth=httpx.BasicAuth(*auth),
            headers=headers,
            files=body.as_files(),
        ) as response:
            response.read()
            return response.status_code, response.text
