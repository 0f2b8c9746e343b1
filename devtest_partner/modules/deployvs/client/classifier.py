"""Map registry responses onto deploy outcomes."""

from __future__ import annotations

from devtest_partner.modules.deployvs.domain import (
    DeployAuthFailure,
    DeployError,
    DeployHttpError,
    DeployOutcome,
    DeployResponseError,
    DeploySuccess,
    InvalidCredentialsError,
)
from devtest_partner.modules.deployvs.domain.constants import (
    MSG_INVALID_CREDENTIALS,
    MSG_RESPONSE_STATUS,
    STATUS_CREATED,
    STATUS_INVALID_CREDENTIALS,
)


def classify(status_code: int, response_body: str) -> DeployOutcome:
    """Only 201 is a deployment. The registry reports rejected credentials with a 200."""
    if status_code == STATUS_CREATED:
        return DeploySuccess(response_body)
    if status_code == STATUS_INVALID_CREDENTIALS:
        return DeployAuthFailure(response_body)
    return DeployHttpError(status_code, response_body)


def outcome_error(outcome: DeployOutcome) -> DeployError | None:
    """Return the error that aborts the deployment for ``outcome``, if any."""
    if isinstance(outcome, DeployAuthFailure):
        return InvalidCredentialsError(MSG_INVALID_CREDENTIALS)
    if isinstance(outcome, DeployHttpError):
        message = MSG_RESPONSE_STATUS.format(status=outcome.status_code, body=outcome.response_body)
        return DeployResponseError(message, outcome.status_code, outcome.response_body)
    return None


def raise_for_outcome(outcome: DeployOutcome) -> None:
    error = outcome_error(outcome)
    if error is not None:
        raise error
