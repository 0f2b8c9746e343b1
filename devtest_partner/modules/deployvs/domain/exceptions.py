"""Errors raised while deploying virtual services.

Every error aborts the whole multi-path deployment; nothing is retried.
"""

from __future__ import annotations


class DeployError(RuntimeError):
    """Base class for failures of a virtual service deployment."""


class DeployValidationError(DeployError):
    """Raised before any network activity when the request is incomplete."""


class NoMatchingFileError(DeployError):
    """Raised when a wildcard path matches nothing in the workspace."""

    def __init__(self, pattern: str, workspace: str) -> None:
        super().__init__(f"No file matching {pattern} found in workspace {workspace}")
        self.pattern = pattern
        self.workspace = workspace


class MarFileNotFoundError(DeployError, FileNotFoundError):
    """Raised when a local MAR file cannot be located in the workspace."""

    def __init__(self, relative_path: str) -> None:
        super().__init__(f"Cannot locate file with relative path {relative_path} in workspace of job")
        self.relative_path = relative_path


class InvalidCredentialsError(DeployError):
    """The registry answered 200, which it does for rejected credentials."""


class DeployResponseError(DeployError):
    """The registry answered with an unexpected status code."""

    def __init__(self, message: str, status_code: int, response_body: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class DeployTransportError(DeployError):
    """Connection or IO failure while talking to the registry."""
