from .exceptions import (
    DeployError,
    DeployResponseError,
    DeployTransportError,
    DeployValidationError,
    InvalidCredentialsError,
    MarFileNotFoundError,
    NoMatchingFileError,
)
from .models import (
    DeployAuthFailure,
    DeployHttpError,
    DeployOutcome,
    DeployReport,
    DeployRequestSpec,
    DeploySuccess,
    DeployVsStep,
    MultipartBody,
    PathOutcome,
)

__all__ = [
    "DeployError",
    "DeployResponseError",
    "DeployTransportError",
    "DeployValidationError",
    "InvalidCredentialsError",
    "MarFileNotFoundError",
    "NoMatchingFileError",
    "DeployAuthFailure",
    "DeployHttpError",
    "DeployOutcome",
    "DeployReport",
    "DeployRequestSpec",
    "DeploySuccess",
    "DeployVsStep",
    "MultipartBody",
    "PathOutcome",
]
