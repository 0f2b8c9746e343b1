"""Dataclasses describing a virtual service deployment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import SecretStr

from .constants import FIELD_FILE, FIELD_FILE_URI


@dataclass
class DeployVsStep:
    """Caller supplied configuration of one deploy invocation.

    Registry fields are only consulted when ``use_custom_registry`` is set,
    otherwise the shared settings provide the endpoint and credentials.
    """

    vse_name: str = ""
    mar_files_paths: List[str] = field(default_factory=list)
    use_custom_registry: bool = False
    host: str = ""
    port: str = ""
    username: str = ""
    password: SecretStr = field(default_factory=lambda: SecretStr(""))

    @property
    def mar_files_paths_text(self) -> str:
        return "\n".join(self.mar_files_paths)


@dataclass(frozen=True)
class DeployRequestSpec:
    """Fully resolved, validated deploy request. Read-only during the deploy loop."""

    host: str
    port: str
    username: str
    password: SecretStr
    vse_name: str
    mar_path_specs: Tuple[str, ...]

    @property
    def auth(self) -> Tuple[str, str]:
        return self.username, self.password.get_secret_value()


@dataclass(frozen=True)
class MultipartBody:
    """A multipart/form-data body holding exactly one part."""

    name: str
    content: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def file_uri(cls, uri: str) -> "MultipartBody":
        return cls(name=FIELD_FILE_URI, content=uri.encode("utf-8"), content_type="text/plain; charset=UTF-8")

    @classmethod
    def upload(cls, filename: str, content: bytes) -> "MultipartBody":
        return cls(name=FIELD_FILE, content=content, filename=filename, content_type="application/octet-stream")

    @property
    def is_upload(self) -> bool:
        return self.name == FIELD_FILE

    def as_files(self) -> Dict[str, Tuple[Optional[str], bytes, Optional[str]]]:
        """Mapping for the ``files=`` argument of httpx; a ``None`` filename renders a plain field."""
        return {self.name: (self.filename, self.content, self.content_type)}


@dataclass(frozen=True)
class DeploySuccess:
    response_body: str

    ok = True


@dataclass(frozen=True)
class DeployAuthFailure:
    response_body: str = ""

    ok = False


@dataclass(frozen=True)
class DeployHttpError:
    status_code: int
    response_body: str

    ok = False


DeployOutcome = Union[DeploySuccess, DeployAuthFailure, DeployHttpError]


@dataclass
class PathOutcome:
    mar_path: str
    outcome: DeployOutcome


@dataclass
class DeployReport:
    """Result of a deploy loop that completed without failure."""

    vse_name: str
    endpoint: str
    results: List[PathOutcome] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    @property
    def deployed(self) -> List[str]:
        return [item.mar_path for item in self.results if item.outcome.ok]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "vseName": self.vse_name,
            "endpoint": self.endpoint,
            "deployed": self.deployed,
            "responses": [
                {"path": item.mar_path, "body": item.outcome.response_body} for item in self.results
            ],
            "log": list(self.lines),
        }
