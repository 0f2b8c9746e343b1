import base64

import httpx
import pytest
from pydantic import SecretStr

from devtest_partner.modules.deployvs.client import DeployClient
from devtest_partner.modules.deployvs.domain import (
    DeployError,
    DeployResponseError,
    DeployValidationError,
    DeployVsStep,
    InvalidCredentialsError,
    MarFileNotFoundError,
    NoMatchingFileError,
)
from devtest_partner.modules.deployvs.resolver import split_mar_paths
from devtest_partner.modules.deployvs.service import VirtualServiceDeployer
from devtest_partner.settings import Settings


def build_settings(**overrides) -> Settings:
    defaults = {
        "devtest_host": "registry.local",
        "devtest_port": "1505",
        "devtest_username": "admin",
        "devtest_password": "admin-pass",
    }
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


class RecordingRegistry:
    """MockTransport handler answering with queued responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.responses.pop(0)


def build_deployer(registry: RecordingRegistry, **overrides) -> VirtualServiceDeployer:
    client = DeployClient(client=httpx.Client(transport=httpx.MockTransport(registry)))
    return VirtualServiceDeployer(build_settings(**overrides), client=client)


def make_step(mar_files_paths: str, vse_name: str = "VSE1", **kwargs) -> DeployVsStep:
    return DeployVsStep(vse_name=vse_name, mar_files_paths=split_mar_paths(mar_files_paths), **kwargs)


def test_local_and_remote_paths_are_deployed_in_order(tmp_path):
    (tmp_path / "a.mar").write_bytes(b"local-mar")
    registry = RecordingRegistry(httpx.Response(201, text="first"), httpx.Response(201, text="second"))
    lines = []

    report = build_deployer(registry).deploy(
        make_step("a.mar,http://x/y.mar"), tmp_path, log_line=lines.append
    )

    assert report.deployed == ["a.mar", "http://x/y.mar"]
    assert report.endpoint == "http://registry.local:1505/api/Dcm/VSEs/VSE1/actions/deployMar/"
    assert [str(request.url) for request in registry.requests] == [report.endpoint, report.endpoint]
    assert b'name="file"; filename="a.mar"' in registry.requests[0].content
    assert b"local-mar" in registry.requests[0].content
    assert b'name="fileURI"' in registry.requests[1].content
    assert b"http://x/y.mar" in registry.requests[1].content
    assert lines == [
        "Deploying virtual service from a.mar",
        "DevTest location: registry.local:1505",
        "Response body: first",
        "Virtual service a.mar was successfully deployed",
        "Deploying virtual service from http://x/y.mar",
        "DevTest location: registry.local:1505",
        "Response body: second",
        "Virtual service http://x/y.mar was successfully deployed",
    ]
    assert report.lines == lines
    assert report.as_dict()["responses"] == [
        {"path": "a.mar", "body": "first"},
        {"path": "http://x/y.mar", "body": "second"},
    ]


def test_missing_local_file_aborts_before_any_request(tmp_path):
    registry = RecordingRegistry(httpx.Response(201, text="never"))
    lines = []

    with pytest.raises(MarFileNotFoundError):
        build_deployer(registry).deploy(make_step("a.mar,http://x/y.mar"), tmp_path, log_line=lines.append)

    assert registry.requests == []
    assert lines[-1] == "File a.mar is not present in the workspace of job"


def test_rejected_credentials_stop_remaining_paths(tmp_path):
    registry = RecordingRegistry(httpx.Response(200, text="OK"), httpx.Response(201, text="never"))
    lines = []

    with pytest.raises(InvalidCredentialsError):
        build_deployer(registry).deploy(
            make_step("http://x/a.mar\nhttp://x/b.mar"), tmp_path, log_line=lines.append
        )

    assert len(registry.requests) == 1
    assert lines[-1] == "Deployment of virtual service failed"


def test_http_error_carries_status_and_body(tmp_path):
    registry = RecordingRegistry(httpx.Response(201, text="ok"), httpx.Response(500, text="err"))

    with pytest.raises(DeployResponseError) as excinfo:
        build_deployer(registry).deploy(make_step("http://x/a.mar,http://x/b.mar"), tmp_path)

    assert excinfo.value.status_code == 500
    assert excinfo.value.response_body == "err"
    assert len(registry.requests) == 2


def test_empty_vse_name_fails_before_http(tmp_path):
    registry = RecordingRegistry()

    with pytest.raises(DeployValidationError, match="VSE name cannot be empty"):
        build_deployer(registry).deploy(make_step("http://x/a.mar", vse_name=""), tmp_path)

    assert registry.requests == []


def test_empty_path_list_fails_before_http(tmp_path):
    registry = RecordingRegistry()

    with pytest.raises(DeployValidationError, match="Paths to MAR files cannot be empty"):
        build_deployer(registry).deploy(make_step(""), tmp_path)


def test_missing_registry_endpoint_fails_before_http(tmp_path):
    registry = RecordingRegistry()

    with pytest.raises(DeployValidationError, match="host/port"):
        build_deployer(registry, devtest_host="").deploy(make_step("http://x/a.mar"), tmp_path)


def test_unmatched_wildcard_fails_before_http(tmp_path):
    registry = RecordingRegistry()

    with pytest.raises(NoMatchingFileError):
        build_deployer(registry).deploy(make_step("*.mar"), tmp_path)

    assert registry.requests == []


def test_custom_registry_overrides_settings_and_expands_parameters(tmp_path):
    (tmp_path / "vs-12.mar").write_bytes(b"x")
    registry = RecordingRegistry(httpx.Response(201, text="OK"))
    step = make_step(
        "vs-${BUILD_NUMBER}.mar",
        vse_name="${VSE}",
        use_custom_registry=True,
        host="${REGISTRY_HOST}",
        port="2505",
        username="tester",
        password=SecretStr("s3cret"),
    )
    env = {"BUILD_NUMBER": "12", "VSE": "VSE2", "REGISTRY_HOST": "custom.local"}

    report = build_deployer(registry).deploy(step, tmp_path, env)

    request = registry.requests[0]
    assert str(request.url) == "http://custom.local:2505/api/Dcm/VSEs/VSE2/actions/deployMar/"
    assert request.headers["Authorization"] == "Basic " + base64.b64encode(b"tester:s3cret").decode()
    assert report.deployed == ["vs-12.mar"]


def test_resolve_spec_uses_settings_credentials(tmp_path):
    deployer = build_deployer(RecordingRegistry())

    spec = deployer.resolve_spec(make_step("http://x/a.mar"), tmp_path)

    assert (spec.host, spec.port) == ("registry.local", "1505")
    assert spec.auth == ("admin", "admin-pass")
    assert spec.mar_path_specs == ("http://x/a.mar",)


def test_step_joins_paths_with_newlines():
    step = make_step("a.mar, b.mar")

    assert step.mar_files_paths_text == "a.mar\nb.mar"


def test_duplicate_paths_are_each_deployed_and_reported(tmp_path):
    registry = RecordingRegistry(httpx.Response(201, text="one"), httpx.Response(201, text="two"))

    report = build_deployer(registry).deploy(make_step("http://x/a.mar\nhttp://x/a.mar"), tmp_path)

    assert len(registry.requests) == 2
    assert report.as_dict()["responses"] == [
        {"path": "http://x/a.mar", "body": "one"},
        {"path": "http://x/a.mar", "body": "two"},
    ]


def test_malformed_registry_port_aborts_with_deploy_error(tmp_path):
    registry = RecordingRegistry(httpx.Response(201, text="never"))

    with pytest.raises(DeployError, match="15o5"):
        build_deployer(registry, devtest_port="15o5").deploy(make_step("http://x/a.mar"), tmp_path)

    assert registry.requests == []
