"""Tests for the command line entry point."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from typing import Any

import pytest

from credhub_cli.application.exceptions import TransportError
from credhub_cli.infrastructure.adapters.auth import TokenStrategy
from credhub_cli.infrastructure.config import Settings
from credhub_cli.main import Application, ApplicationContainer, build_parser, run

EnvelopeFactory = Callable[..., dict[str, Any]]
BodyFactory = Callable[..., str]


@pytest.fixture
def make_app(make_client) -> Callable[..., tuple[Application, io.StringIO]]:
    def _make(body: str = "", **kwargs: Any) -> tuple[Application, io.StringIO]:
        client, _ = make_client(body, **kwargs)
        stdout = io.StringIO()
        return Application(client, stdout=stdout), stdout

    return _make


class TestParser:
    """Tests for the argument parser."""

    def test_get_defaults(self) -> None:
        args = build_parser().parse_args(["get", "-n", "/example-password"])
        assert args.command == "get"
        assert args.name == "/example-password"
        assert args.versions is None
        assert args.output_json is False
        assert args.key is None

    @pytest.mark.parametrize("versions", ["0", "-2", "many"])
    def test_versions_must_be_positive(self, versions: str) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["get", "-n", "/x", "--versions", versions])

    @pytest.mark.parametrize(
        ("versions", "message"),
        [("many", "must be an integer, got 'many'"), ("0", "must be a positive integer, got '0'")],
    )
    def test_versions_error_message(
        self, capsys: pytest.CaptureFixture[str], versions: str, message: str
    ) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["get", "-n", "/x", "--versions", versions])

        assert message in capsys.readouterr().err

    def test_key_and_versions_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["get", "-n", "/x", "--versions", "2", "-k", "ca"])

    def test_name_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["get"])


class TestGetCommand:
    """Tests for ``credhub get``."""

    def test_text_output(self, make_app, password_body: str) -> None:
        app, stdout = make_app(password_body)

        exit_code = run(["get", "-n", "/example-password"], application=app)

        assert exit_code == 0
        assert "value: some-password" in stdout.getvalue()

    def test_json_output(self, make_app, password_body: str) -> None:
        app, stdout = make_app(password_body)

        exit_code = run(["get", "-n", "/example-password", "-j"], application=app)

        assert exit_code == 0
        assert json.loads(stdout.getvalue()) == {
            "id": "some-id",
            "name": "/example-password",
            "type": "password",
            "value": "some-password",
            "version_created_at": "2017-01-05T01:01:01Z",
        }

    def test_versions_output(self, make_app, envelope: EnvelopeFactory, response_body: BodyFactory) -> None:
        body = response_body(
            envelope("/example-password", "password", "newest"),
            envelope("/example-password", "password", "oldest"),
        )
        app, stdout = make_app(body)

        exit_code = run(["get", "-n", "/example-password", "--versions", "2", "-j"], application=app)

        assert exit_code == 0
        versions = json.loads(stdout.getvalue())["versions"]
        assert [v["value"] for v in versions] == ["newest", "oldest"]

    def test_versions_text_output(self, make_app, envelope: EnvelopeFactory, response_body: BodyFactory) -> None:
        body = response_body(
            envelope("/example-password", "password", "newest"),
            envelope("/example-password", "password", "oldest"),
        )
        app, stdout = make_app(body)

        exit_code = run(["get", "-n", "/example-password", "--versions", "2"], application=app)

        assert exit_code == 0
        newest, oldest = stdout.getvalue().split("\n---\n")
        assert "value: newest" in newest
        assert "value: oldest" in oldest

    def test_key_output(
        self,
        make_app,
        envelope: EnvelopeFactory,
        response_body: BodyFactory,
        certificate_value: dict[str, str],
    ) -> None:
        app, stdout = make_app(response_body(envelope("/example-certificate", "certificate", certificate_value)))

        exit_code = run(["get", "-n", "/example-certificate", "-k", "ca"], application=app)

        assert exit_code == 0
        assert stdout.getvalue() == certificate_value["ca"] + "\n"

    def test_empty_result(self, make_app, capsys: pytest.CaptureFixture[str]) -> None:
        app, stdout = make_app('{"data":[]}')

        exit_code = run(["get", "-n", "/missing"], application=app)

        assert exit_code == 1
        assert stdout.getvalue() == ""
        assert "response did not contain any credentials" in capsys.readouterr().err

    def test_transport_error(self, make_app, capsys: pytest.CaptureFixture[str]) -> None:
        app, _ = make_app(error=TransportError("Network error occurred"))

        exit_code = run(["get", "-n", "/example-password"], application=app)

        assert exit_code == 1
        assert "Network error occurred" in capsys.readouterr().err

    def test_malformed_value(
        self, make_app, envelope: EnvelopeFactory, response_body: BodyFactory, capsys: pytest.CaptureFixture[str]
    ) -> None:
        app, _ = make_app(response_body(envelope("/example-certificate", "certificate", "not-an-object")))

        exit_code = run(["get", "-n", "/example-certificate"], application=app)

        assert exit_code == 1
        assert "not a valid certificate value" in capsys.readouterr().err


class TestFindCommand:
    """Tests for ``credhub find``."""

    def test_all_paths(self, make_app) -> None:
        app, stdout = make_app('{"paths": [{"path": "/deploy/"}, {"path": "/deploy/db/"}]}')

        exit_code = run(["find", "--all-paths"], application=app)

        assert exit_code == 0
        assert stdout.getvalue() == "Path\n/deploy/\n/deploy/db/\n"


class TestEntryPoint:
    """Tests for wiring from the environment."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run([]) == 1
        assert "usage: credhub" in capsys.readouterr().err

    def test_configuration_error(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.delenv("CREDHUB_SERVER", raising=False)

        assert run(["get", "-n", "/example-password"]) == 1
        assert "CREDHUB_SERVER" in capsys.readouterr().err

    def test_container_builds_token_strategy(self) -> None:
        settings = Settings(
            server="https://credhub.example.com",
            skip_tls_validation=True,
            timeout=30.0,
            client_cert="",
            client_key="",
            auth_url="https://uaa.example.com",
            client_secret="secret",
        )
        container = ApplicationContainer(settings)

        with container.create_request_signer() as signer:
            assert isinstance(signer, TokenStrategy)
            client = container.create_credential_repository(signer)
            assert client.base_url == "https://credhub.example.com"

    def test_container_builds_mutual_tls(self, monkeypatch: pytest.MonkeyPatch) -> None:
        created: list[Any] = []

        class FakeMutualTLSStrategy:
            def __init__(self, config: Any) -> None:
                created.append(config)

        monkeypatch.setattr("credhub_cli.main.MutualTLSStrategy", FakeMutualTLSStrategy)
        settings = Settings(
            server="https://credhub.example.com",
            client_cert="/certs/client.pem",
            client_key="/certs/client.key",
        )

        signer = ApplicationContainer(settings).create_request_signer()

        assert isinstance(signer, FakeMutualTLSStrategy)
        assert created[0].certificate == "/certs/client.pem"
        assert created[0].private_key == "/certs/client.key"

    def test_missing_ca_file(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path
    ) -> None:
        missing = tmp_path / "missing-ca.pem"
        monkeypatch.setenv("CREDHUB_SERVER", "https://credhub.example.com")
        monkeypatch.setenv("CREDHUB_AUTH_URL", "https://uaa.example.com")
        monkeypatch.setenv("CREDHUB_SECRET", "secret")
        monkeypatch.setenv("CREDHUB_CA_CERT", str(missing))
        monkeypatch.delenv("CREDHUB_CLIENT_CERT", raising=False)
        monkeypatch.delenv("CREDHUB_CLIENT_KEY", raising=False)

        assert run(["get", "-n", "/example-password"]) == 1
        assert f"Failed to load CA certificate from {missing}" in capsys.readouterr().err

    def test_missing_client_certificate(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path
    ) -> None:
        monkeypatch.setenv("CREDHUB_SERVER", "https://credhub.example.com")
        monkeypatch.setenv("CREDHUB_CLIENT_CERT", str(tmp_path / "client.pem"))
        monkeypatch.setenv("CREDHUB_CLIENT_KEY", str(tmp_path / "client.key"))
        monkeypatch.delenv("CREDHUB_CA_CERT", raising=False)

        assert run(["get", "-n", "/example-password"]) == 1
        assert "Failed to load client certificate" in capsys.readouterr().err
