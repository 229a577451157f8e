"""Tests for the plivoclient command line."""

import json

import httpx
import pytest

from plivoclient import cli
from plivoclient.config import DEFAULT_CONFIG_YAML
from plivoclient.rest.client import RestAPI

AUTH_ID = "MAXXXXXXXXXXXXXXXXXXXX"
ACCOUNT_URL = f"https://api.plivo.com/v1/Account/{AUTH_ID}"


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "plivo.yaml"
    path.write_text(f"auth_id: {AUTH_ID}\nauth_token: tokenvalue\n")
    return path


@pytest.fixture
def mocked_client(monkeypatch, recorder):
    def build(config):
        return RestAPI.from_config(config, transport=httpx.MockTransport(recorder))

    monkeypatch.setattr(cli, "build_client", build)
    return recorder


class TestInit:

    def test_writes_template(self, tmp_path, capsys):
        output = tmp_path / "plivo.yaml"
        cli.main(["init", "--output", str(output)])
        assert output.read_text() == DEFAULT_CONFIG_YAML
        assert "Configuration written to" in capsys.readouterr().out

    def test_refuses_to_overwrite(self, tmp_path):
        output = tmp_path / "plivo.yaml"
        output.write_text("auth_id: keep\n")
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["init", "-o", str(output)])
        assert exc_info.value.code == 1
        assert output.read_text() == "auth_id: keep\n"

    def test_force_overwrites(self, tmp_path):
        output = tmp_path / "plivo.yaml"
        output.write_text("auth_id: old\n")
        cli.main(["init", "-o", str(output), "--force"])
        assert output.read_text() == DEFAULT_CONFIG_YAML


class TestListings:

    def test_verbs(self, capsys):
        cli.main(["verbs"])
        out = capsys.readouterr().out
        assert "Dial" in out
        assert "children: Number, User" in out
        assert "Total: 15 elements" in out

    def test_operations(self, capsys):
        cli.main(["operations"])
        out = capsys.readouterr().out
        assert "get_account" in out
        assert "make_call" in out
        assert "close" not in out
        assert "from_config" not in out

    def test_operations_are_rest_methods(self):
        names = cli.operations()
        assert "hangup_all_calls" in names
        assert all(callable(getattr(RestAPI, name)) for name in names)

    def test_no_command_prints_help(self, capsys):
        cli.main([])
        assert "usage: plivoclient" in capsys.readouterr().out


class TestAccount:

    def test_prints_account(self, config_file, mocked_client, capsys):
        mocked_client.respond({"api_id": "a1", "account_type": "standard", "cash_credits": "10.5"})
        cli.main(["account", "--config", str(config_file)])
        printed = json.loads(capsys.readouterr().out)
        assert printed["account_type"] == "standard"
        assert printed["api_id"] == "a1"
        assert str(mocked_client.last.url) == f"{ACCOUNT_URL}/"

    def test_remote_error_exits(self, config_file, mocked_client, capsys):
        mocked_client.respond({"api_id": "a1", "error": "authentication failed"}, status_code=401)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["account", "-c", str(config_file)])
        assert exc_info.value.code == 1
        assert json.loads(capsys.readouterr().out)["error"] == "authentication failed"

    def test_missing_credentials(self, tmp_path, monkeypatch, mocked_client):
        monkeypatch.delenv("PLIVO_AUTH_ID", raising=False)
        monkeypatch.delenv("PLIVO_AUTH_TOKEN", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["account", "-c", str(tmp_path / "absent.yaml")])
        assert exc_info.value.code == 1
        assert mocked_client.requests == []

    def test_falls_back_to_environment(self, tmp_path, monkeypatch, mocked_client, capsys):
        monkeypatch.setenv("PLIVO_AUTH_ID", "MAENV")
        monkeypatch.setenv("PLIVO_AUTH_TOKEN", "envtoken")
        cli.main(["account", "-c", str(tmp_path / "absent.yaml")])
        capsys.readouterr()
        assert "/Account/MAENV/" in str(mocked_client.last.url)


class TestInvoke:

    def test_invoke_with_params(self, config_file, mocked_client, capsys):
        mocked_client.respond({"api_id": "a2", "number": "14155550100"})
        cli.main(["invoke", "get_number", "number=14155550100", "-c", str(config_file)])
        assert json.loads(capsys.readouterr().out)["number"] == "14155550100"
        assert mocked_client.last.url.path.endswith("/Number/14155550100/")

    def test_invoke_without_params(self, config_file, mocked_client, capsys):
        mocked_client.respond({"api_id": "a3", "calls": []})
        cli.main(["invoke", "get_live_calls", "-c", str(config_file)])
        capsys.readouterr()
        assert mocked_client.last.url.params["status"] == "live"

    def test_unknown_operation(self, config_file, mocked_client):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["invoke", "launch_rocket", "-c", str(config_file)])
        assert exc_info.value.code == 2
        assert mocked_client.requests == []

    def test_bad_parameter(self, config_file, mocked_client):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["invoke", "get_number", "14155550100", "-c", str(config_file)])
        assert exc_info.value.code == 2

    def test_missing_mandatory_parameter(self, config_file, mocked_client):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["invoke", "get_number", "-c", str(config_file)])
        assert exc_info.value.code == 1
        assert mocked_client.requests == []

    def test_invoke_bulk_call_with_destinations(self, config_file, mocked_client, capsys):
        mocked_client.respond({"api_id": "a4", "request_uuids": ["r-1", "r-2"]})
        cli.main([
            "invoke", "make_bulk_call",
            "from=14155550100", "answer_url=https://x/answer",
            "dest=14155550101", "dest=14155550102:X-PH-Test=1",
            "-c", str(config_file),
        ])
        assert json.loads(capsys.readouterr().out)["request_uuids"] == ["r-1", "r-2"]
        body = json.loads(mocked_client.last.content)
        assert body["from"] == "14155550100"
        assert body["to"] == "14155550101<14155550102"
        assert body["sip_headers"] == "<X-PH-Test=1"
        assert "dest" not in body

    def test_invoke_bulk_call_without_destinations(self, config_file, mocked_client):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["invoke", "make_bulk_call", "from=1", "-c", str(config_file)])
        assert exc_info.value.code == 1
        assert mocked_client.requests == []

    def test_invoke_bulk_call_bad_destination(self, config_file, mocked_client):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["invoke", "make_bulk_call", "dest=:X-A=1", "-c", str(config_file)])
        assert exc_info.value.code == 2
        assert mocked_client.requests == []
