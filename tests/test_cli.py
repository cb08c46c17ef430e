# SPDX-License-Identifier: Apache-2.0
"""Click CLI against the in-process app."""
import base64
import json

import pytest
from click.testing import CliRunner

from ceremony_client import cli as cli_module


@pytest.fixture
def runner(sdk, monkeypatch):
    monkeypatch.setattr(cli_module, "_client", lambda ctx: sdk)
    return CliRunner()


def test_parameters(runner, sdk):
    result = runner.invoke(cli_module.cli, ["parameters"])
    assert result.exit_code == 0
    assert base64.b64decode(result.output.strip()) == sdk.parameters()


def test_register_and_status(runner):
    result = runner.invoke(cli_module.cli, ["register", "Barry"])
    assert result.exit_code == 0
    assert result.output.strip() == "0"
    result = runner.invoke(cli_module.cli, ["status"])
    assert json.loads(result.output)["registered"] == 1


def test_submit_from_files(runner, tmp_path):
    runner.invoke(cli_module.cli, ["register", "Barry"])
    share = tmp_path / "share.bin"
    cipher = tmp_path / "cipher.bin"
    share.write_bytes(b"share")
    cipher.write_bytes(b"cipher")
    result = runner.invoke(
        cli_module.cli,
        ["submit", "--participant-id", "0", "--key-share-file", str(share), "--cipher-file", str(cipher)],
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {"participant_id": 0, "status": "ok"}


def test_demo_runs_whole_session(runner):
    result = runner.invoke(cli_module.cli, ["demo"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    expected = lines[-2].removeprefix("expected ")
    computed = lines[-1].removeprefix("computed ")
    assert expected == computed
    assert "Brian (id 2)" in result.output


def test_demo_wrong_group_size(runner):
    result = runner.invoke(cli_module.cli, ["demo", "Solo"])
    assert result.exit_code != 0
    assert "expects 3 participants" in result.output
