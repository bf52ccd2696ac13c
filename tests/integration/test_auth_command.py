"""Integration tests for auth command."""

import json
from argparse import Namespace

import pytest

from visionfi_cli.commands import auth


@pytest.mark.integration
class TestAuthVerify:
    def test_success(self, make_ctx, capsys):
        exit_code = auth.handle(make_ctx(Namespace(auth_subcommand="verify")))

        assert exit_code == 0
        assert "Authentication successful!" in capsys.readouterr().out

    def test_rejected(self, make_ctx, fake_client, capsys):
        fake_client.verify_response = {"data": False}

        exit_code = auth.handle(make_ctx(Namespace(auth_subcommand="verify")))

        assert exit_code == 1
        assert "Authentication failed!" in capsys.readouterr().err

    def test_json_output(self, make_ctx, capsys):
        exit_code = auth.handle(make_ctx(Namespace(auth_subcommand="verify"), json_output=True))

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data["success"] is True
        assert data["message"] == "Authentication successful!"

    def test_missing_subcommand(self, make_ctx):
        assert auth.handle(make_ctx(Namespace(auth_subcommand=None))) == 1
