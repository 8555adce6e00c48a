"""Tests for the ``path`` command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pubky_app_specs.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestPathCommands:
    def test_build(self, cli_runner: CliRunner) -> None:
        args = ["-q", "path", "build", "bookmark", "2GN0JCHX9NYXPECQDS8KSMSE7M"]
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert result.output.strip() == "/pub/pubky.app/bookmarks/2GN0JCHX9NYXPECQDS8KSMSE7M"

    def test_build_singleton_rejects_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "build", "profile", "x"])
        assert result.exit_code == 1
        assert "does not take an id" in result.output

    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "path", "parse", "/pub/pubky.app/last_read"])
        data = json.loads(result.output)
        assert data["data"]["kind"] == "last_read"
        assert data["data"]["id"] is None

    def test_parse_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "path", "parse", "/pub/pubky.app/drafts/1"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["kind"] == "unknown"

    def test_parse_relative_path(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["path", "parse", "pub/pubky.app/posts/1"])
        assert result.exit_code == 1
