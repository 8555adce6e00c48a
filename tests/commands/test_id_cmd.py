"""Tests for the ``id`` command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from pubky_app_specs.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestIdCommands:
    def test_generate(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "id", "generate"])
        assert result.exit_code == 0
        assert len(result.output.strip()) == 13

    def test_generate_from_timestamp(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "id", "generate", "--timestamp", "1730000000000000"]
        )
        assert json.loads(result.output)["data"]["timestamp"] == 1730000000000000

    def test_generate_out_of_range_timestamp(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["id", "generate", "--timestamp", str(2**64)])
        assert result.exit_code == 1
        assert "INVALID_IDENTIFIER" in result.output

    def test_generate_then_validate(self, cli_runner: CliRunner) -> None:
        object_id = cli_runner.invoke(cli, ["-q", "id", "generate"]).output.strip()
        result = cli_runner.invoke(cli, ["id", "validate", object_id])
        assert result.exit_code == 0
        assert object_id in result.output

    def test_validate_rejects_hash_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["id", "validate", "2GN0JCHX9NYXPECQDS8KSMSE7M"])
        assert result.exit_code == 1
        assert "INVALID_IDENTIFIER" in result.output

    def test_hash(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "id", "hash", "pubky://user_id/pub/pubky.app/posts/post_id"]
        )
        assert result.output.strip() == "2GN0JCHX9NYXPECQDS8KSMSE7M"

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "id", "hash", "abc"])
        assert result.exit_code == 0
        assert "SpecsService.hash_id" in result.output
