"""Unit tests for the start command."""

from click.testing import CliRunner

from ghcs.cli.cli import cli
from ghcs.core.context import context_for_test
from ghcs.gateway.codespace_cli.fake import FakeCodespaceCli
from ghcs.gateway.time.fake import FakeTime

OWL = {
    "name": "owl-456",
    "displayName": "night owl",
    "repository": "acme/gadgets",
    "state": "Shutdown",
}


def test_start_returns_after_launch() -> None:
    runner = CliRunner()
    cli_gateway = FakeCodespaceCli(records=[OWL], start_makes_available=False)
    time = FakeTime()
    ctx = context_for_test(codespace_cli=cli_gateway, time=time)

    result = runner.invoke(cli, ["start"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert cli_gateway.launched == ["owl-456"]
    assert time.sleep_calls == []
    assert "Starting 'night owl'..." in result.output
    assert "ghcs connect night owl" in result.output


def test_start_wait() -> None:
    runner = CliRunner()
    cli_gateway = FakeCodespaceCli(records=[OWL])
    ctx = context_for_test(codespace_cli=cli_gateway)

    result = runner.invoke(cli, ["start", "night owl", "--wait"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert "Codespace ready." in result.output
    assert "ghcs connect" not in result.output


def test_start_nothing_shutdown() -> None:
    runner = CliRunner()
    ctx = context_for_test(codespace_cli=FakeCodespaceCli(records=[{**OWL, "state": "Available"}]))

    result = runner.invoke(cli, ["start"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "No matching codespaces." in result.output


def test_start_launch_failure() -> None:
    runner = CliRunner()
    ctx = context_for_test(
        codespace_cli=FakeCodespaceCli(records=[OWL], launch_error="Could not launch 'gh'")
    )

    result = runner.invoke(cli, ["start"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Error: Could not launch 'gh'" in result.output
