"""Unit tests for the list command."""

import json
from datetime import UTC, datetime

from click.testing import CliRunner

from ghcs.cli.cli import cli
from ghcs.cli.commands.list_cmd import format_relative_time
from ghcs.core.context import context_for_test
from ghcs.gateway.codespace_cli.fake import FakeCodespaceCli

RECORDS = [
    {
        "name": "fox-123",
        "displayName": "fuzzy fox",
        "repository": "acme/widgets",
        "state": "Available",
        "gitStatus": {"ref": "main"},
        "lastUsedAt": "2025-01-01T10:00:00Z",
    },
    {
        "name": "owl-456",
        "displayName": "",
        "repository": "acme/gadgets",
        "state": "Rebuilding",
    },
]


def test_list_json() -> None:
    runner = CliRunner()
    ctx = context_for_test(codespace_cli=FakeCodespaceCli(records=RECORDS))

    result = runner.invoke(cli, ["list", "--json"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == [
        {
            "key": "fuzzy fox",
            "name": "fox-123",
            "display_name": "fuzzy fox",
            "state": "available",
            "repository": "acme/widgets",
            "ref": "main",
            "last_used_at": "2025-01-01T10:00:00+00:00",
        },
        {
            "key": "owl-456",
            "name": "owl-456",
            "display_name": "",
            "state": "rebuilding",
            "repository": "acme/gadgets",
            "ref": None,
            "last_used_at": None,
        },
    ]


def test_list_table() -> None:
    runner = CliRunner()
    ctx = context_for_test(codespace_cli=FakeCodespaceCli(records=RECORDS))

    result = runner.invoke(cli, ["list"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert "fuzzy fox" in result.output
    assert "owl-456" in result.output
    assert "rebuilding" in result.output


def test_list_empty() -> None:
    runner = CliRunner()
    ctx = context_for_test()

    result = runner.invoke(cli, ["list"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert "No codespaces found." in result.output


def test_list_invalid_response() -> None:
    runner = CliRunner()
    ctx = context_for_test(codespace_cli=FakeCodespaceCli(raw_list_output="<html>"))

    result = runner.invoke(cli, ["list"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Error: gh codespace list returned invalid JSON" in result.output


def test_format_relative_time() -> None:
    now = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)

    assert format_relative_time(None, now) == "never"
    assert format_relative_time(datetime(2025, 3, 1, 11, 59, 30, tzinfo=UTC), now) == "just now"
    assert format_relative_time(datetime(2025, 3, 1, 11, 15, tzinfo=UTC), now) == "45m ago"
    assert format_relative_time(datetime(2025, 3, 1, 9, 0, tzinfo=UTC), now) == "3h ago"
    assert format_relative_time(datetime(2025, 2, 25, 12, 0, tzinfo=UTC), now) == "4d ago"
    assert format_relative_time(datetime(2024, 12, 31, 12, 0, tzinfo=UTC), now) == "2mo ago"
    assert format_relative_time(datetime(2024, 12, 1, 12, 0, tzinfo=UTC), now) == "3mo ago"


def test_format_relative_time_future_timestamp_is_just_now() -> None:
    now = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)

    assert format_relative_time(datetime(2025, 3, 1, 12, 5, tzinfo=UTC), now) == "just now"
