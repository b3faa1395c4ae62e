"""Tests for subprocess_utils module."""

import subprocess
from unittest.mock import patch

import pytest

from ghcs.subprocess_utils import format_command, run_subprocess_with_context


def test_format_command() -> None:
    assert format_command(["gh", "codespace", "list"]) == "gh codespace list"


def test_passes_timeout_and_captures_output() -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="ok", stderr="")
    with patch("subprocess.run", return_value=completed) as mock_run:
        result = run_subprocess_with_context(["gh", "status"], "check status", timeout=12)

    assert result.stdout == "ok"
    assert mock_run.call_args.kwargs["timeout"] == 12
    assert mock_run.call_args.kwargs["capture_output"] is True


def test_called_process_error_includes_context_and_stderr() -> None:
    error = subprocess.CalledProcessError(4, ["gh", "status"], output="", stderr="  HTTP 401  ")
    with patch("subprocess.run", side_effect=error):
        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["gh", "status"], "check status")

    message = str(exc_info.value)
    assert message.startswith("Failed to check status")
    assert "Command: gh status" in message
    assert "Exit code: 4" in message
    assert "stderr: HTTP 401" in message


def test_missing_binary() -> None:
    with patch("subprocess.run", side_effect=FileNotFoundError("gh")):
        with pytest.raises(RuntimeError) as exc_info:
            run_subprocess_with_context(["gh", "status"], "check status")

    assert "Command not found while trying to check status: gh" in str(exc_info.value)
