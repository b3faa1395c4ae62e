"""Subprocess helpers for running the gh CLI.

Failures are re-raised as RuntimeError carrying the operation context, the
command line and any captured output, so gateways can translate them into
their own error types without losing detail.
"""

import logging
import subprocess
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)


def format_command(cmd: Sequence[str]) -> str:
    """Render a command for log and error messages."""
    return " ".join(str(arg) for arg in cmd)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    timeout: float | None = None,
    capture_output: bool = True,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for the gateway layer.

    Wraps subprocess.run() to catch CalledProcessError, TimeoutExpired and
    FileNotFoundError and re-raise them as RuntimeError with operation context.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        timeout: Seconds before the process is killed (None waits forever)
        capture_output: Whether to capture stdout/stderr (default: True)
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command fails, times out, or is not found
    """
    cmd_str = format_command(cmd)
    logger.debug("running: %s", cmd_str)
    try:
        return subprocess.run(
            list(cmd),
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=check,
            timeout=timeout,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stderr:
            stderr_stripped = e.stderr.strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except subprocess.TimeoutExpired as e:
        error_msg = f"Timed out after {timeout:g}s while trying to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
