"""Production implementation of CodespaceCli using the gh CLI."""

import logging
import subprocess
from collections.abc import Sequence

from ghcs.errors import SourceUnavailable, StartFailed, StopFailed
from ghcs.gateway.codespace_cli.abc import CodespaceCli
from ghcs.subprocess_utils import format_command, run_subprocess_with_context

logger = logging.getLogger(__name__)


def _start_command(name: str) -> list[str]:
    # gh has no `codespace start`; the REST endpoint is what `gh codespace ssh` uses
    return ["gh", "api", "--method", "POST", f"/user/codespaces/{name}/start"]


class RealCodespaceCli(CodespaceCli):
    """Production implementation using gh CLI."""

    def __init__(self, timeout_seconds: float | None) -> None:
        """Initialize with the timeout applied to blocking gh calls.

        Args:
            timeout_seconds: Seconds before a blocking gh call is killed;
                None waits indefinitely
        """
        self._timeout = timeout_seconds

    def list_codespaces_json(self, fields: Sequence[str]) -> str:
        """Run `gh codespace list --json <fields>`."""
        try:
            result = run_subprocess_with_context(
                cmd=["gh", "codespace", "list", "--json", ",".join(fields)],
                operation_context="list codespaces",
                timeout=self._timeout,
            )
        except RuntimeError as e:
            raise SourceUnavailable(str(e)) from e
        return result.stdout

    def start_codespace(self, name: str) -> None:
        """Start a codespace via the REST API, waiting for gh to exit."""
        try:
            run_subprocess_with_context(
                cmd=_start_command(name),
                operation_context=f"start codespace '{name}'",
                timeout=self._timeout,
            )
        except RuntimeError as e:
            raise StartFailed(str(e)) from e

    def launch_start(self, name: str) -> None:
        """Start a codespace in a detached gh process."""
        cmd = _start_command(name)
        logger.debug("launching detached: %s", format_command(cmd))
        try:
            # Never awaited: the handle is dropped and gh outlives ghcs in its own session
            subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            raise StartFailed(f"Could not launch '{format_command(cmd)}': {e}") from e

    def stop_codespace(self, name: str) -> None:
        """Run `gh codespace stop -c <name>`."""
        try:
            run_subprocess_with_context(
                cmd=["gh", "codespace", "stop", "-c", name],
                operation_context=f"stop codespace '{name}'",
                timeout=self._timeout,
            )
        except RuntimeError as e:
            raise StopFailed(str(e)) from e
