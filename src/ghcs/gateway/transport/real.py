"""Real Transport implementation using gh codespace ssh."""

import logging
import shlex
import subprocess

from ghcs.errors import ConnectFailed
from ghcs.gateway.transport.abc import Transport
from ghcs.subprocess_utils import format_command

logger = logging.getLogger(__name__)

# ssh reserves 255 for connection errors; anything else is the remote shell's status
SSH_CONNECTION_ERROR = 255


def build_session_command(name: str, path: str) -> list[str]:
    """Build the gh ssh command that opens a login shell in path.

    Extracted as a module-level function for testability.
    """
    remote_command = f'cd {shlex.quote(path)} && exec "$SHELL" -l'
    # -t: Force pseudo-terminal allocation (required for an interactive shell)
    return ["gh", "codespace", "ssh", "-c", name, "--", "-t", remote_command]


class SshTransport(Transport):
    """Production implementation using gh codespace ssh."""

    def open_session(self, name: str, path: str) -> int:
        cmd = build_session_command(name, path)
        logger.debug("running: %s", format_command(cmd))
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise ConnectFailed(f"Could not run gh to connect to '{name}': {e}") from e

        if result.returncode == SSH_CONNECTION_ERROR:
            raise ConnectFailed(f"Could not open an ssh session on '{name}'")
        return result.returncode
