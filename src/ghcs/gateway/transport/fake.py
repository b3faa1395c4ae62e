"""Fake Transport implementation for testing."""

from dataclasses import dataclass

from ghcs.errors import ConnectFailed
from ghcs.gateway.transport.abc import Transport


@dataclass(frozen=True)
class SessionCall:
    """Arguments of one open_session call."""

    name: str
    path: str


class FakeTransport(Transport):
    """Records session requests without connecting anywhere."""

    def __init__(self, exit_code: int = 0, connect_error: str | None = None) -> None:
        """Initialize the fake transport.

        Args:
            exit_code: Exit code returned from open_session
            connect_error: If set, open_session raises ConnectFailed with this message
        """
        self._exit_code = exit_code
        self._connect_error = connect_error
        self._sessions: list[SessionCall] = []

    def open_session(self, name: str, path: str) -> int:
        self._sessions.append(SessionCall(name=name, path=path))
        if self._connect_error is not None:
            raise ConnectFailed(self._connect_error)
        return self._exit_code

    @property
    def sessions(self) -> list[SessionCall]:
        """Read-only access to session history for test assertions."""
        return self._sessions.copy()
