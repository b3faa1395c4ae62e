"""Abstract interface for opening an interactive session on a codespace."""

from abc import ABC, abstractmethod


class Transport(ABC):
    """Opens a remote shell rooted at a path on a named codespace."""

    @abstractmethod
    def open_session(self, name: str, path: str) -> int:
        """Open an interactive session and block until it ends.

        Args:
            name: GitHub codespace name
            path: Remote directory the session starts in

        Returns:
            Exit code of the session

        Raises:
            ConnectFailed: If the session could not be established
        """
        ...
