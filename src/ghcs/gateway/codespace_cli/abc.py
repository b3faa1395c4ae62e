"""Abstract interface for the gh process that lists and controls codespaces."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class CodespaceCli(ABC):
    """Abstract interface for `gh` codespace commands.

    Provides dependency injection for testing without actual GitHub API calls.
    Output is returned unparsed; interpreting it is the registry's job.
    """

    @abstractmethod
    def list_codespaces_json(self, fields: Sequence[str]) -> str:
        """Run the listing query and return its stdout.

        Args:
            fields: JSON fields to request from gh

        Returns:
            Raw stdout, expected to be a JSON array of objects

        Raises:
            SourceUnavailable: If gh is missing, exits non-zero, or times out
        """
        ...

    @abstractmethod
    def start_codespace(self, name: str) -> None:
        """Start a codespace and wait for the start request to complete.

        Args:
            name: GitHub codespace name

        Raises:
            StartFailed: If the start request fails
        """
        ...

    @abstractmethod
    def launch_start(self, name: str) -> None:
        """Launch a start request in the background and return immediately.

        Completion is never observed; only a failure to launch is reported.

        Args:
            name: GitHub codespace name

        Raises:
            StartFailed: If the process could not be launched
        """
        ...

    @abstractmethod
    def stop_codespace(self, name: str) -> None:
        """Stop a codespace, blocking until gh exits.

        Args:
            name: GitHub codespace name

        Raises:
            StopFailed: If gh exits non-zero, is missing, or times out
        """
        ...
