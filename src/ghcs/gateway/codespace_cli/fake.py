"""In-memory fake implementation of CodespaceCli for testing."""

import json
from collections.abc import Sequence
from typing import Any

from ghcs.errors import SourceUnavailable, StartFailed, StopFailed
from ghcs.gateway.codespace_cli.abc import CodespaceCli


class FakeCodespaceCli(CodespaceCli):
    """Test implementation that simulates gh codespace commands.

    Use constructor injection to set up records and control behavior.

    Example:
        >>> cli = FakeCodespaceCli(
        ...     records=[
        ...         {
        ...             "name": "fox-123",
        ...             "displayName": "",
        ...             "repository": "acme/widgets",
        ...             "state": "Available",
        ...             "gitStatus": {"ref": "main"},
        ...         }
        ...     ]
        ... )
    """

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        raw_list_output: str | None = None,
        list_error: str | None = None,
        start_error: str | None = None,
        launch_error: str | None = None,
        stop_error: str | None = None,
        start_makes_available: bool = True,
        start_removes: bool = False,
    ) -> None:
        """Initialize fake gh codespace operations.

        Args:
            records: Raw records returned (as JSON) by the listing
            raw_list_output: Exact listing stdout, overriding records
            list_error: If set, listing raises SourceUnavailable with this message
            start_error: If set, start_codespace raises StartFailed
            launch_error: If set, launch_start raises StartFailed
            stop_error: If set, stop_codespace raises StopFailed
            start_makes_available: If True, starting flips the record's
                state to 'Available' so later listings observe it
            start_removes: If True, starting drops the record so later
                listings no longer contain it
        """
        self._records = [dict(record) for record in (records or [])]
        self._raw_list_output = raw_list_output
        self._list_error = list_error
        self._start_error = start_error
        self._launch_error = launch_error
        self._stop_error = stop_error
        self._start_makes_available = start_makes_available
        self._start_removes = start_removes
        self._list_calls: list[tuple[str, ...]] = []
        self._started: list[str] = []
        self._launched: list[str] = []
        self._stopped: list[str] = []

    def list_codespaces_json(self, fields: Sequence[str]) -> str:
        self._list_calls.append(tuple(fields))
        if self._list_error is not None:
            raise SourceUnavailable(self._list_error)
        if self._raw_list_output is not None:
            return self._raw_list_output
        return json.dumps(self._records)

    def start_codespace(self, name: str) -> None:
        if self._start_error is not None:
            raise StartFailed(self._start_error)
        self._started.append(name)
        self._mark_started(name)

    def launch_start(self, name: str) -> None:
        if self._launch_error is not None:
            raise StartFailed(self._launch_error)
        self._launched.append(name)
        self._mark_started(name)

    def stop_codespace(self, name: str) -> None:
        if self._stop_error is not None:
            raise StopFailed(self._stop_error)
        self._stopped.append(name)

    def _mark_started(self, name: str) -> None:
        if self._start_removes:
            self._records = [r for r in self._records if r.get("name") != name]
            return
        if not self._start_makes_available:
            return
        for record in self._records:
            if record.get("name") == name:
                record["state"] = "Available"

    # Read-only properties for test assertions

    @property
    def list_calls(self) -> list[tuple[str, ...]]:
        """Fields requested by each listing call."""
        return self._list_calls.copy()

    @property
    def started(self) -> list[str]:
        """Names passed to the blocking start_codespace."""
        return self._started.copy()

    @property
    def launched(self) -> list[str]:
        """Names passed to the fire-and-forget launch_start."""
        return self._launched.copy()

    @property
    def stopped(self) -> list[str]:
        return self._stopped.copy()
