"""Data types for the codespace registry."""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True)
class AvailableState:
    """The codespace is running and accepts connections."""


@dataclass(frozen=True)
class ShutdownState:
    """The codespace is stopped and must be started before use."""


@dataclass(frozen=True)
class OtherState:
    """Any state gh reports that is neither available nor shutdown.

    Examples: 'starting', 'shuttingdown', 'rebuilding', 'failed'.
    """

    raw: str
    """Lower-cased state text as reported by gh."""


CodespaceState = AvailableState | ShutdownState | OtherState


@dataclass(frozen=True)
class Codespace:
    """A codespace as reported by `gh codespace list`.

    Identity is ``name``; every other field is a snapshot taken at fetch time.
    """

    name: str
    """GitHub's codespace name (e.g., 'octocat-fuzzy-fox-123')."""

    display_name: str
    """Human label set on github.com; empty when unset."""

    state: CodespaceState

    repository: str
    """Repository in owner/repo format."""

    ref: str | None
    """Git ref the codespace was created from, if gh reported one."""

    last_used_at: datetime | None = None

    @property
    def display_key(self) -> str:
        """Label shown to and chosen by the user."""
        return self.display_name or self.name


@dataclass(frozen=True)
class Registry:
    """Immutable snapshot mapping display keys to codespaces.

    Built fresh for every action and discarded afterwards. Iteration order
    follows fetch order, but nothing depends on it.
    """

    _entries: Mapping[str, Codespace] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_entries", MappingProxyType(dict(self._entries)))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> Codespace:
        return self._entries[key]

    def get(self, key: str) -> Codespace | None:
        return self._entries.get(key)

    def keys(self) -> list[str]:
        return list(self._entries)

    def items(self) -> list[tuple[str, Codespace]]:
        return list(self._entries.items())

    def codespaces(self) -> list[Codespace]:
        return list(self._entries.values())

    def filter(self, predicate: Callable[[Codespace], bool]) -> "Registry":
        """Return a new registry holding only the entries matching predicate."""
        return Registry({key: cs for key, cs in self._entries.items() if predicate(cs)})
