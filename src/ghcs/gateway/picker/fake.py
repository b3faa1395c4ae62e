"""Fake Picker implementation for testing."""

from collections.abc import Callable, Sequence

from ghcs.gateway.picker.abc import Picker


class FakePicker(Picker):
    """Returns a preconfigured choice and records what it was offered.

    With no ``choice`` the first offered key is returned; ``cancel=True``
    simulates the user aborting.
    """

    def __init__(self, choice: str | None = None, cancel: bool = False) -> None:
        self._choice = choice
        self._cancel = cancel
        self._offered: list[list[str]] = []
        self._annotations: list[dict[str, str]] = []

    def choose(self, keys: Sequence[str], annotate: Callable[[str], str]) -> str | None:
        self._offered.append(list(keys))
        self._annotations.append({key: annotate(key) for key in keys})
        if self._cancel:
            return None
        if self._choice is not None:
            return self._choice
        return keys[0]

    @property
    def offered(self) -> list[list[str]]:
        """Keys offered on each call, for test assertions."""
        return [list(keys) for keys in self._offered]

    @property
    def annotations(self) -> list[dict[str, str]]:
        """Annotation for every offered key, per call."""
        return [dict(a) for a in self._annotations]

    @property
    def called(self) -> bool:
        return bool(self._offered)
