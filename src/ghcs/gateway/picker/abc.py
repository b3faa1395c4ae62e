"""Abstract interface for interactive single-choice selection."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence


class Picker(ABC):
    """Asks the user to choose exactly one key from a set."""

    @abstractmethod
    def choose(self, keys: Sequence[str], annotate: Callable[[str], str]) -> str | None:
        """Present keys with their annotations and return the chosen key.

        Args:
            keys: Candidate keys; never empty
            annotate: Returns the annotation shown next to a key

        Returns:
            One of ``keys``, or None if the user aborted
        """
        ...
