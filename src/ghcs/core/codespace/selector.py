"""Resolve a single codespace from a registry, interactively or by key."""

from collections.abc import Callable

from ghcs.core.codespace.state import state_label
from ghcs.core.codespace.types import Codespace, Registry
from ghcs.errors import NoSelection
from ghcs.gateway.picker.abc import Picker


def format_annotation(codespace: Codespace) -> str:
    """Render '<state> | <repository> | <ref>' for a codespace."""
    return f"{state_label(codespace.state)} | {codespace.repository} | {codespace.ref or ''}"


def annotation_for(registry: Registry) -> Callable[[str], str]:
    """Build the picker's annotation callback, closed over one registry."""

    def annotate(key: str) -> str:
        codespace = registry.get(key)
        if codespace is None:
            return ""
        return format_annotation(codespace)

    return annotate


def select_codespace(
    candidates: Registry,
    picker: Picker,
    label_fn: Callable[[str], str] | None = None,
) -> Codespace:
    """Ask the picker for one codespace out of candidates.

    Args:
        candidates: Registry to choose from
        picker: Interactive picker
        label_fn: Annotation callback; defaults to annotation_for(candidates)

    Returns:
        The chosen codespace

    Raises:
        NoSelection: If candidates is empty or the user aborts
    """
    if len(candidates) == 0:
        raise NoSelection("No matching codespaces.")

    chosen = picker.choose(candidates.keys(), label_fn or annotation_for(candidates))
    if chosen is None:
        raise NoSelection("Cancelled.", cancelled=True)

    codespace = candidates.get(chosen)
    if codespace is None:
        raise AssertionError(f"Picker returned {chosen!r}, which was not offered")
    return codespace


def find_codespace(candidates: Registry, key: str) -> Codespace:
    """Resolve an explicit key without prompting.

    Raises:
        NoSelection: If no candidate has that key
    """
    codespace = candidates.get(key)
    if codespace is None:
        raise NoSelection(f"No matching codespace named '{key}'.")
    return codespace
