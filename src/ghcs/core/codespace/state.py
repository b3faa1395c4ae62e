"""Lifecycle state predicates used to filter registries."""

from ghcs.core.codespace.types import (
    AvailableState,
    Codespace,
    CodespaceState,
    OtherState,
    ShutdownState,
)


def is_available(codespace: Codespace) -> bool:
    return isinstance(codespace.state, AvailableState)


def is_shutdown(codespace: Codespace) -> bool:
    return isinstance(codespace.state, ShutdownState)


def state_label(state: CodespaceState) -> str:
    """Lower-case label for a state, as shown in annotations and tables."""
    if isinstance(state, AvailableState):
        return "available"
    if isinstance(state, ShutdownState):
        return "shutdown"
    return state.raw


def parse_state(raw: str) -> CodespaceState:
    """Normalize gh's free-text state by case-insensitive match.

    Unknown values are kept as OtherState rather than rejected, since gh adds
    new states over time.
    """
    lowered = raw.lower()
    if lowered == "available":
        return AvailableState()
    if lowered == "shutdown":
        return ShutdownState()
    return OtherState(raw=lowered)
