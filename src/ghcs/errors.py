"""Error taxonomy for codespace operations.

Every error here is reported to the user as a one-line message by the CLI
layer; none of them should surface as a traceback.
"""


class GhcsError(Exception):
    """Base class for all user-reportable ghcs errors."""


class SourceUnavailable(GhcsError):
    """The gh listing process could not be run, failed, or timed out."""


class InvalidResponse(GhcsError):
    """The gh listing output was not a JSON array of objects."""


class MalformedRecord(GhcsError):
    """A codespace record is missing a required field."""


class NoSelection(GhcsError):
    """No codespace was chosen.

    Raised when there is nothing to choose from, when an explicit key does not
    match any candidate, or when the user aborts the picker (``cancelled``).
    """

    def __init__(self, message: str, *, cancelled: bool = False) -> None:
        super().__init__(message)
        self.cancelled = cancelled


class ConnectFailed(GhcsError):
    """The transport could not open a session on the codespace."""


class StartFailed(GhcsError):
    """A codespace start could not be launched or did not become ready."""


class StopFailed(GhcsError):
    """The gh stop process exited non-zero or could not be run."""


class ConfigError(GhcsError):
    """The config file is unreadable or a config value is invalid."""
