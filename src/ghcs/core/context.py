"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from ghcs.core.config import GhcsConfig, config_path, load_config
from ghcs.gateway.codespace_cli.abc import CodespaceCli
from ghcs.gateway.codespace_cli.real import RealCodespaceCli
from ghcs.gateway.picker.abc import Picker
from ghcs.gateway.picker.real import PromptPicker
from ghcs.gateway.time.abc import Time
from ghcs.gateway.time.real import RealTime
from ghcs.gateway.transport.abc import Transport
from ghcs.gateway.transport.real import SshTransport


@dataclass(frozen=True)
class GhcsContext:
    """Immutable context holding all dependencies for ghcs operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    codespace_cli: CodespaceCli
    transport: Transport
    picker: Picker
    time: Time
    config: GhcsConfig
    config_path: Path


def create_context(load_config_file: bool = True) -> GhcsContext:
    """Create production context with real implementations.

    Args:
        load_config_file: If False, use default settings without reading
            the config file, so a broken file can still be repaired

    Raises:
        ConfigError: If the config file exists but cannot be parsed
    """
    path = config_path()
    config = load_config(path) if load_config_file else GhcsConfig()
    return GhcsContext(
        codespace_cli=RealCodespaceCli(timeout_seconds=config.command_timeout),
        transport=SshTransport(),
        picker=PromptPicker(),
        time=RealTime(),
        config=config,
        config_path=path,
    )


def context_for_test(
    codespace_cli: CodespaceCli | None = None,
    transport: Transport | None = None,
    picker: Picker | None = None,
    time: Time | None = None,
    config: GhcsConfig | None = None,
    config_path: Path | None = None,
) -> GhcsContext:
    """Create test context with optional pre-configured implementations.

    Uses fakes for anything not given, so no subprocess is ever started.

    Example:
        >>> from ghcs.gateway.codespace_cli.fake import FakeCodespaceCli
        >>> ctx = context_for_test(codespace_cli=FakeCodespaceCli(records=[...]))
    """
    from ghcs.gateway.codespace_cli.fake import FakeCodespaceCli
    from ghcs.gateway.picker.fake import FakePicker
    from ghcs.gateway.time.fake import FakeTime
    from ghcs.gateway.transport.fake import FakeTransport

    return GhcsContext(
        codespace_cli=codespace_cli if codespace_cli is not None else FakeCodespaceCli(),
        transport=transport if transport is not None else FakeTransport(),
        picker=picker if picker is not None else FakePicker(),
        time=time if time is not None else FakeTime(),
        config=config if config is not None else GhcsConfig(),
        config_path=config_path if config_path is not None else Path("/fake/ghcs/config.toml"),
    )
