"""The connect, start and stop actions.

Each action builds a fresh registry, narrows it by state, resolves one
codespace (from an explicit key or the picker), then acts through a gateway.
Codespace records are never updated in place; state changes show up on the
next fetch.
"""

import logging

import click

from ghcs.core.codespace.registry import build_registry, fetch_codespaces
from ghcs.core.codespace.selector import find_codespace, select_codespace
from ghcs.core.codespace.state import is_available, is_shutdown, state_label
from ghcs.core.codespace.types import Codespace, Registry
from ghcs.core.context import GhcsContext
from ghcs.errors import StartFailed
from ghcs.output import user_output

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 5
WORKSPACES_ROOT = "/workspaces"


def short_repo_name(repository: str) -> str:
    """Repository name without its owner, e.g. 'acme/widgets' -> 'widgets'."""
    _, sep, rest = repository.partition("/")
    return rest if sep and rest else repository


def resolve_remote_path(codespace: Codespace, override: str | None) -> str:
    """Directory to open on the codespace: the override, else /workspaces/<repo>."""
    if override:
        return override
    return f"{WORKSPACES_ROOT}/{short_repo_name(codespace.repository)}"


def _resolve(ctx: GhcsContext, candidates: Registry, key: str | None) -> Codespace:
    if key is not None:
        return find_codespace(candidates, key)
    return select_codespace(candidates, ctx.picker)


def wait_until_available(ctx: GhcsContext, codespace: Codespace) -> None:
    """Poll the listing until the codespace reports Available.

    Raises:
        StartFailed: If it is not available within start_wait_timeout seconds
    """
    timeout_seconds = ctx.config.start_wait_timeout
    elapsed = 0

    while True:
        current = next(
            (cs for cs in fetch_codespaces(ctx.codespace_cli) if cs.name == codespace.name),
            None,
        )
        if current is None:
            raise StartFailed(f"Codespace '{codespace.name}' no longer exists.")
        if is_available(current):
            return
        logger.debug("%s is %s after %ds", codespace.name, state_label(current.state), elapsed)

        if elapsed >= timeout_seconds:
            raise StartFailed(
                f"Codespace '{codespace.display_key}' did not become available "
                f"within {timeout_seconds} seconds."
            )
        ctx.time.sleep(POLL_INTERVAL_SECONDS)
        elapsed += POLL_INTERVAL_SECONDS


def connect(ctx: GhcsContext, key: str | None, path: str | None) -> int:
    """Open a session on a codespace, starting it first if needed.

    Args:
        ctx: Application context
        key: Display key to connect to; None asks the picker
        path: Remote directory override; falls back to the configured default_path

    Returns:
        Exit code of the remote session
    """
    registry = build_registry(ctx.codespace_cli)
    codespace = _resolve(ctx, registry, key)

    if not is_available(codespace):
        user_output(
            f"Codespace '{codespace.display_key}' is {state_label(codespace.state)}. Starting..."
        )
        user_output("(This may take a moment)")
        ctx.codespace_cli.start_codespace(codespace.name)
        wait_until_available(ctx, codespace)
        user_output(click.style("-> ", fg="green") + "Codespace ready.")

    remote_path = resolve_remote_path(codespace, path or ctx.config.default_path)
    user_output(f"Connecting to '{codespace.display_key}' in {remote_path}...")
    return ctx.transport.open_session(codespace.name, remote_path)


def start(ctx: GhcsContext, key: str | None, wait: bool) -> Codespace:
    """Start a shutdown codespace without waiting for it, unless wait is set."""
    registry = build_registry(ctx.codespace_cli).filter(is_shutdown)
    codespace = _resolve(ctx, registry, key)

    ctx.codespace_cli.launch_start(codespace.name)
    user_output(f"Starting '{codespace.display_key}'...")

    if wait:
        wait_until_available(ctx, codespace)
        user_output(click.style("-> ", fg="green") + "Codespace ready.")
    return codespace


def stop(ctx: GhcsContext, key: str | None) -> Codespace:
    """Stop an available codespace, blocking until gh finishes."""
    registry = build_registry(ctx.codespace_cli).filter(is_available)
    codespace = _resolve(ctx, registry, key)

    user_output(f"Stopping '{codespace.display_key}'...")
    ctx.codespace_cli.stop_codespace(codespace.name)
    return codespace
