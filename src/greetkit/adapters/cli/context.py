"""State shared between the root command and its subcommands.

The root command swaps the services factory on ``ctx.obj`` for a
:class:`CLIContext`. The traceback helpers mirror ``--traceback`` into
``lib_cli_exit_tools.config`` and put the previous flags back afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greetkit.composition import AppServices


class TracebackState(NamedTuple):
    """The two lib_cli_exit_tools flags driven by ``--traceback``."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """What every subcommand receives from the root command.

    ``set_overrides`` is kept so a subcommand that reloads configuration for
    another profile can merge the same ``--set`` values again.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Put a CLIContext on ``ctx.obj``.

    Example:
        >>> from types import SimpleNamespace
        >>> from lib_layered_config import Config
        >>> from greetkit.composition import build_testing
        >>> ctx = SimpleNamespace(obj=None)
        >>> store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing(), profile="dev")
        >>> ctx.obj.profile
        'dev'
    """
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the CLIContext stored by the root command.

    Raises:
        RuntimeError: If the root command has not run.
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for lib_cli_exit_tools."""
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags.

    Example:
        >>> snapshot_traceback_state()._fields
        ('enabled', 'force_color')
    """
    cfg = lib_cli_exit_tools.config
    return TracebackState(bool(getattr(cfg, "traceback", False)), bool(getattr(cfg, "traceback_force_color", False)))


def restore_traceback_state(state: TracebackState) -> None:
    """Write flags captured by :func:`snapshot_traceback_state` back.

    Example:
        >>> before = snapshot_traceback_state()
        >>> apply_traceback_preferences(not before.enabled)
        >>> restore_traceback_state(before)
        >>> snapshot_traceback_state() == before
        True
    """
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
