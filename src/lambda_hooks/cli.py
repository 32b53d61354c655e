"""lambda-hooks CLI for running decorated handlers locally - Tyro implementation."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Annotated, Any

import attrs
import tyro
from rich import print
from rich.console import Console
from rich.table import Table

from lambda_hooks.config import HookFile, get_settings, import_object, load_hook_file
from lambda_hooks.errors import ConfigError
from lambda_hooks.pipeline.decorator import use_hooks
from lambda_hooks.pipeline.hook import HookSet


# Subcommand definitions using attrs
@attrs.define
class Invoke:
    """Invoke a handler locally through its hook pipeline."""

    handler: Annotated[str, tyro.conf.Positional]
    """Handler import path (module.function or module:function)."""

    event: Annotated[Path | None, tyro.conf.arg(aliases=["-e"])] = None
    """JSON file with the event payload (defaults to {})."""

    context: Annotated[Path | None, tyro.conf.arg(aliases=["-c"])] = None
    """JSON file with context attributes."""


@attrs.define
class Show:
    """Show the hooks declared in a hook file."""


# Type alias for all subcommands
Command = Annotated[Invoke, tyro.conf.subcommand(name="invoke")] | Annotated[Show, tyro.conf.subcommand(name="show")]


def setup_logging(level: str = "INFO") -> None:
    """Configure logging with 100-character text width."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)-20s - %(levelname)-8s - %(message).100s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _read_json(path: Path | None, default: Any) -> Any:
    if path is None:
        return default
    try:
        return json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to read JSON from {path}: {e}") from e


def _load_hooks(hooks_file: Path | None) -> HookFile:
    """Load the hook file, or an empty hook set when none is configured."""
    if hooks_file is None:
        return HookFile(path=Path(), hook_set=HookSet())
    return load_hook_file(hooks_file)


def invoke_handler(cmd: Invoke, hooks_file: Path | None) -> Any:
    """Run a handler through its hook pipeline and print the response.

    Args:
        cmd: Invoke subcommand
        hooks_file: Hook file to decorate the handler with

    Returns:
        Handler response
    """
    err_console = Console(stderr=True)

    try:
        hook_file = _load_hooks(hooks_file)
        handler = import_object(cmd.handler)
        event = _read_json(cmd.event, {})
        context = SimpleNamespace(**_read_json(cmd.context, {}))
    except ConfigError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    decorated = use_hooks(hook_file.hook_set, config=hook_file.config)(handler)

    try:
        result = asyncio.run(decorated(event, context))
    except Exception as e:
        err_console.print(f"[red]Invocation failed: {type(e).__name__}: {e}[/red]")
        sys.exit(1)

    Console().print_json(json.dumps(result, default=str))
    return result


def show_hooks(hooks_file: Path | None) -> None:
    """Print a table of the hooks in a hook file."""
    if hooks_file is None:
        print("[red]No hook file given. Use --hooks-file or LAMBDA_HOOKS_HOOKS_FILE.[/red]")
        sys.exit(1)

    try:
        hook_file = load_hook_file(hooks_file)
    except ConfigError as e:
        print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    table = Table(title=f"Hooks: {hook_file.path}")
    table.add_column("Phase", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Hook", style="green")

    for phase, names in hook_file.hook_set.names().items():
        if not names:
            table.add_row(phase, "-", "[dim](none)[/dim]")
        for i, name in enumerate(names, start=1):
            table.add_row(phase, str(i), name)

    Console().print(table)

    if hook_file.config:
        print(f"config keys: {', '.join(sorted(hook_file.config))}")


def main(
    cmd: Annotated[Command, tyro.conf.arg(name="")],
    *,
    hooks_file: Annotated[Path | None, tyro.conf.arg(aliases=["-H"], help="Hook file (YAML)")] = None,
) -> None:
    """lambda-hooks - before/after/on_error hooks for async Lambda handlers."""
    settings = get_settings()
    if hooks_file is None:
        hooks_file = settings.hooks_file

    setup_logging(settings.effective_log_level)

    if isinstance(cmd, Invoke):
        invoke_handler(cmd, hooks_file)

    elif isinstance(cmd, Show):
        show_hooks(hooks_file)


def entry_point() -> None:
    """Entry point for the lambda-hooks command."""
    tyro.cli(main)


if __name__ == "__main__":
    entry_point()
