"""
layout_recall.cli
-----------------

User-facing Click command-line interface.

Commands
--------
apps   : List running applications that can be captured
list   : Show saved layouts
show   : Print the windows recorded in one layout
save   : Capture the given applications into a named layout
apply  : Restore a saved layout
delete : Remove a saved layout
"""

from __future__ import annotations

import json
import logging
import os
from importlib import metadata
from pathlib import Path
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv

from layout_recall.accessor import WindowAccessor
from layout_recall.apply import apply_layout
from layout_recall.capture import capture
from layout_recall.constants import (
    DEFAULT_LAYOUTS_FILE,
    LAYOUTS_FILE_ENV,
    PARTIAL_APPLY_EXIT,
)
from layout_recall.errors import AutomationError
from layout_recall.models import layouts_to_json
from layout_recall.store import LayoutStore

_LOG = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _resolve_store_path(explicit: Optional[Path]) -> Path:
    """--store beats $LAYOUT_RECALL_FILE (possibly from .env) beats the default."""
    if explicit is not None:
        return explicit
    return Path(os.environ.get(LAYOUTS_FILE_ENV, DEFAULT_LAYOUTS_FILE)).expanduser()


def _store(ctx: click.Context) -> LayoutStore:
    return ctx.obj["store"]


def _accessor(ctx: click.Context) -> WindowAccessor:
    return ctx.obj["accessor"]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Layouts file (default: ${LAYOUTS_FILE_ENV} or {DEFAULT_LAYOUTS_FILE}).",
)
@click.version_option(metadata.version("layout-recall"))
@click.pass_context
def cli(ctx: click.Context, verbose: bool, store_path: Optional[Path]) -> None:
    """layout-recall – save and restore window layouts."""
    _configure_logging(verbose)
    discovered = find_dotenv(usecwd=True)
    if discovered:
        load_dotenv(discovered)
        _LOG.debug("Loaded .env at startup: %s", discovered)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("store", LayoutStore(_resolve_store_path(store_path)))
    ctx.obj.setdefault("accessor", WindowAccessor())


# --------------------------------------------------------------------------- #
# apps command                                                                #
# --------------------------------------------------------------------------- #


@cli.command("apps")
@click.option(
    "-o",
    "--output",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def cmd_apps(ctx: click.Context, output: str) -> None:
    """List running applications that can be captured."""
    try:
        apps = _accessor(ctx).list_running_applications()
    except AutomationError as exc:
        raise click.ClickException(f"Cannot list applications: {exc}") from exc

    if output == "json":
        click.echo(json.dumps(apps, indent=2))
        return
    for app in apps:
        click.echo(app)


# --------------------------------------------------------------------------- #
# list / show commands                                                        #
# --------------------------------------------------------------------------- #


@cli.command("list")
@click.option(
    "-o",
    "--output",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def cmd_list(ctx: click.Context, output: str) -> None:
    """List saved layouts."""
    layouts = _store(ctx).load()

    if output == "json":
        click.echo(json.dumps(layouts_to_json(layouts), indent=2))
        return

    if not layouts:
        click.echo("No saved layouts.")
        return

    header = f"{'Name':30}  Windows"
    click.echo(header)
    click.echo("-" * len(header))
    for layout in layouts:
        click.echo(f"{layout.name:30}  {len(layout.windows)} windows")


@cli.command("show")
@click.argument("name")
@click.pass_context
def cmd_show(ctx: click.Context, name: str) -> None:
    """Print the windows recorded in layout NAME."""
    layout = _store(ctx).get(name)
    if layout is None:
        raise click.ClickException(f"Unknown layout '{name}'")

    click.echo(f"Layout '{layout.name}' ({len(layout.windows)} windows)")
    for w in layout.windows:
        click.echo(
            f"  {w.app_name:28}  ({w.position.x}, {w.position.y})  "
            f"{w.size.width}x{w.size.height}"
        )


# --------------------------------------------------------------------------- #
# save command                                                                #
# --------------------------------------------------------------------------- #


@cli.command("save")
@click.argument("name")
@click.argument("apps", nargs=-1)
@click.pass_context
def cmd_save(ctx: click.Context, name: str, apps: tuple[str, ...]) -> None:
    """Capture the first window of each APP into layout NAME."""
    name = name.strip()
    if not name:
        raise click.UsageError("Layout name must not be empty")
    if not apps:
        raise click.UsageError("Select at least one application")

    layout = capture(name, apps, accessor=_accessor(ctx))
    if not layout.windows:
        click.echo("Warning: none of the selected applications has an open window.", err=True)

    result = _store(ctx).put(layout)
    if not result:
        raise click.ClickException(f"Failed to save layout '{name}': {result.error}")

    click.echo(f"Layout '{name}' saved with {len(layout.windows)} of {len(apps)} apps")


# --------------------------------------------------------------------------- #
# apply / delete commands                                                     #
# --------------------------------------------------------------------------- #


@cli.command("apply")
@click.argument("name")
@click.pass_context
def cmd_apply(ctx: click.Context, name: str) -> None:
    """Restore every window recorded in layout NAME."""
    layout = _store(ctx).get(name)
    if layout is None:
        raise click.ClickException(f"Unknown layout '{name}'")

    result = apply_layout(layout, accessor=_accessor(ctx))
    for outcome in result.failed:
        click.echo(f"{outcome.app_name}: {outcome.error}", err=True)
    click.echo(f"Layout '{name}' applied – {result.summary()}")

    if not result.ok:
        ctx.exit(PARTIAL_APPLY_EXIT)


@cli.command("delete")
@click.argument("name")
@click.pass_context
def cmd_delete(ctx: click.Context, name: str) -> None:
    """Delete layout NAME."""
    store = _store(ctx)
    if store.get(name) is None:
        raise click.ClickException(f"Unknown layout '{name}'")

    result = store.delete(name)
    if not result:
        raise click.ClickException(f"Failed to delete layout '{name}': {result.error}")
    click.echo(f"Layout '{name}' deleted")


def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
