"""
window_board.cli
----------------

User-facing Click command-line interface.

Commands
--------
list         : Show windows of the built-in and requested applications
activate     : Bring a window to the front
close        : Close a window
open-terminal: Open a terminal in a directory
open-files   : Open a file manager on a directory
new-window   : Ask a running application for a new window
displays     : Show connected displays and their work areas
arrange      : Tile application windows into a grid
presets      : Show plugin-contributed grid presets
apps         : List installed applications
"""

from __future__ import annotations

import json
import logging
from importlib import metadata
from typing import Optional

import click
from dotenv import find_dotenv, load_dotenv

from window_board import actuator, opener
from window_board.apps import scan_installed_apps
from window_board.displays import get_displays
from window_board.layout import arrange_grid
from window_board.models import ArrangeOptions, OpenResult
from window_board.presets import find_preset, load_presets
from window_board.windows import list_windows

_LOG = logging.getLogger(__name__)

_OUTPUT_OPTION = click.option(
    "-o",
    "--output",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format.",
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _report_open(result: OpenResult) -> None:
    if not result.success:
        raise click.ClickException(result.error or "launch failed")
    click.echo(f"Opened {result.window_name}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.version_option(metadata.version("window-board"))
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:  # noqa: D401  (Click demands plain name)
    """window-board – find, focus and tile application windows."""
    _configure_logging(verbose)
    # Best-effort .env loading so WINDOW_BOARD_* overrides apply to this run
    discovered = find_dotenv(usecwd=True)
    if discovered:
        load_dotenv(discovered)
        _LOG.debug("Loaded .env at startup: %s", discovered)
    ctx.ensure_object(dict)


# --------------------------------------------------------------------------- #
# list command                                                                #
# --------------------------------------------------------------------------- #


@cli.command("list")
@click.option(
    "-a", "--app", "app_names", multiple=True, help="Extra application(s) to include."
)
@_OUTPUT_OPTION
def cmd_list(app_names: tuple[str, ...], output: str) -> None:
    """List windows for Terminal, Files and any --app given."""
    windows = list_windows(app_names)

    if output == "json":
        payload = [
            {
                "id": w.id,
                "title": w.title,
                "applicationName": w.application_name,
                "windowIndex": w.window_index,
            }
            for w in windows
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    if not windows:
        click.echo("No matching windows.")
        return

    header = f"{'Application':20}  {'#':>3}  {'Window ID':12}  Title"
    click.echo(header)
    click.echo("-" * len(header))
    for win in windows:
        click.echo(
            f"{win.application_name:20}  {win.window_index:>3}  "
            f"{win.id:12}  {win.title}"
        )


# --------------------------------------------------------------------------- #
# single-window commands                                                      #
# --------------------------------------------------------------------------- #


@cli.command("activate")
@click.argument("window_id")
def cmd_activate(window_id: str) -> None:
    """Bring WINDOW_ID to the front."""
    if not actuator.activate(window_id):
        raise click.ClickException(f"Could not activate window {window_id}")
    click.echo(f"Activated {window_id}")


@cli.command("close")
@click.argument("window_id")
def cmd_close(window_id: str) -> None:
    """Close WINDOW_ID."""
    actuator.close(window_id)
    click.echo(f"Close requested for {window_id}")


@cli.command("open-terminal")
@click.argument("path", required=False, type=click.Path(file_okay=False))
def cmd_open_terminal(path: Optional[str]) -> None:
    """Open the preferred terminal in PATH (default: $HOME)."""
    _report_open(opener.open_terminal(path))


@cli.command("open-files")
@click.argument("path", required=False, type=click.Path(file_okay=False))
def cmd_open_files(path: Optional[str]) -> None:
    """Open the preferred file manager on PATH (default: $HOME)."""
    _report_open(opener.open_file_manager(path))


@cli.command("new-window")
@click.argument("app_name")
def cmd_new_window(app_name: str) -> None:
    """Ask the running application APP_NAME for a new window."""
    _report_open(opener.open_generic_window(app_name))


# --------------------------------------------------------------------------- #
# displays / arrange                                                          #
# --------------------------------------------------------------------------- #


@cli.command("displays")
@_OUTPUT_OPTION
def cmd_displays(output: str) -> None:
    """Show connected displays."""
    displays = get_displays()
    if not displays:
        raise click.ClickException("No displays detected (is $DISPLAY set?)")

    if output == "json":
        payload = [
            {
                "index": d.index,
                "frame": d.frame._asdict(),
                "workArea": d.work_area._asdict(),
                "isMain": d.is_main,
            }
            for d in displays
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    header = f"{'#':>2}  {'Frame':24}  {'Work area':24}  Main"
    click.echo(header)
    click.echo("-" * len(header))
    for d in displays:
        frame = f"{d.frame.width}x{d.frame.height}+{d.frame.x}+{d.frame.y}"
        work = (
            f"{d.work_area.width}x{d.work_area.height}"
            f"+{d.work_area.x}+{d.work_area.y}"
        )
        click.echo(f"{d.index:>2}  {frame:24}  {work:24}  {'Yes' if d.is_main else ''}")


@cli.command("arrange")
@click.option(
    "-a",
    "--app",
    "app_names",
    multiple=True,
    required=True,
    help="Application(s) whose windows are tiled, e.g. Terminal, Files, firefox.",
)
@click.option(
    "--cols", type=click.IntRange(min=0), default=None, help="Columns (0=auto)."
)
@click.option("--rows", type=click.IntRange(min=0), default=None, help="Rows (0=auto).")
@click.option(
    "-d",
    "--display",
    "display_index",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Target display (0 = tile each display in place).",
)
@click.option("-p", "--preset", "preset_id", type=str, help="Grid preset id.")
def cmd_arrange(
    app_names: tuple[str, ...],
    cols: Optional[int],
    rows: Optional[int],
    display_index: int,
    preset_id: Optional[str],
) -> None:
    """Tile the windows of the given applications into a grid."""
    base = ArrangeOptions(display_index=display_index)
    if preset_id:
        preset = find_preset(preset_id)
        if preset is None:
            raise click.ClickException(f"Unknown preset '{preset_id}'")
        base = preset.to_options(display_index)

    # Explicit --cols/--rows win over the preset.
    options = ArrangeOptions(
        cols=base.cols if cols is None else cols,
        rows=base.rows if rows is None else rows,
        display_index=base.display_index,
    )

    result = arrange_grid(app_names, options)
    if not result.success:
        raise click.ClickException(result.error or "arrangement failed")
    click.echo(f"Arranged {result.arranged} window(s).")


# --------------------------------------------------------------------------- #
# presets / apps                                                              #
# --------------------------------------------------------------------------- #


@cli.command("presets")
def cmd_presets() -> None:
    """List grid layout presets contributed by plugins."""
    presets = load_presets()
    if not presets:
        click.echo("No grid presets installed.")
        return
    click.echo(f"{'ID':16}  {'Grid':7}  Name")
    click.echo("-" * 40)
    for p in presets:
        grid = f"{p.cols or 'auto'}x{p.rows or 'auto'}"
        click.echo(f"{p.id:16}  {grid:7}  {p.name}")


@cli.command("apps")
@_OUTPUT_OPTION
def cmd_apps(output: str) -> None:
    """List installed applications."""
    apps = scan_installed_apps()
    if output == "json":
        payload = [
            {"name": a.name, "appId": a.app_id, "executable": a.executable}
            for a in apps
        ]
        click.echo(json.dumps(payload, indent=2))
        return
    for app in apps:
        click.echo(f"{app.name:30}  {app.app_id:30}  {app.executable}")


def main() -> None:  # pragma: no cover
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
