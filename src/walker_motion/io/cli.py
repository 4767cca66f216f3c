"""Define a command-line interface that prints the waypoints of a command program.

Example usage:

    walker-waypoints program.txt --start 0 0 0 --settings settings.yaml

"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from walker_motion.commands import InterpolationError, WaypointSequence, get_destination
from walker_motion.geometry import Point3D
from walker_motion.io.command_files import ProgramLine, load_commands
from walker_motion.io.logging import configure_logging, console, log_info
from walker_motion.io.settings import DEFAULT_SETTINGS, InterpolationSettings


def _render_waypoints_table(
    program_line: ProgramLine,
    sequence: WaypointSequence,
    reverse: bool,
) -> Table:
    """Render a table listing every waypoint of a single command."""
    table = Table(title=f"Line {program_line.line_number}", show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("z", justify="right")

    indices = range(sequence.count, 0, -1) if reverse else range(1, sequence.count + 1)
    points = reversed(sequence) if reverse else sequence
    for idx, point in zip(indices, points, strict=True):
        table.add_row(str(idx), f"{point.x:.4f}", f"{point.y:.4f}", f"{point.z:.4f}")
    return table


@click.command()
@click.argument("program_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--start",
    type=(float, float, float),
    default=(0.0, 0.0, 0.0),
    show_default=True,
    help="Point (x y z) where the walker begins.",
)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with an 'interpolation' section overriding the default settings.",
)
@click.option("--reverse", is_flag=True, help="List each command's waypoints from the end.")
@click.option("--verbose", is_flag=True, help="Log debug messages.")
def cli(
    program_path: Path,
    start: tuple[float, float, float],
    settings_path: Path | None,
    reverse: bool,
    verbose: bool,
) -> None:
    """Print the waypoints of every command in PROGRAM_PATH, each starting where the last ended."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        program = load_commands(program_path)
        settings = (
            DEFAULT_SETTINGS
            if settings_path is None
            else InterpolationSettings.from_yaml(settings_path)
        )
    except (ValueError, KeyError, RuntimeError) as error:
        raise click.ClickException(str(error)) from error

    position = Point3D.from_sequence(start)
    if not position.is_finite():
        raise click.BadParameter(f"Start point must be finite, got {start}.", param_hint="--start")

    for program_line in program:
        try:
            sequence = WaypointSequence(program_line.command, position, settings)
        except InterpolationError as error:
            message = f"Line {program_line.line_number} ({program_line.text}): {error}"
            console.print(f"[red]{escape(message)}[/]")
            raise SystemExit(1) from error

        console.print(f"[bold]{program_line.text}[/] - {sequence.count} waypoints")
        console.print(_render_waypoints_table(program_line, sequence, reverse))
        position = get_destination(program_line.command)

    log_info(f"Walker finished at {tuple(position)}.")
