"""Shared CLI utilities."""

import json
from pathlib import Path

import click

from ..config import get_settings
from ..engine.thresholds import ThresholdConfigError, ThresholdTable
from ..models.assessment import Assessment, BodyProfile
from ..models.patterns import UnitPreference


PROFILE_OPTIONS = [
    click.option("--weight", "-w", type=float, default=None, help="Body weight in your unit"),
    click.option(
        "--unit",
        "-u",
        type=click.Choice([u.value for u in UnitPreference]),
        default=None,
        help="Unit system for body weight and loads",
    ),
    click.option(
        "--thresholds",
        "thresholds_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="YAML file overriding the threshold table",
    ),
]


def profile_options(f):
    """Add the body profile and threshold options shared by engine commands."""
    for option in reversed(PROFILE_OPTIONS):
        f = option(f)
    return f


def build_profile(weight: float | None, unit: str | None) -> BodyProfile:
    """Build a body profile, falling back to the configured unit."""
    unit_preference = UnitPreference(unit) if unit else get_settings().default_unit
    return BodyProfile(weight=weight, unit_preference=unit_preference)


def resolve_thresholds(ctx: click.Context, thresholds_file: Path | None) -> ThresholdTable:
    """Load the threshold table snapshot, exiting on a bad file."""
    try:
        return get_settings().thresholds(thresholds_file)
    except ThresholdConfigError as e:
        echo_error(str(e))
        ctx.exit(1)


def load_json_file(ctx: click.Context, path: Path):
    """Read a JSON document, exiting with an error message on failure."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        echo_error(f"Cannot read {path}: {e}")
        ctx.exit(1)
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON in {path}: {e}")
        ctx.exit(1)


def load_assessment(ctx: click.Context, path: Path) -> Assessment:
    """Load an assessment record from a JSON file."""
    data = load_json_file(ctx, path)
    if not isinstance(data, dict):
        echo_error(f"{path}: expected a JSON object")
        ctx.exit(1)
    try:
        return Assessment.from_dict(data)
    except (TypeError, ValueError) as e:
        echo_error(f"{path}: invalid assessment: {e}")
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []
    lines.append("".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip())
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
