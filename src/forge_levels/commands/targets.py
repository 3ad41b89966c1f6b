"""Progression target commands."""

from pathlib import Path

import click

from ..engine.targets import get_progression_targets
from ..models.patterns import MovementPattern
from .base import build_profile, echo_warning, format_table, profile_options, resolve_thresholds


@click.command()
@click.option(
    "--pattern",
    "pattern_value",
    type=click.Choice([p.value for p in MovementPattern]),
    default=None,
    help="Only show one movement pattern",
)
@profile_options
@click.pass_context
def targets(
    ctx: click.Context,
    pattern_value: str | None,
    weight: float | None,
    unit: str | None,
    thresholds_file: Path | None,
):
    """Show what it takes to reach each level.

    Weighted targets scale with body weight, so pass --weight to see them.
    """
    profile = build_profile(weight, unit)
    thresholds = resolve_thresholds(ctx, thresholds_file)

    if not weight:
        echo_warning("No body weight given; weighted targets show as 0.")

    all_targets = get_progression_targets(
        weight, profile.unit_preference, thresholds=thresholds
    )
    patterns = [MovementPattern(pattern_value)] if pattern_value else list(MovementPattern)

    headers = ["Pattern", "Test", "Intermediate", "Advanced"]
    rows = []
    for pattern in patterns:
        target = all_targets[pattern]
        rows.append([
            pattern.label,
            target.bodyweight_test,
            target.bodyweight_intermediate,
            target.bodyweight_advanced,
        ])
        if target.has_weighted_test:
            rows.append([
                "",
                target.weighted_test,
                target.weighted_intermediate,
                target.weighted_advanced,
            ])

    click.echo()
    click.echo(format_table(headers, rows))
