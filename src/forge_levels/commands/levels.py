"""Skill level commands."""

from pathlib import Path

import click

from ..engine.classifier import compute_levels, level_changes, next_level
from ..engine.difficulty import build_allowed_map
from ..models.patterns import MovementPattern
from .base import (
    build_profile,
    echo_info,
    echo_success,
    echo_warning,
    format_table,
    load_assessment,
    profile_options,
    resolve_thresholds,
)


@click.command()
@click.argument("assessment_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--previous",
    "-p",
    "previous_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Earlier assessment to detect level-ups against",
)
@profile_options
@click.pass_context
def levels(
    ctx: click.Context,
    assessment_file: Path,
    previous_file: Path | None,
    weight: float | None,
    unit: str | None,
    thresholds_file: Path | None,
):
    """Show the skill level for each movement pattern.

    Reads an assessment JSON record and classifies every movement pattern,
    marking manual overrides and patterns that leveled up since the
    previous assessment.
    """
    profile = build_profile(weight, unit)
    thresholds = resolve_thresholds(ctx, thresholds_file)
    assessment = load_assessment(ctx, assessment_file)

    if profile.weight_kg is None:
        echo_warning("Body weight unknown; load tests are ignored.")

    current = compute_levels(assessment, profile, thresholds=thresholds)
    previous = None
    if previous_file is not None:
        previous = compute_levels(
            load_assessment(ctx, previous_file), profile, thresholds=thresholds
        )
    leveled_up = level_changes(previous, current)

    headers = ["Pattern", "Level", "Next", "Notes"]
    rows = []
    for pattern in MovementPattern:
        level = current[pattern]
        notes = []
        if assessment.override_for(pattern) is not None:
            notes.append("manual override")
        if pattern in leveled_up:
            notes.append(f"leveled up from {leveled_up[pattern][0].value}")
        upcoming = next_level(level)
        rows.append([
            pattern.label,
            level.value,
            upcoming.value if upcoming else "-",
            ", ".join(notes),
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()

    for pattern, (before, after) in leveled_up.items():
        echo_success(f"{pattern.label} leveled up: {before.value} -> {after.value}")


@click.command()
@click.argument("assessment_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@profile_options
@click.pass_context
def allowed(
    ctx: click.Context,
    assessment_file: Path,
    weight: float | None,
    unit: str | None,
    thresholds_file: Path | None,
):
    """Show which exercise difficulty tiers each pattern unlocks."""
    profile = build_profile(weight, unit)
    thresholds = resolve_thresholds(ctx, thresholds_file)
    assessment = load_assessment(ctx, assessment_file)

    current = compute_levels(assessment, profile, thresholds=thresholds)
    allowed_map = build_allowed_map(current)

    headers = ["Pattern", "Level", "Allowed tiers"]
    rows = [
        [
            pattern.label,
            current[pattern].value,
            ", ".join(t.value for t in sorted(tiers, key=lambda t: t.rank)),
        ]
        for pattern, tiers in allowed_map.items()
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    echo_info("Advanced exercises unlock only with an advanced classification.")
