"""CLI entry point for forge-levels."""

import click

from .commands import allowed, levels, override, sort_exercises, targets
from .config import get_settings
from .log import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="forge-levels")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs from the engine")
def main(verbose: bool):
    """forge-levels: movement pattern skill levels and exercise gating.

    Classify fitness assessments into per-pattern skill levels, show what it
    takes to reach the next level, and order exercises by the difficulty
    a user has unlocked.

    Example usage:

        # Levels for a 180 lb user
        forge-levels levels assessment.json --weight 180 --unit imperial

        # Targets to reach the next level
        forge-levels targets --weight 82 --unit metric

        # Prioritize the exercise catalog
        forge-levels sort assessment.json --weight 180
    """
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.json_logs)


# Register commands
main.add_command(levels)
main.add_command(allowed)
main.add_command(targets)
main.add_command(sort_exercises)
main.add_command(override)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
