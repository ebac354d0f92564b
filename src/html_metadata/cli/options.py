# ABOUTME: Shared Click options for htmlmeta CLI commands.
# ABOUTME: Provides reusable decorators for flags like --json and --format.

import click

from html_metadata.core.registry import FORMAT_NAMES

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print results as JSON instead of tables.",
)

format_option = click.option(
    "--format",
    "-f",
    "formats",
    type=click.Choice(FORMAT_NAMES),
    multiple=True,
    help="Only extract this format (repeatable). Default: all formats.",
)
