# ABOUTME: The `htmlmeta formats` command listing the registered metadata formats.
# ABOUTME: Prints one registry key per line.

import click

from html_metadata.core.registry import FORMAT_NAMES


@click.command("formats")
def formats() -> None:
    """List the metadata formats htmlmeta can extract."""
    for name in FORMAT_NAMES:
        click.echo(name)
