# ABOUTME: CLI package for html-metadata, built on Click.
# ABOUTME: Defines the root `htmlmeta` command group and registers subcommands.

import click

from html_metadata.cli.commands import coins_cmd, formats_cmd, scrape_cmd


@click.group()
@click.version_option(package_name="html-metadata")
def cli() -> None:
    """htmlmeta - extract citation and social metadata from HTML pages."""


cli.add_command(scrape_cmd.scrape)
cli.add_command(coins_cmd.coins)
cli.add_command(formats_cmd.formats)
