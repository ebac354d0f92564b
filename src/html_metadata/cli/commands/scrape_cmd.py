# ABOUTME: The `htmlmeta scrape` command for extracting metadata from a URL or HTML file.
# ABOUTME: Runs the aggregator (or selected formats) and prints one table per format.

from pathlib import Path

import click
from rich.console import Console

from html_metadata.cli.options import format_option, json_option
from html_metadata.cli.render import metadata_table, to_json
from html_metadata.core.aggregator import aggregate_all
from html_metadata.core.sources import is_url, load_document
from html_metadata.errors import MetadataError

console = Console()


@click.command("scrape")
@click.argument("source")
@format_option
@json_option
def scrape(source: str, formats: tuple[str, ...], as_json: bool) -> None:
    """Extract embedded metadata from SOURCE, a URL or a local HTML file."""
    if not is_url(source) and not Path(source).is_file():
        raise click.BadParameter(f"{source} is neither a URL nor a file", param_hint="SOURCE")

    try:
        doc = load_document(source)
        results = aggregate_all(doc, formats=formats or None)
    except (MetadataError, OSError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if as_json:
        click.echo(to_json(results))
        return

    for name, data in results.items():
        console.print(metadata_table(name, data))
    console.print(f"\n[dim]{len(results)} format(s) found[/dim]")
