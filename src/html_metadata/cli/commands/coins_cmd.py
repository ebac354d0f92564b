# ABOUTME: The `htmlmeta coins` command for decoding a bare COinS title string.
# ABOUTME: Useful when the ContextObject was copied out of a page by hand.

import click
from rich.console import Console

from html_metadata.cli.options import json_option
from html_metadata.cli.render import metadata_table, to_json
from html_metadata.contextobject import decode_context_object
from html_metadata.errors import InvalidContextObjectError

console = Console()


@click.command("coins")
@click.argument("title")
@json_option
def coins(title: str, as_json: bool) -> None:
    """Decode an OpenURL ContextObject string from a COinS span title."""
    try:
        record = decode_context_object(title)
    except InvalidContextObjectError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if as_json:
        click.echo(to_json(record))
        return
    console.print(metadata_table("ContextObject", record))
