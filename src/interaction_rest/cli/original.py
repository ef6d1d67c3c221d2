"""CLI: interactions original get|edit|delete"""

import json
from typing import Optional

import click
from rich.console import Console

from interaction_rest.models.interaction import EditInteractionResponseData

console = Console()


def _get_client(app_id: Optional[str] = None):
    from interaction_rest.cli.main import _get_client
    return _get_client(app_id)


def _run(coro):
    from interaction_rest.cli.main import _run
    return _run(coro)


def _opt(value):
    from interaction_rest.cli.main import _opt
    return _opt(value)


def _build_embeds(title, description):
    from interaction_rest.cli.main import _build_embeds
    return _build_embeds(title, description)


def _load_files(paths):
    from interaction_rest.cli.main import _load_files
    return _load_files(paths)


@click.group()
def original():
    """Initial interaction response."""


@original.command("get")
@click.argument("token")
@click.option("--app-id", default=None)
@click.option("--json-output", "--json", is_flag=True)
def original_get(token: str, app_id: Optional[str], json_output: bool):
    """Show the initial response message."""

    async def _get():
        async with _get_client(app_id) as client:
            msg = await client.original_response(token)
        if json_output:
            click.echo(json.dumps(msg.model_dump(), indent=2))
            return
        console.print(f"[bold]{msg.id}[/bold] {msg.content}")
        for embed in msg.embeds:
            console.print(f"  [dim]embed:[/dim] {embed.title}")

    _run(_get())


@original.command("edit")
@click.argument("token")
@click.option("--app-id", default=None)
@click.option("--content", default=None)
@click.option("--clear-content", is_flag=True, help="Remove the message text")
@click.option("--embed-title", default=None)
@click.option("--embed-description", default=None)
@click.option("--file", "files", multiple=True, type=click.Path(exists=True, dir_okay=False))
def original_edit(token: str, app_id: Optional[str], content: Optional[str], clear_content: bool,
                  embed_title: Optional[str], embed_description: Optional[str], files: tuple[str, ...]):
    """Edit the initial response."""

    async def _edit():
        data = EditInteractionResponseData(
            content=None if clear_content else _opt(content),
            embeds=_opt(_build_embeds(embed_title, embed_description)),
            files=_load_files(files),
        )
        async with _get_client(app_id) as client:
            with console.status("Editing..."):
                msg = await client.edit_original_response(token, data)
        console.print(f"[green]Edited message {msg.id}.[/green]")

    _run(_edit())


@original.command("delete")
@click.argument("token")
@click.option("--app-id", default=None)
def original_delete(token: str, app_id: Optional[str]):
    """Delete the initial response."""

    async def _delete():
        async with _get_client(app_id) as client:
            with console.status("Deleting..."):
                await client.delete_original_response(token)
        console.print("[green]Initial response deleted.[/green]")

    _run(_delete())
