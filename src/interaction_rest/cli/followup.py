"""CLI: interactions followup send|edit|delete"""

from typing import Optional

import click
from rich.console import Console

from interaction_rest.models.interaction import (
    EditInteractionResponseData,
    InteractionResponseData,
    MessageFlags,
)

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
def followup():
    """Follow-up messages."""


@followup.command("send")
@click.argument("token")
@click.option("--app-id", default=None)
@click.option("--content", default=None)
@click.option("--embed-title", default=None)
@click.option("--embed-description", default=None)
@click.option("--file", "files", multiple=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--ephemeral", is_flag=True)
def followup_send(token: str, app_id: Optional[str], content: Optional[str], embed_title: Optional[str],
                  embed_description: Optional[str], files: tuple[str, ...], ephemeral: bool):
    """Send a follow-up message."""

    async def _send():
        data = InteractionResponseData(
            content=_opt(content),
            embeds=_opt(_build_embeds(embed_title, embed_description)),
            flags=MessageFlags.EPHEMERAL if ephemeral else MessageFlags.NONE,
            files=_load_files(files),
        )
        async with _get_client(app_id) as client:
            with console.status("Sending..."):
                msg = await client.follow_up(token, data)
        console.print(f"[green]Follow-up sent: {msg.id}[/green]")

    _run(_send())


@followup.command("edit")
@click.argument("token")
@click.argument("message_id")
@click.option("--app-id", default=None)
@click.option("--content", default=None)
@click.option("--embed-title", default=None)
@click.option("--embed-description", default=None)
@click.option("--file", "files", multiple=True, type=click.Path(exists=True, dir_okay=False))
def followup_edit(token: str, message_id: str, app_id: Optional[str], content: Optional[str],
                  embed_title: Optional[str], embed_description: Optional[str], files: tuple[str, ...]):
    """Edit a follow-up message."""

    async def _edit():
        data = EditInteractionResponseData(
            content=_opt(content),
            embeds=_opt(_build_embeds(embed_title, embed_description)),
            files=_load_files(files),
        )
        async with _get_client(app_id) as client:
            with console.status("Editing..."):
                msg = await client.edit_follow_up(token, message_id, data)
        console.print(f"[green]Edited follow-up {msg.id}.[/green]")

    _run(_edit())


@followup.command("delete")
@click.argument("token")
@click.argument("message_id")
@click.option("--app-id", default=None)
def followup_delete(token: str, message_id: str, app_id: Optional[str]):
    """Delete a follow-up message."""

    async def _delete():
        async with _get_client(app_id) as client:
            with console.status("Deleting..."):
                await client.delete_follow_up(token, message_id)
        console.print(f"[green]Follow-up {message_id} deleted.[/green]")

    _run(_delete())
