"""
interaction-rest CLI — `interactions` command.

Commands:
  interactions config set|show|clear    Saved application ID and base URL
  interactions respond <id> <token>     Answer an interaction callback
  interactions original <cmd>           Initial response get/edit/delete
  interactions followup <cmd>           Follow-up send/edit/delete
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install interaction-rest[cli]")

from interaction_rest.client import AsyncInteractionClient
from interaction_rest.errors import HTTPError, PayloadError
from interaction_rest.models.embed import Embed
from interaction_rest.models.file import File
from interaction_rest.models.interaction import (
    InteractionResponse,
    InteractionResponseData,
    InteractionResponseType,
    MessageFlags,
)
from interaction_rest.option import UNSET
from interaction_rest.transport.http import DEFAULT_BASE_URL

console = Console()
CONFIG_FILE = Path.home() / ".interaction-rest" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_client(app_id: Optional[str] = None) -> AsyncInteractionClient:
    cfg = _load_config()
    resolved = app_id or cfg.get("application_id")
    return AsyncInteractionClient(
        application_id=int(resolved) if resolved else None,
        bot_token=cfg.get("bot_token"),
        base_url=cfg.get("base_url", DEFAULT_BASE_URL),
    )


def _run(coro):
    """Run a command coroutine, reporting validation and HTTP errors."""
    try:
        return asyncio.run(coro)
    except PayloadError as e:
        console.print(f"[red]Invalid payload: {e}[/red]")
        raise SystemExit(1)
    except HTTPError as e:
        console.print(f"[red]Request failed: {e}[/red]")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _opt(value):
    """Map a missing CLI option to an omitted field."""
    return UNSET if value is None else value


def _build_embeds(title: Optional[str], description: Optional[str]) -> Optional[list[Embed]]:
    if not title and not description:
        return None
    return [Embed(title=title or "", description=description or "")]


def _load_files(paths: tuple[str, ...]) -> list[File]:
    return [File.from_path(p) for p in paths]


@click.group()
@click.version_option("0.1.0")
def main():
    """interaction-rest CLI — respond to Discord interactions from the shell."""


@main.group("config")
def config():
    """Saved CLI settings."""


@config.command("set")
@click.option("--app-id", default=None, help="Discord application ID")
@click.option("--base-url", default=None, help="Discord API base URL")
@click.option("--bot-token", default=None, help="Optional bot token")
def config_set(app_id: Optional[str], base_url: Optional[str], bot_token: Optional[str]):
    """Update saved settings."""
    cfg = _load_config()
    if app_id:
        cfg["application_id"] = app_id
    if base_url:
        cfg["base_url"] = base_url
    if bot_token:
        cfg["bot_token"] = bot_token
    _save_config(cfg)
    console.print(f"[green]Saved to {CONFIG_FILE}[/green]")


@config.command("show")
def config_show():
    """Show saved settings."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]No settings saved. Run `interactions config set`.[/yellow]")
        return
    shown = {**cfg}
    if shown.get("bot_token"):
        shown["bot_token"] = "***"
    click.echo(json.dumps(shown, indent=2))


@config.command("clear")
def config_clear():
    """Clear saved settings."""
    _save_config({})
    console.print("[green]Settings cleared.[/green]")


@main.command("respond")
@click.argument("interaction_id")
@click.argument("token")
@click.option("--content", default=None)
@click.option("--ephemeral", is_flag=True, help="Only the invoking user sees the reply")
@click.option("--deferred", is_flag=True, help="Acknowledge now, follow up later")
@click.option("--file", "files", multiple=True, type=click.Path(exists=True, dir_okay=False))
def respond_cmd(interaction_id: str, token: str, content: Optional[str], ephemeral: bool,
                deferred: bool, files: tuple[str, ...]):
    """Respond to an interaction callback."""

    async def _respond():
        flags = MessageFlags.EPHEMERAL if ephemeral else MessageFlags.NONE
        if deferred:
            resp = InteractionResponse(
                type=InteractionResponseType.DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE,
                data=InteractionResponseData(flags=flags) if flags else None,
            )
        else:
            data = InteractionResponseData(content=_opt(content), flags=flags, files=_load_files(files))
            resp = InteractionResponse(type=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, data=data)
        async with _get_client() as client:
            await client.respond(interaction_id, token, resp)
        console.print("[green]Interaction answered.[/green]")

    _run(_respond())


# Register subcommands from separate modules
from interaction_rest.cli.followup import followup
from interaction_rest.cli.original import original

main.add_command(original)
main.add_command(followup)


if __name__ == "__main__":
    main()
