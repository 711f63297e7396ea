"""Command-line front end for the docker-heatmap client."""

import asyncio
import sys
from typing import Any, Awaitable, Callable, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .api import docker as docker_api
from .api import public as public_api
from .api.client import ApiError, HeatmapClient
from .models.options import HeatmapOptions
from .models.user import ConnectDockerRequest
from .session.controller import SessionController, SessionState
from .session.navigation import BrowserNavigator
from .session.store import SessionStore
from .storage.config import AppSettings
from .urls import DEFAULT_DAYS, embed_snippets, heatmap_url

app = typer.Typer(help="Docker Hub activity heatmaps.")
docker_app = typer.Typer(help="Manage the linked Docker Hub account.")
app.add_typer(docker_app, name="docker")
console = Console()

cli_options: dict[str, Any] = {}


class CliNavigator(BrowserNavigator):
    """Open external URLs in the browser; app surfaces are reported on the console."""

    def navigate(self, target: str) -> None:
        if target.startswith(("http://", "https://")):
            console.print(f"Opening [cyan]{target}[/cyan]")
            super().navigate(target)
        else:
            logger.debug(f"Would navigate to {self.resolve(target)}")

    def reload(self, target: str) -> None:
        logger.debug(f"Would reload at {self.resolve(target)}")


def _configure_logging(debug: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if debug else "WARNING")


def _run(action: Callable[[SessionController, HeatmapClient], Awaitable[Any]]) -> Any:
    """Build a session, bootstrap it and run *action* against it."""

    async def runner() -> Any:
        store = SessionStore()
        async with HeatmapClient(
            store,
            base_url=cli_options.get("api_url"),
            timeout=float(AppSettings.get("timeout", 30.0)),
        ) as client:
            controller = SessionController(store, client, CliNavigator())
            await controller.bootstrap()
            return await action(controller, client)

    try:
        return asyncio.run(runner())
    except ApiError as exc:
        console.print(f"[bold red]Error ({exc.status}):[/bold red] {exc.message}")
        raise typer.Exit(1)


def _require_login(controller: SessionController) -> None:
    if controller.state is not SessionState.AUTHENTICATED:
        console.print("[bold red]Not signed in.[/bold red] Run 'docker-heatmap login' first.")
        raise typer.Exit(1)


def _options(
    theme: Optional[str],
    days: Optional[int],
    cell_size: Optional[int],
    radius: Optional[int],
    hide_legend: bool,
    hide_total: bool,
    hide_labels: bool,
    title: Optional[str],
) -> HeatmapOptions:
    return HeatmapOptions(
        theme=theme,
        days=days,
        cell_size=cell_size,
        radius=radius,
        hide_legend=hide_legend or None,
        hide_total=hide_total or None,
        hide_labels=hide_labels or None,
        title=title,
    )


@app.callback()
def main(
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Backend base URL"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    cli_options["api_url"] = api_url
    _configure_logging(debug or bool(AppSettings.get("debug", False)))


@app.command()
def login():
    """Sign in with GitHub (opens a browser)."""

    async def action(controller: SessionController, client: HeatmapClient):
        return await controller.login()

    auth_url = _run(action)
    if auth_url is None:
        console.print("[green]Already signed in.[/green]")
        return
    console.print(
        "After authorising, copy the URL you are redirected to and run:\n"
        "  [bold]docker-heatmap callback '<url>'[/bold]"
    )


@app.command()
def callback(url: str = typer.Argument(..., help="The sign-in callback URL")):
    """Finish signing in with the URL GitHub redirected to."""

    async def action(controller: SessionController, client: HeatmapClient):
        state = await controller.handle_callback_url(url)
        return state, controller.failure_reason, controller.identity

    state, reason, identity = _run(action)
    if reason is not None:
        console.print(f"[bold red]Sign-in failed ({reason.value}):[/bold red] {reason.description}")
        raise typer.Exit(1)
    if state is SessionState.AUTHENTICATED and identity is not None:
        console.print(f"[bold green]Signed in as {identity.github_username}[/bold green]")
    else:
        console.print("[bold red]Sign-in failed:[/bold red] the token was not accepted.")
        raise typer.Exit(1)


@app.command()
def logout():
    """Sign out and forget the stored credential."""

    async def action(controller: SessionController, client: HeatmapClient):
        await controller.logout()

    _run(action)
    console.print("Signed out.")


@app.command()
def whoami():
    """Show the signed-in user."""

    async def action(controller: SessionController, client: HeatmapClient):
        return controller.identity

    user = _run(action)
    if user is None:
        console.print("Not signed in.")
        return
    body = f"{user.display_name}\n{user.bio or ''}".rstrip()
    console.print(Panel.fit(body, title=f"[bold green]{user.github_username}[/bold green]"))


@app.command()
def url(
    username: str = typer.Argument(..., help="Docker Hub username"),
    theme: Optional[str] = typer.Option(None, help="Theme id"),
    days: Optional[int] = typer.Option(None, help="Number of days to show"),
    cell_size: Optional[int] = typer.Option(None, help="Cell size in pixels"),
    radius: Optional[int] = typer.Option(None, help="Corner radius in pixels"),
    hide_legend: bool = typer.Option(False, help="Hide the legend"),
    hide_total: bool = typer.Option(False, help="Hide the total count"),
    hide_labels: bool = typer.Option(False, help="Hide day/month labels"),
    title: Optional[str] = typer.Option(None, help="Override the title"),
):
    """Print the embeddable SVG URL for a heatmap."""
    options = _options(theme, days, cell_size, radius, hide_legend, hide_total, hide_labels, title)
    typer.echo(heatmap_url(username, options, cli_options.get("api_url")))


@app.command()
def embed(
    username: str = typer.Argument(..., help="Docker Hub username"),
    theme: Optional[str] = typer.Option(None, help="Theme id"),
    days: Optional[int] = typer.Option(None, help="Number of days to show"),
    cell_size: Optional[int] = typer.Option(None, help="Cell size in pixels"),
    radius: Optional[int] = typer.Option(None, help="Corner radius in pixels"),
    hide_legend: bool = typer.Option(False, help="Hide the legend"),
    hide_total: bool = typer.Option(False, help="Hide the total count"),
    hide_labels: bool = typer.Option(False, help="Hide day/month labels"),
    title: Optional[str] = typer.Option(None, help="Override the title"),
):
    """Print Markdown and HTML snippets for embedding a heatmap."""
    options = _options(theme, days, cell_size, radius, hide_legend, hide_total, hide_labels, title)
    codes = embed_snippets(username, options, cli_options.get("api_url"))
    console.print(Panel(Text(codes.markdown), title="Markdown"))
    console.print(Panel(Text(codes.html), title="HTML"))
    console.print(Panel(Text(codes.html_link), title="HTML (linked)"))
    console.print(f"JSON: {codes.json_url}")


@app.command()
def themes():
    """List the available heatmap themes."""

    async def action(controller: SessionController, client: HeatmapClient):
        return await public_api.get_themes(client)

    table = Table("id", "name", "colours")
    for theme in _run(action):
        table.add_row(theme.id, theme.name, " ".join(theme.colors))
    console.print(table)


@app.command()
def activity(
    username: str = typer.Argument(..., help="Docker Hub username"),
    days: int = typer.Option(DEFAULT_DAYS, help="Number of days"),
):
    """Summarise a user's public activity."""

    async def action(controller: SessionController, client: HeatmapClient):
        return await public_api.get_activity(client, username, days)

    data = _run(action)
    totals = data.totals
    console.print(
        f"[bold]{data.username}[/bold] over {data.days} days: "
        f"{totals.activities} activities ({totals.pushes} pushes, "
        f"{totals.pulls} pulls, {totals.builds} builds) on {data.active_days} days"
    )


@docker_app.command("status")
def docker_status():
    """Show the linked Docker Hub account."""

    async def action(controller: SessionController, client: HeatmapClient):
        _require_login(controller)
        return await docker_api.get_account(client)

    account = _run(action)
    lines = [
        f"Last sync: {account.last_sync_at or 'never'}",
        f"Syncing: {'yes' if account.sync_in_progress else 'no'}",
    ]
    if account.last_sync_error:
        lines.append(f"[red]Last error: {account.last_sync_error}[/red]")
    console.print(Panel.fit("\n".join(lines), title=f"[bold cyan]{account.docker_username}[/bold cyan]"))


@docker_app.command("connect")
def docker_connect(
    username: str = typer.Argument(..., help="Docker Hub username"),
    access_token: str = typer.Option(..., prompt=True, hide_input=True, help="Docker Hub access token"),
):
    """Link a Docker Hub account."""

    async def action(controller: SessionController, client: HeatmapClient):
        _require_login(controller)
        return await docker_api.connect(
            client, ConnectDockerRequest(docker_username=username, access_token=access_token)
        )

    account = _run(action)
    console.print(f"[green]Linked {account.docker_username}[/green]")


@docker_app.command("disconnect")
def docker_disconnect():
    """Unlink the Docker Hub account."""

    async def action(controller: SessionController, client: HeatmapClient):
        _require_login(controller)
        return await docker_api.disconnect(client)

    console.print(_run(action) or "Disconnected.")


@docker_app.command("sync")
def docker_sync():
    """Start a Docker Hub activity sync."""

    async def action(controller: SessionController, client: HeatmapClient):
        _require_login(controller)
        return await docker_api.sync(client)

    console.print(_run(action) or "Sync started.")


if __name__ == "__main__":
    app()
