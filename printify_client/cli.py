"""Command-line interface for the Printify client."""

import asyncio
import json
from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from rich.table import Table
from rich.json import JSON

from .client import PrintifyClient
from .config import ClientConfig
from .exceptions import PrintifyError
from .mock_client import MockPrintifyTransport
from .models.printify_models import WebhookRegistration, WebhookTopic

app = typer.Typer(
    name="printify",
    help="Printify API client CLI"
)
console = Console()


def load_config(config_path: str) -> ClientConfig:
    """Load configuration from JSON file."""
    config_file = Path(config_path)
    if not config_file.exists():
        console.print(f"[red]Error: Config file not found: {config_path}[/red]")
        raise typer.Exit(1)

    with open(config_file) as f:
        config_data = json.load(f)

    return ClientConfig(**config_data)


def make_client(cfg: ClientConfig, sandbox: bool = False) -> PrintifyClient:
    """Build a client, backed by the mock transport in sandbox mode."""
    if sandbox:
        return PrintifyClient(cfg, transport=MockPrintifyTransport())
    return PrintifyClient(cfg)


def run(coro) -> None:
    """Run a command coroutine, turning Printify errors into exit code 1."""
    try:
        asyncio.run(coro)
    except PrintifyError as e:
        console.print(f"[red]✗ Printify error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def init(
    output: str = typer.Option("config.json", help="Output configuration file path")
):
    """Initialize a new configuration file with example values."""
    example_config = {
        "api_key": "your_printify_api_token_here",
        "shop_id": 1234567,
    }

    output_path = Path(output)
    with open(output_path, 'w') as f:
        json.dump(example_config, f, indent=2)

    console.print(f"[green]✓[/green] Configuration file created: {output}")
    console.print("\n[yellow]⚠ Please edit the file and add your Printify API token![/yellow]")


@app.command()
def validate(
    config: str = typer.Option("config.json", help="Configuration file path"),
):
    """Validate configuration file."""
    try:
        cfg = load_config(config)
        console.print("[green]✓[/green] Configuration is valid!")
        console.print(f"\n[bold]API:[/bold] {cfg.base_url}")
        console.print(f"[bold]Shop:[/bold] {cfg.shop_id if cfg.shop_id is not None else '(none)'}")
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]✗ Configuration error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def shops(
    config: str = typer.Option("config.json", help="Configuration file path"),
    sandbox: bool = typer.Option(False, help="Answer from the built-in mock API"),
):
    """List the shops available to the API token."""

    async def _shops():
        cfg = load_config(config)
        async with make_client(cfg, sandbox) as client:
            result = await client.get_shops()

        table = Table(title="Shops")
        table.add_column("ID", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Sales channel", style="yellow")
        for shop in result:
            table.add_row(str(shop.id), shop.title, shop.sales_channel or "")
        console.print(table)

    run(_shops())


@app.command()
def products(
    config: str = typer.Option("config.json", help="Configuration file path"),
    sandbox: bool = typer.Option(False, help="Answer from the built-in mock API"),
    output: Optional[str] = typer.Option(None, help="Output file for JSON (optional)"),
):
    """List the first page of products in the shop."""

    async def _products():
        cfg = load_config(config)
        async with make_client(cfg, sandbox) as client:
            page = await client.get_products()

        table = Table(title=f"Products (page {page.current_page})")
        table.add_column("ID", style="cyan")
        table.add_column("Title", style="green")
        table.add_column("Variants", justify="right", style="yellow")
        table.add_column("Images", justify="right", style="magenta")
        for product in page.data:
            table.add_row(
                product.id,
                product.title[:50] + "..." if len(product.title) > 50 else product.title,
                str(len(product.variants)),
                str(len(product.images)),
            )
        console.print(table)

        if output:
            with open(Path(output), 'w') as f:
                json.dump(page.model_dump(mode='json'), f, indent=2)
            console.print(f"\n[green]✓[/green] Saved to {output}")

    run(_products())


@app.command()
def product(
    product_id: str = typer.Argument(..., help="Printify product ID"),
    config: str = typer.Option("config.json", help="Configuration file path"),
    sandbox: bool = typer.Option(False, help="Answer from the built-in mock API"),
):
    """Print one product as JSON."""

    async def _product():
        cfg = load_config(config)
        async with make_client(cfg, sandbox) as client:
            result = await client.get_product(product_id)
        console.print(JSON(json.dumps(result.model_dump(mode='json'), indent=2)))

    run(_product())


@app.command()
def webhooks(
    config: str = typer.Option("config.json", help="Configuration file path"),
    sandbox: bool = typer.Option(False, help="Answer from the built-in mock API"),
):
    """List registered webhooks."""

    async def _webhooks():
        cfg = load_config(config)
        async with make_client(cfg, sandbox) as client:
            result = await client.get_webhooks()

        table = Table(title="Webhooks")
        table.add_column("ID", style="cyan")
        table.add_column("Topic", style="green")
        table.add_column("URL", style="yellow")
        for hook in result:
            table.add_row(hook.id or "", hook.topic or "", hook.url or "")
        console.print(table)

    run(_webhooks())


@app.command("register-webhooks")
def register_webhooks(
    url: str = typer.Argument(..., help="Callback URL Printify will POST events to"),
    secret: str = typer.Option(..., help="Shared secret for signing events"),
    topic: Optional[List[WebhookTopic]] = typer.Option(None, help="Topic to subscribe to (repeatable, default: all)"),
    config: str = typer.Option("config.json", help="Configuration file path"),
    sandbox: bool = typer.Option(False, help="Answer from the built-in mock API"),
):
    """Register one webhook per topic."""

    async def _register():
        cfg = load_config(config)
        registrations = [
            WebhookRegistration(topic=t, url=url, secret=secret)
            for t in (topic or list(WebhookTopic))
        ]
        async with make_client(cfg, sandbox) as client:
            created = await client.create_webhooks(registrations)
        for hook in created:
            console.print(f"[green]✓[/green] {hook.topic} -> {hook.url} ({hook.id})")

    run(_register())


if __name__ == "__main__":
    app()
