"""Command-line interface for the kid-friendly places map."""

import asyncio

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import AppConfig, configure_logging, get_config
from .models.location import LOCATION_TYPES
from .services.location_store import LocationStore
from .services.overpass_service import OverpassService, build_overpass_query
from .services.refresh_service import RefreshResult, RefreshService

console = Console()


@click.group()
@click.version_option(version=__version__)
def main():
    """Kid Map - playgrounds, parks and museums from OpenStreetMap."""
    pass


@main.command()
@click.option("--host", default="127.0.0.1", help="Interface to bind")
@click.option("--port", "-p", default=8000, help="Port to listen on")
@click.option("--reload", is_flag=True, help="Reload on code changes (development)")
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API."""
    import uvicorn

    config = get_config()
    configure_logging(config.log_level)
    console.print(f"[bold]Serving on[/bold] http://{host}:{port}")
    uvicorn.run("kidmap.api.main:app", host=host, port=port, reload=reload)


@main.command()
def query():
    """Print the Overpass query used to fetch locations."""
    config = get_config()
    click.echo(build_overpass_query(config.region, timeout=config.query_timeout), nl=False)


@main.command()
def types():
    """List the registered location types."""
    table = Table(title="Location Types")
    table.add_column("Type", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("OSM Tag")
    table.add_column("Color")
    table.add_column("Icon", style="dim")

    for location_type, type_config in LOCATION_TYPES.items():
        table.add_row(
            location_type.value,
            type_config.name,
            type_config.query,
            f"[{type_config.color}]{type_config.color}[/]",
            type_config.icon,
        )

    console.print(table)


@main.command()
def refresh():
    """Fetch locations from OpenStreetMap and show counts per type."""
    config = get_config()
    configure_logging(config.log_level)

    console.print(f"[bold]Overpass endpoint:[/bold] {config.overpass_url}")
    region = config.region
    console.print(f"[bold]Region:[/bold] {region.south:.4f} to {region.north:.4f} lat, "
                  f"{region.west:.4f} to {region.east:.4f} lon")

    store = LocationStore()
    try:
        with console.status("Fetching OSM data..."):
            result = asyncio.run(_refresh_once(config, store))
    except Exception as exc:
        console.print(f"[red]Error:[/red] {str(exc) or type(exc).__name__}")
        raise SystemExit(1)

    table = Table(title="Locations")
    table.add_column("Type", style="cyan")
    table.add_column("Count", justify="right", style="green")
    for location_type, count in store.count_by_type().items():
        table.add_row(LOCATION_TYPES[location_type].name, str(count))
    table.add_row("[bold]Total[/bold]", f"[bold]{result.count}[/bold]")

    console.print(table)
    console.print(f"[green]{result.message}[/green]")
    if result.skipped:
        console.print(f"[dim]{result.skipped} elements skipped[/dim]")


async def _refresh_once(config: AppConfig, store: LocationStore) -> RefreshResult:
    """Run a single refresh into ``store``."""
    overpass = OverpassService(config.overpass_url, timeout=config.http_timeout)
    try:
        service = RefreshService(
            store,
            overpass,
            bbox=config.region,
            query_timeout=config.query_timeout,
        )
        return await service.refresh()
    finally:
        await overpass.aclose()


if __name__ == "__main__":
    main()
