"""Web server command."""

import click

from ..config import get_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: settings host)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: settings port)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the API server.

    Examples:

        # Start on default port (8000)
        trainweek serve

        # Expose to network (all interfaces)
        trainweek serve --host 0.0.0.0 --port 3000
    """
    settings = get_settings()
    if settings.storage == "sqlite":
        ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting trainweek API...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "trainweek.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
