"""API server CLI command."""

import click

from navschema.config import NavSchemaConfig


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: NAVSCHEMA_HOST).")
@click.option("--port", default=None, type=int, help="Bind port (default: NAVSCHEMA_PORT).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
@click.pass_obj
def serve(config: NavSchemaConfig, host: str | None, port: int | None, reload: bool):
    """Serve the navigation API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "navschema.api.app:app",
        host=host or config.host,
        port=port or config.port,
        reload=reload,
        log_level=config.log_level,
    )
