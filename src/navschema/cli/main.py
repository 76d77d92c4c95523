"""navschema CLI entry point."""

import click

from navschema.config import NavSchemaConfig, configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """navschema navigation schema resolver CLI."""
    config = NavSchemaConfig.from_env()
    configure_logging(config)
    ctx.obj = config


# Register subcommand groups
from navschema.cli.schema_cmd import schema  # noqa: E402
from navschema.cli.serve_cmd import serve  # noqa: E402

cli.add_command(schema)
cli.add_command(serve)
