"""Schema CLI commands: validate, show, tree and export."""

import json
from pathlib import Path

import click
import yaml

from navschema.resolver.options import resolve
from navschema.resolver.search import iter_nodes
from navschema.resolver.validator import validate_document, validate_schema
from navschema.schema.app import APP_SCHEMA


def _dump_json(data) -> str:
    # Render callbacks are not JSON types; fall back to their repr
    return json.dumps(data, indent=2, default=str)


@click.group()
def schema():
    """Navigation schema commands."""
    pass


@schema.command()
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
def validate(strict: bool):
    """Validate the navigation schema."""
    # ── Wire document (JSON Schema) validation ──────────────────────────────
    document = json.loads(_dump_json(APP_SCHEMA.to_dict()))
    issues = validate_document(document)

    # ── Structural validation ────────────────────────────────────────────────
    issues.extend(validate_schema(APP_SCHEMA, strict=strict))

    errors = [i for i in issues if i.severity == "error"]
    warnings = [i for i in issues if i.severity == "warning"]

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} schema error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(click.style(f"{len(warnings)} warning(s) found.", fg="yellow"))

    node_count = sum(1 for _ in iter_nodes(APP_SCHEMA.roots))
    click.echo(f"Checked {node_count} navigation nodes.")
    click.echo(click.style("Navigation schema is valid.", fg="green", bold=True))


@schema.command()
@click.argument("name")
def show(name: str):
    """Show a node with its effective options."""
    resolved = resolve(name, APP_SCHEMA.roots)
    if resolved is None:
        click.echo(f"Error: Navigation node not found: {name}", err=True)
        raise SystemExit(1)
    click.echo(_dump_json(resolved.to_dict()))


@schema.command()
def tree():
    """Print the navigation tree."""
    for node, ancestors in iter_nodes(APP_SCHEMA.roots):
        indent = "  " * len(ancestors)
        detail = ""
        if node.is_group and node.initial_route_name:
            detail = f" → {node.initial_route_name}"
        elif not node.is_group and node.link:
            detail = f" ({node.link})"
        click.echo(f"{indent}{node.name} [{node.kind.value}]{detail}")


@schema.command()
@click.option(
    "--format",
    "fmt",
    default="json",
    type=click.Choice(["json", "yaml"]),
    help="Output format.",
)
@click.option(
    "--output",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to a file instead of stdout.",
)
def export(fmt: str, output: Path | None):
    """Export the schema in its wire shape."""
    document = json.loads(_dump_json(APP_SCHEMA.to_dict()))
    if fmt == "yaml":
        text = yaml.safe_dump(document, sort_keys=False)
    else:
        text = json.dumps(document, indent=2) + "\n"

    if output is None:
        click.echo(text, nl=False)
        return
    output.write_text(text)
    click.echo(f"Wrote {output}")
