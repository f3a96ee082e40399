"""Command-line interface for gql-tsgen."""

from pathlib import Path

import click
import httpx
from pydantic import ValidationError

from .core.config import TransformerConfig
from .core.generator import CodeGenerator, load_documents
from .core.introspection import SchemaFetchError, fetch_schema_sdl, parse_header
from .core.parser import SchemaParseError, SchemaParser


def is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


def load_config(config_path: str | None, json_scalars: tuple[str, ...], add_header: str | None) -> TransformerConfig:
    """Read the config file (if any) and apply command-line overrides."""
    config = TransformerConfig.from_file(config_path) if config_path else TransformerConfig()
    updates = {}
    if json_scalars:
        updates["json_scalars"] = list(json_scalars)
    if add_header is not None:
        updates["add_header"] = add_header
    return config.model_copy(update=updates)


@click.group()
@click.version_option()
def main():
    """GraphQL JSON-scalar transformer generator for react-query clients.

    Generate TypeScript input/output transformers for GraphQL operations.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    help="Path to a schema file or directory, or the URL of a GraphQL endpoint to introspect.",
)
@click.option(
    "--documents",
    "-d",
    required=True,
    type=click.Path(exists=True),
    help="Path to a GraphQL document or a directory of documents.",
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(),
    help="Output file for the generated transformers (e.g., transformers.ts).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True),
    help="JSON configuration file.",
)
@click.option(
    "--json-scalar",
    "json_scalars",
    multiple=True,
    help="Scalar carrying JSON text (repeatable, default: AWSJSON).",
)
@click.option(
    "--header",
    "-H",
    "headers",
    multiple=True,
    help="Request header for schema introspection, as 'Name: value' (repeatable).",
)
@click.option(
    "--add-header",
    help="Text to prepend to the generated file.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with templates overriding the built-in ones.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    documents: str,
    output: str,
    config_path: str | None,
    json_scalars: tuple[str, ...],
    headers: tuple[str, ...],
    add_header: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate input/output transformers for the operations in DOCUMENTS.

    Examples:

        gql-tsgen generate -s ./schema.graphql -d ./src/graphql -o ./src/transformers.ts

        gql-tsgen generate -s https://api.example.com/graphql -H "x-api-key: ..." -d ./ops -o ./out.ts
    """
    output_path = Path(output).resolve()

    try:
        config = load_config(config_path, json_scalars, add_header)

        parser = SchemaParser()
        if is_url(schema):
            click.echo(f"Introspecting {schema}...")
            sdl = fetch_schema_sdl(schema, headers=dict(parse_header(h) for h in headers))
            ir = parser.parse_source(sdl, schema)
        else:
            schema_path = Path(schema).resolve()
            if not schema_path.exists():
                raise click.BadParameter(f"Path '{schema}' does not exist.", param_hint="'--schema'")
            click.echo("Parsing schema...")
            parser.schema_path = str(schema_path)
            ir = parser.parse_all()

        if verbose:
            click.echo(f"  Types: {len(ir.types)}")
            click.echo(f"  Inputs: {len(ir.inputs)}")
            click.echo(f"  Queries: {len(ir.queries)}")
            click.echo(f"  Mutations: {len(ir.mutations)}")
            click.echo(f"  JSON scalars: {', '.join(config.json_scalars)}")

        click.echo("Parsing documents...")
        docs = load_documents(documents)

        click.echo("Generating transformers...")
        generator = CodeGenerator(ir, config=config, template_dir=template_dir)
        code = generator.write(docs, str(output_path))
    except (SchemaParseError, SchemaFetchError, ValidationError, ValueError) as e:
        raise click.ClickException(str(e)) from e
    except httpx.HTTPError as e:
        raise click.ClickException(f"Schema request failed: {e}") from e

    num_transformers = code.count("export const ")
    if verbose:
        click.echo(f"  Lines: {len(code.splitlines())}")
        click.echo(f"  Transformers: {num_transformers}")
        for name in generator.skipped:
            click.echo(f"  Skipped: {name}")

    click.echo(f"Done! Generated {num_transformers} transformers.")
    click.echo(f"Output: {output_path}")


if __name__ == "__main__":
    main()
