#!/usr/bin/env python3
"""
Resume DSL CLI

Validates, previews and renders resume DSL documents, and inspects migrations.

Commands:
    validate        - Validate a DSL document (YAML or JSON)
    preview         - Compile a DSL document to an AST with placeholder data
    render          - Compile a stored resume for its owner
    render-public   - Compile a published resume by slug
    migration-path  - Show the migration path between two DSL versions
    move-section    - Move a section to a new position and renumber

Examples:\n

    folio_dsl.py validate data/dsl/two_column.yaml

    folio_dsl.py preview data/dsl/two_column.yaml --target pdf

    folio_dsl.py render r-1 --user u-1 --output outs/r-1.json

    folio_dsl.py render-public jane-doe

    folio_dsl.py migration-path 0.9.0

    folio_dsl.py move-section data/dsl/two_column.yaml 0 2
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from folio.contexts.compiling import ResumeAst
from folio.contexts.migration import MigrationError, create_migration_engine
from folio.contexts.migration.logger import setup_migration_logger
from folio.contexts.rendering import DslRenderer, InMemoryResumeStore
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.contexts.schema.logger import setup_schema_logger
from folio.contexts.schema import (
    CURRENT_DSL_VERSION,
    ClientError,
    DslValidationError,
    move_section,
    validate_or_throw,
)
from folio.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("FOLIO_LOGS_PATH", "outs/logs"))
RESUME_STORE_PATH = Path(os.getenv("FOLIO_RESUME_STORE_PATH", "data/resumes"))


app = typer.Typer(
    help="Validate, preview and render resume DSL documents",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def load_document(path: Path) -> Dict[str, Any]:
    """Load a YAML or JSON document as a plain dict."""
    if not path.exists():
        typer.secho(f"Error: File not found: {path}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def emit_ast(ast: ResumeAst, output: Optional[Path]) -> None:
    """Write the AST as JSON to a file, or print it."""
    payload = json.dumps(ast.to_dict(), indent=2)
    if output is None:
        typer.echo(payload)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    typer.secho(f"✓ AST written to {output}", fg=typer.colors.GREEN)


def report_client_error(error: ClientError) -> None:
    typer.secho(f"✗ {type(error).__name__} ({error.status_code})", fg=typer.colors.RED, bold=True)
    if isinstance(error, DslValidationError):
        for message in error.errors:
            typer.secho(f"  - {message}", fg=typer.colors.RED)
    else:
        typer.secho(f"  {error.message}", fg=typer.colors.RED)


def load_store(store_path: Path) -> InMemoryResumeStore:
    try:
        return InMemoryResumeStore.from_yaml_dir(store_path)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


TargetOption = Annotated[
    str,
    typer.Option("--target", "-t", help="Output target: html or pdf"),
]
OutputOption = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Write AST JSON here instead of printing it"),
]
StoreOption = Annotated[
    Path,
    typer.Option("--store", "-s", help="Directory of stored resume YAML files"),
]


@app.command("validate")
def validate_command(
    dsl_file: Annotated[Path, typer.Argument(help="DSL document (YAML or JSON)")],
):
    """
    Validate a DSL document against the current schema.

    Examples:\n

        $ folio_dsl.py validate data/dsl/two_column.yaml
    """
    document = load_document(dsl_file)
    setup_schema_logger(LOGS_PATH / f"validate_{now()}")
    result = DslRenderer().validate(document)

    if result["valid"]:
        typer.secho("✓ Valid resume DSL", fg=typer.colors.GREEN, bold=True)
        raise typer.Exit(code=0)

    typer.secho(f"✗ {len(result['errors'])} validation error(s)", fg=typer.colors.RED, bold=True)
    for message in result["errors"]:
        typer.secho(f"  - {message}", fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command("preview")
def preview_command(
    dsl_file: Annotated[Path, typer.Argument(help="DSL document (YAML or JSON)")],
    target: TargetOption = "html",
    output: OutputOption = None,
):
    """
    Compile a DSL document with placeholder section data.

    Examples:\n

        $ folio_dsl.py preview data/dsl/two_column.yaml --target pdf
    """
    document = load_document(dsl_file)
    setup_rendering_logger(LOGS_PATH / f"preview_{now()}")

    try:
        ast = DslRenderer().preview(document, target)
    except ClientError as e:
        report_client_error(e)
        raise typer.Exit(code=1)

    emit_ast(ast, output)


@app.command("render")
def render_command(
    resume_id: Annotated[str, typer.Argument(help="Stored resume id")],
    user_id: Annotated[str, typer.Option("--user", "-u", help="Requesting user id")],
    target: TargetOption = "html",
    output: OutputOption = None,
    store_path: StoreOption = RESUME_STORE_PATH,
):
    """
    Compile a stored resume for its owner.

    Examples:\n

        $ folio_dsl.py render r-1 --user u-1

        $ folio_dsl.py render r-1 --user u-1 --target pdf --output outs/r-1.json
    """
    setup_rendering_logger(LOGS_PATH / f"render_{now()}")
    renderer = DslRenderer(store=load_store(store_path))

    try:
        result = renderer.render(resume_id, user_id, target)
    except ClientError as e:
        report_client_error(e)
        raise typer.Exit(code=1)

    emit_ast(result.ast, output)


@app.command("render-public")
def render_public_command(
    slug: Annotated[str, typer.Argument(help="Public resume slug")],
    target: TargetOption = "html",
    output: OutputOption = None,
    store_path: StoreOption = RESUME_STORE_PATH,
):
    """
    Compile a published resume by its public slug.

    Examples:\n

        $ folio_dsl.py render-public jane-doe
    """
    setup_rendering_logger(LOGS_PATH / f"render_{now()}")
    renderer = DslRenderer(store=load_store(store_path))

    try:
        result = renderer.render_public(slug, target)
    except ClientError as e:
        report_client_error(e)
        raise typer.Exit(code=1)

    emit_ast(result.ast, output)


@app.command("migration-path")
def migration_path_command(
    from_version: Annotated[str, typer.Argument(help="Source DSL version")],
    to_version: Annotated[
        str, typer.Argument(help="Target DSL version (default: current)")
    ] = CURRENT_DSL_VERSION,
):
    """
    Show the versions a document passes through when migrated.

    Examples:\n

        $ folio_dsl.py migration-path 0.9.0

        $ folio_dsl.py migration-path 0.9.0 1.0.0
    """
    setup_migration_logger(LOGS_PATH / f"migrate_{now()}", to_version)
    engine = create_migration_engine()

    try:
        path = engine.get_migration_path(from_version, to_version)
    except MigrationError as e:
        report_client_error(e)
        raise typer.Exit(code=1)

    typer.secho(" -> ".join(path), fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Steps: {len(path) - 1}")
    typer.echo(f"  Registered migrators: {', '.join(engine.registered_versions()) or 'none'}")


@app.command("move-section")
def move_section_command(
    dsl_file: Annotated[Path, typer.Argument(help="DSL document (YAML or JSON)")],
    from_index: Annotated[int, typer.Argument(help="Current position of the section")],
    to_index: Annotated[int, typer.Argument(help="New position of the section")],
    in_place: Annotated[
        bool,
        typer.Option("--in-place", "-i", help="Overwrite the input file instead of printing"),
    ] = False,
):
    """
    Move a section to a new display position and renumber all section orders.

    Positions are 0-based and follow the current display order.

    Examples:\n

        $ folio_dsl.py move-section data/dsl/two_column.yaml 0 2

        $ folio_dsl.py move-section data/dsl/two_column.yaml 3 0 --in-place
    """
    document = load_document(dsl_file)
    setup_schema_logger(LOGS_PATH / f"move_section_{now()}")

    try:
        dsl = validate_or_throw(document)
        moved = move_section(dsl, from_index, to_index)
    except ClientError as e:
        report_client_error(e)
        raise typer.Exit(code=1)
    except IndexError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    conf = OmegaConf.create(moved.to_document())
    if in_place:
        OmegaConf.save(conf, dsl_file)
        typer.secho(f"✓ Updated {dsl_file}", fg=typer.colors.GREEN)
    else:
        typer.echo(OmegaConf.to_yaml(conf))


if __name__ == "__main__":
    app()
