#!/usr/bin/env python3
"""
Command-line interface for loading resume files into an in-memory store.

The store lives only for the duration of a command: each command reads a
YAML/JSON resume file, saves every entry into a fresh backend, and reports.

Commands:
    load     - Load resumes and print the sorted listing
    search   - Load resumes and print those matching a query
    validate - Check resume names without storing anything
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from dossier.contexts.modeling import (
    InvalidResumeDataError,
    NameValidationError,
    PeriodError,
    SectionTypeMismatchError,
    resume_from_dict,
)
from dossier.contexts.storage import (
    ResumeStorage,
    StoreConfig,
    get_storage,
    populate_storage,
    read_resume_records,
    search_resumes,
)

load_dotenv()

app = typer.Typer(
    add_completion=False,
    help="Load and inspect resume files with the in-memory store",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _build_config(backend: Optional[str], capacity: Optional[int]) -> StoreConfig:
    """Environment config with command-line overrides."""
    try:
        env_config = StoreConfig.from_env()
        return StoreConfig(
            backend=backend if backend is not None else env_config.backend,
            capacity=capacity if capacity is not None else env_config.capacity,
            log_dir=env_config.log_dir,
        )
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load_into_storage(resume_file: Path, config: StoreConfig) -> ResumeStorage:
    """Read resume_file into a new backend, printing every rejected entry."""
    try:
        records = read_resume_records(resume_file)
    except (FileNotFoundError, InvalidResumeDataError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    storage = get_storage(config)
    report = populate_storage(storage, records)

    for index, reason in report.rejected:
        typer.secho(f"✗ entry {index}: {reason}", fg=typer.colors.RED)

    return storage


def _print_resume_line(resume) -> None:
    location = f" ({resume.location})" if resume.location else ""
    typer.echo(f"  {resume.full_name}{location}  [{resume.uuid}]")


@app.command("load")
def load_command(
    resume_file: Path = typer.Argument(..., help="YAML or JSON file with a list of resumes"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="'array' or 'map'"),
    capacity: Optional[int] = typer.Option(None, "--capacity", "-c", help="Array backend capacity"),
):
    """
    Load resumes into a fresh backend and list them in sorted order.

    Examples:\n

        $ manage_store.py load resumes.yaml

        $ manage_store.py load resumes.json --backend map
    """
    config = _build_config(backend, capacity)
    storage = _load_into_storage(resume_file, config)

    typer.secho(
        f"\nStored {storage.size()} resume(s) in {config.backend} backend",
        fg=typer.colors.BLUE,
        bold=True,
    )
    for resume in storage.get_all_sorted():
        _print_resume_line(resume)


@app.command("search")
def search_command(
    resume_file: Path = typer.Argument(..., help="YAML or JSON file with a list of resumes"),
    query: str = typer.Argument(..., help="Substring of a name or location"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="'array' or 'map'"),
):
    """Load resumes and print those whose name or location contains QUERY."""
    config = _build_config(backend, None)
    storage = _load_into_storage(resume_file, config)

    matches = search_resumes(storage, query)
    typer.secho(f"\n{len(matches)} match(es) for '{query}'", fg=typer.colors.BLUE, bold=True)
    for resume in matches:
        _print_resume_line(resume)


@app.command("validate")
def validate_command(
    resume_file: Path = typer.Argument(..., help="YAML or JSON file with a list of resumes"),
):
    """Check every entry can be built as a resume, without storing anything."""
    try:
        records = read_resume_records(resume_file)
    except (FileNotFoundError, InvalidResumeDataError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    error_count = 0
    for index, record in enumerate(records):
        try:
            resume = resume_from_dict(record)
        except (
            NameValidationError,
            InvalidResumeDataError,
            PeriodError,
            SectionTypeMismatchError,
        ) as e:
            typer.secho(f"✗ entry {index}: {e}", fg=typer.colors.RED)
            error_count += 1
            continue
        typer.secho(f"✓ entry {index}: {resume.full_name}", fg=typer.colors.GREEN)

    typer.echo(f"\n{len(records) - error_count}/{len(records)} valid")
    if error_count:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
