"""CLI command implementations"""

from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.models import SearchRequest
from docstore.store.memory_repo import MemoryRepo
from docstore.util.fs import load_documents
from docstore.util.log import configure_logging


DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]
_DATE_HELP = "Created {} this time: YYYY-MM-DD, YYYY-MM-DDTHH:MM:SS or with an offset such as Z or +02:00; no offset means UTC"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _open_store(seed: str, log_level: Optional[str]) -> MemoryRepo:
    """Build a fresh store from a seed file."""
    settings = _settings(overrides={"log_level": log_level})
    configure_logging(settings.log_level)
    try:
        docs = load_documents(Path(seed))
    except ValueError as e:
        _fail("Could not load seed file", e)
    repo = MemoryRepo(preserve_created=settings.preserve_created)
    for doc in docs:
        repo.save(doc)
    return repo


def load_cmd(
    seed: Annotated[str, typer.Argument(help="YAML or JSON seed file")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Load a seed file and print the id of every stored document."""
    repo = _open_store(seed, log_level)
    for doc in repo.all():
        typer.echo(f"  {doc.id}: {doc.title or ''}")
    typer.echo(f"Loaded {len(repo)} document(s) from {seed}")


def get_cmd(
    seed: Annotated[str, typer.Argument(help="YAML or JSON seed file")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Print a single document as JSON."""
    repo = _open_store(seed, log_level)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(doc.model_dump_json(indent=2))


def search_cmd(
    seed: Annotated[str, typer.Argument(help="YAML or JSON seed file")],
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", formats=DATE_FORMATS, help=_DATE_HELP.format("on or after"))] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", formats=DATE_FORMATS, help=_DATE_HELP.format("on or before"))] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Print matching documents as JSON lines, in storage order."""
    repo = _open_store(seed, log_level)
    request = SearchRequest(
        title_prefixes=title_prefix or [],
        contains_contents=contains or [],
        author_ids=author or [],
        created_from=created_from,
        created_to=created_to,
    )
    results = repo.search(request)
    for doc in results:
        typer.echo(doc.model_dump_json())
    typer.echo(f"Found {len(results)} of {len(repo)} document(s)")
