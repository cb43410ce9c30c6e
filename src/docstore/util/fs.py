"""Seed file loading: YAML or JSON lists of documents"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.models import Document


def _read(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_documents(path: Path) -> list[Document]:
    """Parse a seed file into Documents.

    Accepts a top-level list or a mapping with a 'documents' list.
    Raises ValueError if the file is unreadable or malformed.
    """
    try:
        data = _read(path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot read seed file {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a list of documents")

    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e
