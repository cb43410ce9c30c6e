"""Search predicate evaluation: one check per constraint group, AND-ed together.

Each group passes when the request places no constraint on it. A document
missing the field a non-empty group tests fails that group. Timestamps are
compared as UTC, naive ones included.
"""

from __future__ import annotations

from docstore.models import Document, SearchRequest
from docstore.util.timeutil import as_utc


def match_title(doc: Document, prefixes: list[str]) -> bool:
    if not prefixes:
        return True
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def match_content(doc: Document, fragments: list[str]) -> bool:
    if not fragments:
        return True
    return doc.content is not None and any(f in doc.content for f in fragments)


def match_author(doc: Document, author_ids: list[str]) -> bool:
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def match_created_from(doc: Document, request: SearchRequest) -> bool:
    if request.created_from is None:
        return True
    return doc.created is not None and as_utc(doc.created) >= as_utc(request.created_from)


def match_created_to(doc: Document, request: SearchRequest) -> bool:
    if request.created_to is None:
        return True
    return doc.created is not None and as_utc(doc.created) <= as_utc(request.created_to)


def matches(doc: Document, request: SearchRequest | None) -> bool:
    """True if doc satisfies every non-empty constraint group of request."""
    if request is None:
        return True
    return (
        match_title(doc, request.title_prefixes)
        and match_content(doc, request.contains_contents)
        and match_author(doc, request.author_ids)
        and match_created_from(doc, request)
        and match_created_to(doc, request)
    )
