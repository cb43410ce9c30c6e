"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from docstore.util.timeutil import as_utc


class _Model(BaseModel):
    """Accepts both snake_case and camelCase field names; assignments are validated too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)


class Author(_Model):
    """Embedded author value; matched in search by id only."""
    id: str | None = None
    name: str | None = None


class Document(_Model):
    """The unit of storage. id and created are filled in by the store on first save."""
    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class SearchRequest(_Model):
    """Stateless query value. Empty lists and None bounds place no constraint."""
    title_prefixes:    list[str] = Field(default_factory=list, description="Title starts with any of these")
    contains_contents: list[str] = Field(default_factory=list, description="Content contains any of these")
    author_ids:        list[str] = Field(default_factory=list, description="Author id equals any of these")
    created_from:      datetime | None = Field(default=None, description="Inclusive lower bound on created")
    created_to:        datetime | None = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("title_prefixes", "contains_contents", "author_ids", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return [] if v is None else v

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
