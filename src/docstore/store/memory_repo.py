"""In-memory document store: upsert by id, point lookup, filtered search.

Documents live in a dict keyed by id, so insertion order is storage order and
replacing an id keeps its original position. A single lock makes each save
atomic per identity; readers see a consistent snapshot. Callers always get
copies, never the stored objects.
"""

import logging
import threading
from dataclasses import dataclass, field

from docstore.models import Document, SearchRequest
from docstore.store.filters import matches
from docstore.store.repo import DocumentRepo
from docstore.util.ids import new_id
from docstore.util.timeutil import utcnow


log = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    preserve_created: bool = True   # False trusts a caller-supplied created on replacement
    _docs: dict[str, Document] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def save(self, doc: Document) -> Document:
        """Insert or replace doc by id.

        doc is updated in place with any generated id/created. An existing
        identity keeps its stored created unless preserve_created is off and
        the caller supplied one.
        """
        if not doc.id:
            doc.id = new_id()
            log.debug("Generated id %s", doc.id)

        with self._lock:
            existing = self._docs.get(doc.id)
            if existing is None:
                if doc.created is None:
                    doc.created = utcnow()
                    log.debug("Set created for %s: %s", doc.id, doc.created.isoformat())
                log.debug("Inserted document %s", doc.id)
            else:
                if self.preserve_created or doc.created is None:
                    doc.created = existing.created
                log.debug("Replaced document %s", doc.id)
            stored = doc.model_copy(deep=True)
            self._docs[doc.id] = stored
        return stored.model_copy(deep=True)

    def search(self, request: SearchRequest | None = None) -> list[Document]:
        log.debug("Search request: %r", request)
        with self._lock:
            found = [d.model_copy(deep=True) for d in self._docs.values() if matches(d, request)]
            total = len(self._docs)
        log.debug("Search matched %d of %d documents", len(found), total)
        return found

    def find_by_id(self, doc_id: str | None) -> Document | None:
        if not doc_id:
            log.warning("Lookup with empty document id: %r", doc_id)
            return None
        with self._lock:
            doc = self._docs.get(doc_id)
        return doc.model_copy(deep=True) if doc is not None else None

    def all(self) -> list[Document]:
        """Every stored document in storage order."""
        return self.search(None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs
