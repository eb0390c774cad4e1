"""Page repository: the ordered snapshot of published pages and path lookup.

The enumeration order returned by :meth:`PageRepository.get_pages` is part of
the contract.  It is the tree/traversal order of the documentation and is what
adjacency and relevance tie-breaking rely on.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from fastapi import Request
from pydantic import ValidationError

from docgraph.models.page import PageRecord
from docgraph.services.paths import normalize_path

logger = logging.getLogger(__name__)


class PageRepository(Protocol):
    def get_pages(self) -> List[PageRecord]:
        ...

    def get_page(self, segments: Sequence[str]) -> Optional[PageRecord]:
        ...


class InMemoryPageRepository:
    """A :class:`PageRepository` over a fixed, already-materialised page list.

    Lookups are by exact normalised path; when two pages share a path the
    first one in enumeration order wins.
    """

    def __init__(self, pages: Iterable[PageRecord]) -> None:
        self._pages: List[PageRecord] = list(pages)
        self._by_path: Dict[Tuple[str, ...], PageRecord] = {}
        for page in self._pages:
            self._by_path.setdefault(tuple(page.slugs), page)

    def __len__(self) -> int:
        return len(self._pages)

    def get_pages(self) -> List[PageRecord]:
        return list(self._pages)

    def get_page(self, segments: Sequence[str]) -> Optional[PageRecord]:
        return self._by_path.get(tuple(normalize_path(segments)))

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "InMemoryPageRepository":
        """Build a repository from raw page dicts, skipping invalid entries."""
        pages: List[PageRecord] = []
        for position, record in enumerate(records):
            try:
                pages.append(PageRecord.model_validate(record))
            except ValidationError as exc:
                logger.warning("Skipping invalid page record #%d: %s", position, exc)
        return cls(pages)


def load_manifest(path: Union[str, Path]) -> InMemoryPageRepository:
    """Load a JSON page manifest into an :class:`InMemoryPageRepository`.

    The manifest is either ``{"pages": [...]}`` or a bare list of page
    objects.  An unreadable or malformed manifest yields an empty repository.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Could not load page manifest %s: %s", path, exc)
        return InMemoryPageRepository([])

    records = data.get("pages", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        logger.warning("Page manifest %s has no page list", path)
        return InMemoryPageRepository([])

    repository = InMemoryPageRepository.from_records(records)
    logger.info("Loaded %d pages from %s", len(repository), path)
    return repository


def get_repository(request: Request) -> PageRepository:
    """FastAPI dependency returning the repository attached to the app."""
    return request.app.state.repository
