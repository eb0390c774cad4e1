import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from docgraph.limiter import limiter
from docgraph.models.graph import BrokenLinkReport
from docgraph.models.page import PageRecord, PageSummary
from docgraph.models.pages_response import AdjacentPagesResponse, RelatedPagesResponse
from docgraph.services.graph import find_broken_links
from docgraph.services.related import DEFAULT_RELATED_LIMIT, adjacent_pages, related_pages
from docgraph.services.repository import PageRepository, get_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pages", tags=["Pages"])

MAX_RELATED_LIMIT = 20

_PATH_DESCRIPTION = "Page path relative to the docs root, e.g. `guides/setup`. Empty for the root page."


@router.get(
    "/related",
    response_model=RelatedPagesResponse,
    summary="Pages related to a given page",
)
@limiter.limit("60/minute")
async def related_endpoint(
    request: Request,
    path: str = Query(default="", description=_PATH_DESCRIPTION),
    limit: int = Query(default=DEFAULT_RELATED_LIMIT, ge=1, le=MAX_RELATED_LIMIT),
    repository: PageRepository = Depends(get_repository),
) -> RelatedPagesResponse:
    """Rank every other page by relatedness to *path* and return the top *limit*."""
    logger.info("Related pages request", extra={"path": path, "limit": limit})
    page = _require_page(repository, path)
    related = related_pages(page, repository.get_pages(), limit=limit)
    return RelatedPagesResponse(
        page=PageSummary.from_record(page),
        related=[PageSummary.from_record(p) for p in related],
    )


@router.get(
    "/adjacent",
    response_model=AdjacentPagesResponse,
    summary="Previous and next pages in navigation order",
)
@limiter.limit("60/minute")
async def adjacent_endpoint(
    request: Request,
    path: str = Query(default="", description=_PATH_DESCRIPTION),
    repository: PageRepository = Depends(get_repository),
) -> AdjacentPagesResponse:
    logger.info("Adjacent pages request", extra={"path": path})
    page = _require_page(repository, path)
    previous, following = adjacent_pages(page, repository.get_pages())
    return AdjacentPagesResponse(
        previous=PageSummary.from_record(previous) if previous else None,
        next=PageSummary.from_record(following) if following else None,
    )


@router.get(
    "/broken-links",
    response_model=List[BrokenLinkReport],
    summary="Link references that resolve to no page",
)
@limiter.limit("10/minute")
async def broken_links_endpoint(
    request: Request,
    repository: PageRepository = Depends(get_repository),
) -> List[BrokenLinkReport]:
    reports = find_broken_links(repository)
    logger.info("Broken link report", extra={"pages_with_broken_links": len(reports)})
    return reports


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _require_page(repository: PageRepository, path: str) -> PageRecord:
    """Look up *path* and propagate a miss as a 404."""
    page = repository.get_page(path.split("/"))
    if page is None:
        logger.warning("Page not found: %s", path)
        raise HTTPException(status_code=404, detail=f"No page at '{path}'.")
    return page
