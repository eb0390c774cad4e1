"""Sitemap and RSS feed endpoints."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from docgraph.limiter import limiter
from docgraph.services.feed import render_rss
from docgraph.services.repository import PageRepository, get_repository
from docgraph.services.sitemap import build_sitemap, render_sitemap_xml

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Sitemap"])

# Served XML may be cached by CDNs for an hour
_CACHE_CONTROL = "public, s-maxage=3600, stale-while-revalidate=86400"


def get_site_url(request: Request) -> str:
    return request.app.state.site_url


@router.get("/sitemap.xml", summary="Sitemap of all documentation pages")
@limiter.limit("10/minute")
def sitemap_endpoint(
    request: Request,
    repository: PageRepository = Depends(get_repository),
    site_url: str = Depends(get_site_url),
) -> Response:
    entries = build_sitemap(repository.get_pages(), site_url)
    logger.info("Sitemap generated", extra={"entries": len(entries)})
    return Response(
        content=render_sitemap_xml(entries),
        media_type="application/xml",
        headers={"Cache-Control": _CACHE_CONTROL},
    )


@router.get("/rss.xml", summary="RSS feed of all documentation pages")
@limiter.limit("10/minute")
def rss_endpoint(
    request: Request,
    repository: PageRepository = Depends(get_repository),
    site_url: str = Depends(get_site_url),
) -> Response:
    return Response(
        content=render_rss(repository.get_pages(), site_url),
        media_type="application/rss+xml",
        headers={"Cache-Control": _CACHE_CONTROL},
    )
