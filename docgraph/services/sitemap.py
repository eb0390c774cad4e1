"""Sitemap metadata derivation and ``sitemap.xml`` rendering."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence
from xml.etree import ElementTree

from docgraph.models.page import PageRecord
from docgraph.models.sitemap import ChangeFrequency, SitemapEntry
from docgraph.services.paths import DOCS_BASE_URL, first_segment

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

FEED_PATH = "/rss.xml"

# Priority by top-level segment, checked before the depth-based fallback
_SECTION_PRIORITY = {
    "getting-started": 0.9,
    "api-reference": 0.8,
    "examples": 0.7,
    "guides": 0.6,
}

# Depth-based priority: _DEPTH_PRIORITY_START - _DEPTH_PRIORITY_STEP * depth, floored
_DEPTH_PRIORITY_START = 0.9
_DEPTH_PRIORITY_STEP = 0.1
_MIN_PRIORITY = 0.3

_SECTION_CHANGE_FREQUENCY = {
    "api-reference": "monthly",
    "examples": "monthly",
    "getting-started": "weekly",
}
_DEFAULT_CHANGE_FREQUENCY: ChangeFrequency = "weekly"

TimestampLookup = Callable[[Optional[str]], datetime]


def priority(url: str, segments: Sequence[str]) -> float:
    """Return the crawl priority of the page at *url* with path *segments*."""
    if url in ("/", DOCS_BASE_URL):
        return 1.0

    section = first_segment(segments)
    if section in _SECTION_PRIORITY:
        return _SECTION_PRIORITY[section]

    depth = len(segments)
    return round(max(_MIN_PRIORITY, _DEPTH_PRIORITY_START - _DEPTH_PRIORITY_STEP * depth), 1)


def change_frequency(segments: Sequence[str]) -> ChangeFrequency:
    """Return the change-frequency hint for a page with path *segments*."""
    return _SECTION_CHANGE_FREQUENCY.get(first_segment(segments), _DEFAULT_CHANGE_FREQUENCY)


def last_modified(absolute_path: Optional[str]) -> datetime:
    """Return the filesystem modification time of *absolute_path* in UTC.

    Falls back to the current time when the path is missing or cannot be
    stat'ed.
    """
    try:
        mtime = Path(absolute_path).stat().st_mtime
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("Sitemap: no timestamp for %r – %s", absolute_path, exc)
        return datetime.now(timezone.utc)
    return datetime.fromtimestamp(mtime, tz=timezone.utc)


def safe_timestamp(lookup: TimestampLookup, absolute_path: Optional[str]) -> datetime:
    """Call *lookup*, degrading any failure to the current time."""
    try:
        return lookup(absolute_path)
    except Exception as exc:
        logger.warning("Sitemap: timestamp lookup failed for %r – %s", absolute_path, exc)
        return datetime.now(timezone.utc)


def build_sitemap_entries(
    pages: Sequence[PageRecord],
    site_url: str,
    timestamp_lookup: TimestampLookup = last_modified,
) -> List[SitemapEntry]:
    """Return one :class:`SitemapEntry` per page, in repository order."""
    base = site_url.rstrip("/")
    entries: List[SitemapEntry] = []
    for page in pages:
        url = page.url
        entries.append(
            SitemapEntry(
                url=f"{base}{url}",
                last_modified=safe_timestamp(timestamp_lookup, page.absolute_path),
                change_frequency=change_frequency(page.slugs),
                priority=priority(url, page.slugs),
            )
        )
    return entries


def build_sitemap(
    pages: Sequence[PageRecord],
    site_url: str,
    timestamp_lookup: TimestampLookup = last_modified,
    generated_at: Optional[datetime] = None,
) -> List[SitemapEntry]:
    """Return the full sitemap: the site root, the RSS feed, then every page."""
    base = site_url.rstrip("/")
    generated_at = generated_at or datetime.now(timezone.utc)
    fixed = [
        SitemapEntry(url=base, last_modified=generated_at, change_frequency="weekly", priority=1.0),
        SitemapEntry(
            url=f"{base}{FEED_PATH}",
            last_modified=generated_at,
            change_frequency="daily",
            priority=0.7,
        ),
    ]
    return fixed + build_sitemap_entries(pages, site_url, timestamp_lookup)


def render_sitemap_xml(entries: Sequence[SitemapEntry]) -> str:
    """Serialise *entries* as a sitemaps.org ``<urlset>`` document."""
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)
    for entry in entries:
        url_elem = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url_elem, "loc").text = entry.url
        ElementTree.SubElement(url_elem, "lastmod").text = entry.last_modified.isoformat()
        ElementTree.SubElement(url_elem, "changefreq").text = entry.change_frequency
        ElementTree.SubElement(url_elem, "priority").text = f"{entry.priority:.1f}"
    body = ElementTree.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
