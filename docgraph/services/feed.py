"""RSS 2.0 feed of all documentation pages."""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional, Sequence
from xml.etree import ElementTree

from docgraph.models.page import PageRecord
from docgraph.services.paths import DOCS_BASE_URL
from docgraph.services.sitemap import TimestampLookup, last_modified, safe_timestamp

FEED_TITLE = "Documentation"
FEED_DESCRIPTION = "All documentation pages: guides, API reference, and examples."
FEED_LANGUAGE = "en"
FEED_GENERATOR = "docgraph"


def render_rss(
    pages: Sequence[PageRecord],
    site_url: str,
    timestamp_lookup: TimestampLookup = last_modified,
    generated_at: Optional[datetime] = None,
) -> str:
    """Return an RSS 2.0 document with one ``<item>`` per page.

    Item dates come from *timestamp_lookup* and fall back to the current time
    the same way sitemap entries do.
    """
    base = site_url.rstrip("/")
    generated_at = generated_at or datetime.now(timezone.utc)

    rss = ElementTree.Element("rss", version="2.0")
    channel = ElementTree.SubElement(rss, "channel")
    ElementTree.SubElement(channel, "title").text = FEED_TITLE
    ElementTree.SubElement(channel, "link").text = f"{base}{DOCS_BASE_URL}"
    ElementTree.SubElement(channel, "description").text = FEED_DESCRIPTION
    ElementTree.SubElement(channel, "language").text = FEED_LANGUAGE
    ElementTree.SubElement(channel, "lastBuildDate").text = format_datetime(generated_at)
    ElementTree.SubElement(channel, "generator").text = FEED_GENERATOR

    for page in pages:
        link = f"{base}{page.url}"
        item = ElementTree.SubElement(channel, "item")
        ElementTree.SubElement(item, "title").text = page.title
        ElementTree.SubElement(item, "link").text = link
        ElementTree.SubElement(item, "guid").text = link
        ElementTree.SubElement(item, "description").text = page.description
        published = safe_timestamp(timestamp_lookup, page.absolute_path)
        ElementTree.SubElement(item, "pubDate").text = format_datetime(published)

    body = ElementTree.tostring(rss, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body
