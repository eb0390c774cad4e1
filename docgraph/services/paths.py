"""Path normalisation: canonical slug segments and their rendered docs URLs.

Page slugs arrive in several shapes from the content pipeline (a list of
segments, a single ``"a/b/c"`` string, or nothing at all).  Every entry point
funnels them through :func:`normalize_path` so downstream code only ever sees
a plain list of non-empty strings.
"""

from typing import Any, List, Sequence

# Base prefix every documentation page is served under
DOCS_BASE_URL = "/docs"


def _split(value: str) -> List[str]:
    return [segment for segment in value.split("/") if segment]


def normalize_path(value: Any) -> List[str]:
    """Return *value* as an ordered list of non-empty path segments.

    Strings are split on ``/``; lists and tuples are flattened the same way,
    skipping non-string elements.  Anything else (``None``, numbers, dicts)
    normalises to the empty list, which is the root path.
    """
    if isinstance(value, str):
        return _split(value)
    if isinstance(value, (list, tuple)):
        segments: List[str] = []
        for item in value:
            if isinstance(item, str):
                segments.extend(_split(item))
        return segments
    return []


def normalize_link_reference(reference: Any) -> List[str]:
    """Normalise a raw outbound link reference into page segments.

    Fragments and query strings are dropped, and an absolute reference that
    starts with the docs base prefix (``/docs/guides/x``) is made relative to
    it.  Non-string references normalise to the empty list.
    """
    if not isinstance(reference, str):
        return []
    path = reference.split("#", 1)[0].split("?", 1)[0]
    if path == DOCS_BASE_URL or path.startswith(DOCS_BASE_URL + "/"):
        path = path[len(DOCS_BASE_URL):]
    return _split(path)


def render_url(segments: Sequence[str]) -> str:
    """Render normalised *segments* as a site-relative docs URL."""
    if not segments:
        return DOCS_BASE_URL
    return f"{DOCS_BASE_URL}/" + "/".join(segments)


def first_segment(segments: Sequence[str]) -> str:
    """Return the top-level segment of *segments*, or ``""`` for the root."""
    return segments[0] if segments else ""
