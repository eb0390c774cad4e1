"""Content category classification by top-level path segment.

Categories
----------
``"example"``
    Pages under ``examples/``.

``"api"``
    Pages under ``api-reference/``.

``"getting-started"``
    Pages under ``getting-started/``.

``"guide"``
    Pages under ``guides/``.

``"other"``
    Everything else, including the docs root.
"""

from typing import Literal, Sequence

from docgraph.services.paths import first_segment

Category = Literal["example", "api", "getting-started", "guide", "other"]

_CATEGORY_BY_SEGMENT = {
    "examples": "example",
    "api-reference": "api",
    "getting-started": "getting-started",
    "guides": "guide",
}


def classify(segments: Sequence[str]) -> Category:
    """Return the :data:`Category` of a normalised path."""
    return _CATEGORY_BY_SEGMENT.get(first_segment(segments), "other")
