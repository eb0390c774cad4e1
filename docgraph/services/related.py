"""Related-page scoring and previous/next adjacency.

Relatedness is a small integer heuristic:

* ``+10`` when both pages share their top-level segment,
* ``+2`` per distinct path segment the two paths have in common,
* ``+1`` per lowercase word of the source title that also appears in the
  candidate title (repeated source words count each time).

Candidates are ranked by descending score with a stable sort, so ties keep
the repository's enumeration order.
"""

from typing import List, NamedTuple, Optional, Sequence

from docgraph.models.page import PageRecord
from docgraph.services.paths import first_segment

DEFAULT_RELATED_LIMIT = 3

_SAME_SECTION_SCORE = 10
_SHARED_SEGMENT_SCORE = 2
_SHARED_WORD_SCORE = 1


class AdjacentPages(NamedTuple):
    previous: Optional[PageRecord]
    next: Optional[PageRecord]


def _title_words(title: str) -> List[str]:
    return title.lower().split()


def relatedness(source: PageRecord, candidate: PageRecord) -> int:
    """Return the relatedness score of *candidate* with respect to *source*."""
    score = 0
    if first_segment(source.slugs) == first_segment(candidate.slugs):
        score += _SAME_SECTION_SCORE
    score += _SHARED_SEGMENT_SCORE * len(set(source.slugs) & set(candidate.slugs))
    candidate_words = set(_title_words(candidate.title))
    score += _SHARED_WORD_SCORE * sum(1 for word in _title_words(source.title) if word in candidate_words)
    return score


def related_pages(
    page: PageRecord,
    pages: Sequence[PageRecord],
    limit: int = DEFAULT_RELATED_LIMIT,
) -> List[PageRecord]:
    """Return up to *limit* pages from *pages* most related to *page*.

    *page* itself (matched by URL) is never included.  Zero-score candidates
    are still eligible when there are not enough better ones.
    """
    if limit <= 0:
        return []

    current_url = page.url
    scored = [
        (candidate, relatedness(page, candidate))
        for candidate in pages
        if candidate.url != current_url
    ]
    scored.sort(key=lambda item: item[1], reverse=True)
    return [candidate for candidate, _score in scored[:limit]]


def adjacent_pages(page: PageRecord, pages: Sequence[PageRecord]) -> AdjacentPages:
    """Return the pages immediately before and after *page* in *pages*.

    *page* is located by URL, not identity.  When it is not in *pages* both
    neighbours are *None*.
    """
    current_url = page.url
    for index, candidate in enumerate(pages):
        if candidate.url == current_url:
            previous = pages[index - 1] if index > 0 else None
            following = pages[index + 1] if index + 1 < len(pages) else None
            return AdjacentPages(previous=previous, next=following)
    return AdjacentPages(previous=None, next=None)
