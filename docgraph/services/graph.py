"""Knowledge-graph construction from inter-page link references.

Nodes are one per distinct page URL; edges are one per link reference that
resolves to an existing page.  References that do not resolve are dropped
from the graph and surface only through :func:`find_broken_links`.
"""

import logging
from typing import List, Optional, Set

from docgraph.models.graph import BrokenLinkReport, Graph, GraphEdge, GraphNode
from docgraph.models.page import PageRecord
from docgraph.services.category import classify
from docgraph.services.paths import normalize_link_reference
from docgraph.services.repository import PageRepository

logger = logging.getLogger(__name__)


def _resolve(repository: PageRepository, reference: object) -> Optional[PageRecord]:
    """Return the page *reference* points at, or *None* when it does not resolve.

    The empty path never resolves, even though the docs root is a page.
    """
    segments = normalize_link_reference(reference)
    if not segments:
        return None
    return repository.get_page(segments)


def build_graph(repository: PageRepository) -> Graph:
    """Build the page graph for every page in *repository*.

    Self-references produce self-loop edges and repeated references produce
    repeated edges; neither is filtered.
    """
    pages = repository.get_pages()

    nodes: List[GraphNode] = []
    node_ids: Set[str] = set()
    for page in pages:
        url = page.url
        if url in node_ids:
            continue
        node_ids.add(url)
        nodes.append(GraphNode(id=url, label=page.title, url=url, category=classify(page.slugs)))

    edges: List[GraphEdge] = []
    for page in pages:
        from_url = page.url
        for reference in page.link_references:
            target = _resolve(repository, reference)
            if target is None:
                logger.debug("Graph: dropping unresolved reference %r on %s", reference, from_url)
                continue
            to_url = target.url
            if from_url in node_ids and to_url in node_ids:
                edges.append(GraphEdge(from_=from_url, to=to_url))

    return Graph(nodes=nodes, edges=edges)


def find_broken_links(repository: PageRepository) -> List[BrokenLinkReport]:
    """Report, per page, the link references that resolve to no page.

    Pages without broken references are omitted.  Order follows the
    repository's enumeration order.
    """
    reports: List[BrokenLinkReport] = []
    for page in repository.get_pages():
        broken = [
            str(reference)
            for reference in page.link_references
            if _resolve(repository, reference) is None
        ]
        if broken:
            reports.append(BrokenLinkReport(url=page.url, references=broken))
    return reports
