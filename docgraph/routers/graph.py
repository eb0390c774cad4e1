import logging

from fastapi import APIRouter, Depends, Request

from docgraph.limiter import limiter
from docgraph.models.graph import Graph
from docgraph.services.graph import build_graph
from docgraph.services.repository import PageRepository, get_repository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/graph",
    response_model=Graph,
    summary="Documentation page graph",
    description=(
        "Returns one node per page and one directed edge per link reference "
        "that resolves to another page.  Unresolvable references are omitted."
    ),
)
@limiter.limit("30/minute")
async def graph_endpoint(
    request: Request,
    repository: PageRepository = Depends(get_repository),
) -> Graph:
    graph = build_graph(repository)
    logger.info(
        "Graph built",
        extra={"nodes": len(graph.nodes), "edges": len(graph.edges)},
    )
    return graph
