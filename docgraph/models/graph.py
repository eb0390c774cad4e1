"""Graph payload consumed by the documentation graph view."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from docgraph.services.category import Category


class GraphNode(BaseModel):
    id: str
    label: str
    url: str
    category: Category


class GraphEdge(BaseModel):
    """Directed reference from one page URL to another."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: str


class Graph(BaseModel):
    nodes: List[GraphNode]
    edges: List[GraphEdge]


class BrokenLinkReport(BaseModel):
    """Link references on one page that do not resolve to any page."""

    url: str
    references: List[str]
