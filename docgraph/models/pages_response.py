from typing import List, Optional

from pydantic import BaseModel

from docgraph.models.page import PageSummary


class RelatedPagesResponse(BaseModel):
    page: PageSummary
    related: List[PageSummary]


class AdjacentPagesResponse(BaseModel):
    previous: Optional[PageSummary] = None
    next: Optional[PageSummary] = None
