from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from docgraph.services.paths import normalize_path, render_url


class PageRecord(BaseModel):
    """One published documentation page as supplied by the page repository.

    This model is the single coercion point for upstream content data:
    slugs are normalised, ``title``/``description`` are forced to strings and
    ``link_references`` to a list, so consumers never re-check types.
    """

    model_config = ConfigDict(frozen=True)

    slugs: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("slugs", "slug", "path"),
    )
    title: str = ""
    description: str = ""
    link_references: List[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("link_references", "linkReferences"),
    )
    absolute_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("absolute_path", "absolutePath"),
    )

    @field_validator("slugs", mode="before")
    @classmethod
    def _normalize_slugs(cls, value: Any) -> List[str]:
        return normalize_path(value)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("link_references", mode="before")
    @classmethod
    def _coerce_links(cls, value: Any) -> List[Any]:
        return list(value) if isinstance(value, (list, tuple)) else []

    @property
    def url(self) -> str:
        return render_url(self.slugs)


class PageSummary(BaseModel):
    path: str
    url: str
    title: str
    description: str

    @classmethod
    def from_record(cls, page: PageRecord) -> "PageSummary":
        return cls(
            path="/".join(page.slugs),
            url=page.url,
            title=page.title,
            description=page.description,
        )
