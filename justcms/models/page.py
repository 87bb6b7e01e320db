from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from justcms.models.block import ContentBlock
from justcms.models.category import Category
from justcms.models.image import Image


class PageSummary(BaseModel):
    """Listing-level projection of a page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    subtitle: Optional[str] = None
    cover_image: Optional[Image] = Field(default=None, alias="coverImage")
    slug: Optional[str] = None
    categories: List[Category] = []
    created_at: Optional[str] = Field(default=None, alias="createdAt")  # opaque, not parsed
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")


class PagesResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[PageSummary] = []
    total: Optional[int] = None
    """Total matching pages; may exceed ``len(items)`` when paginated."""


class PageMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None


class PageDetail(PageSummary):
    meta: PageMeta = PageMeta()
    content: List[ContentBlock] = []


class CategoryFilter(BaseModel):
    slug: str


class PageFilters(BaseModel):
    """Query input for :meth:`JustCmsClient.get_pages`."""

    category: CategoryFilter
