from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    slug: Optional[str] = None


class CategoriesResponse(BaseModel):
    """Envelope returned by the project root endpoint."""

    model_config = ConfigDict(frozen=True)

    categories: List[Category] = []
