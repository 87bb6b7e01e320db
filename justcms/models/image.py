from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ImageVariant(BaseModel):
    """One sized rendition of an image."""

    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    filename: Optional[str] = None


class Image(BaseModel):
    model_config = ConfigDict(frozen=True)

    alt: Optional[str] = None
    variants: List[ImageVariant] = []
    """Renditions as ordered by the API, smallest first (index 1 is "large")."""
