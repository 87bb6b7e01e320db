"""Pure helpers over already-fetched JustCMS data."""

from typing import Optional

from justcms.models.image import Image, ImageVariant
from justcms.models.page import PageSummary

# Position of the "large" rendition in Image.variants (upstream convention).
_LARGE_VARIANT_INDEX = 1


def is_block_has_style(block, style: str) -> bool:
    """Return *True* when *block* carries *style*, ignoring case."""
    wanted = style.lower()
    return any(s.lower() == wanted for s in block.styles)


def get_large_image_variant(image: Image) -> Optional[ImageVariant]:
    """Return the large rendition of *image*, or *None* if it has fewer than two.

    The API lists variants smallest first, so the second one is the large
    rendition.  ``width``/``height`` are not inspected.
    """
    if len(image.variants) <= _LARGE_VARIANT_INDEX:
        return None
    return image.variants[_LARGE_VARIANT_INDEX]


def get_first_image(block) -> Optional[Image]:
    """Return the first image of an image block, or *None* when it has none."""
    images = getattr(block, "images", None)
    return images[0] if images else None


def has_category(page: PageSummary, category_slug: str) -> bool:
    return category_slug in {category.slug for category in page.categories}
