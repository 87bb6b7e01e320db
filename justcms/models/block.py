"""Page content blocks.

A page body is a list of blocks discriminated by their ``type`` field.  Use
``block.type`` (or ``isinstance``) before touching variant-specific fields.
Blocks whose ``type`` is not one of the known tags map to
:class:`UnknownBlock` with every field kept as an extra.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from justcms.models.image import Image


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    styles: List[str] = []


class HeaderBlock(_Block):
    type: Literal["header"] = "header"
    header: Optional[str] = None
    subheader: Optional[str] = None
    size: Optional[str] = None


class ListOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    subtitle: Optional[str] = None


class ListBlock(_Block):
    type: Literal["list"] = "list"
    options: List[ListOption] = []


class EmbedBlock(_Block):
    type: Literal["embed"] = "embed"
    url: Optional[str] = None


class ImageBlock(_Block):
    type: Literal["image"] = "image"
    images: List[Image] = []


class CodeBlock(_Block):
    type: Literal["code"] = "code"
    code: Optional[str] = None


class TextBlock(_Block):
    type: Literal["text"] = "text"
    text: Optional[str] = None


class CtaBlock(_Block):
    type: Literal["cta"] = "cta"
    text: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None


class CustomBlock(_Block):
    """Project-defined block; fields beyond ``blockId`` are kept as extras."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: Literal["custom"] = "custom"
    block_id: Optional[str] = Field(default=None, alias="blockId")


class UnknownBlock(_Block):
    """A block type this client does not know yet."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: Optional[str] = None


_BLOCK_TYPES = ("header", "list", "embed", "image", "code", "text", "cta", "custom")


def _block_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("type")
    else:
        tag = getattr(value, "type", None)
    if isinstance(value, UnknownBlock) or tag not in _BLOCK_TYPES:
        return "unknown"
    return tag


ContentBlock = Annotated[
    Union[
        Annotated[HeaderBlock, Tag("header")],
        Annotated[ListBlock, Tag("list")],
        Annotated[EmbedBlock, Tag("embed")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[CodeBlock, Tag("code")],
        Annotated[TextBlock, Tag("text")],
        Annotated[CtaBlock, Tag("cta")],
        Annotated[CustomBlock, Tag("custom")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]
