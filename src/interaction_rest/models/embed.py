"""
Embed models — rich content blocks with Discord's size limits.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from interaction_rest.errors import OverboundError

DEFAULT_EMBED_TYPE = "rich"
DEFAULT_EMBED_COLOR = 0x303030

MAX_TITLE = 256
MAX_DESCRIPTION = 4096
MAX_FIELDS = 25
MAX_FOOTER_TEXT = 2048
MAX_AUTHOR_NAME = 256
MAX_FIELD_NAME = 256
MAX_FIELD_VALUE = 1024
MAX_EMBED_LENGTH = 6000


class EmbedFooter(BaseModel):
    text: str
    icon_url: Optional[str] = None
    proxy_icon_url: Optional[str] = None


class EmbedMedia(BaseModel):
    """Image, thumbnail or video."""
    url: str
    proxy_url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class EmbedProvider(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None


class EmbedAuthor(BaseModel):
    name: str
    url: Optional[str] = None
    icon_url: Optional[str] = None
    proxy_icon_url: Optional[str] = None


class EmbedField(BaseModel):
    name: str
    value: str
    inline: bool = False


class Embed(BaseModel):
    title: str = ""
    type: str = ""
    description: str = ""
    url: Optional[str] = None
    timestamp: Optional[str] = None
    color: int = 0
    footer: Optional[EmbedFooter] = None
    image: Optional[EmbedMedia] = None
    thumbnail: Optional[EmbedMedia] = None
    video: Optional[EmbedMedia] = None
    provider: Optional[EmbedProvider] = None
    author: Optional[EmbedAuthor] = None
    fields: list[EmbedField] = Field(default_factory=list)

    def length(self) -> int:
        """Total characters counted against the 6000 character embed limit."""
        total = len(self.title) + len(self.description)
        if self.footer is not None:
            total += len(self.footer.text)
        if self.author is not None:
            total += len(self.author.name)
        for field in self.fields:
            total += len(field.name) + len(field.value)
        return total

    def verify(self) -> "Embed":
        """Check limits and return a copy with defaults filled in.

        The receiver is left untouched. Raises OverboundError on the first
        exceeded limit.
        """
        updates: dict[str, Any] = {}
        if not self.type:
            updates["type"] = DEFAULT_EMBED_TYPE
        if self.color == 0:
            updates["color"] = DEFAULT_EMBED_COLOR

        if len(self.title) > MAX_TITLE:
            raise OverboundError(len(self.title), MAX_TITLE, "title")
        if len(self.description) > MAX_DESCRIPTION:
            raise OverboundError(len(self.description), MAX_DESCRIPTION, "description")
        if len(self.fields) > MAX_FIELDS:
            raise OverboundError(len(self.fields), MAX_FIELDS, "fields")
        if self.footer is not None and len(self.footer.text) > MAX_FOOTER_TEXT:
            raise OverboundError(len(self.footer.text), MAX_FOOTER_TEXT, "footer text")
        if self.author is not None and len(self.author.name) > MAX_AUTHOR_NAME:
            raise OverboundError(len(self.author.name), MAX_AUTHOR_NAME, "author name")
        for i, field in enumerate(self.fields):
            if len(field.name) > MAX_FIELD_NAME:
                raise OverboundError(len(field.name), MAX_FIELD_NAME, f"field {i} name")
            if len(field.value) > MAX_FIELD_VALUE:
                raise OverboundError(len(field.value), MAX_FIELD_VALUE, f"field {i} value")

        total = self.length()
        if total > MAX_EMBED_LENGTH:
            raise OverboundError(total, MAX_EMBED_LENGTH, "sum of all characters")

        return self.model_copy(update=updates, deep=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True, exclude_defaults=True)
