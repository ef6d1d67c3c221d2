"""
Message models — decoded webhook responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from interaction_rest.models.embed import Embed


class Attachment(BaseModel):
    id: str
    filename: str = ""
    description: Optional[str] = None
    content_type: Optional[str] = None
    size: int = 0
    url: str = ""
    proxy_url: str = ""
    height: Optional[int] = None
    width: Optional[int] = None
    ephemeral: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class MessageAuthor(BaseModel):
    id: str
    username: str = ""
    discriminator: str = ""
    bot: bool = False
    global_name: Optional[str] = None


class Message(BaseModel):
    id: str
    channel_id: str = ""
    type: int = 0
    content: str = ""
    author: Optional[MessageAuthor] = None
    timestamp: str = ""
    edited_timestamp: Optional[str] = None
    tts: bool = False
    flags: int = 0
    embeds: list[Embed] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)
    components: list[dict[str, Any]] = Field(default_factory=list)
    webhook_id: Optional[str] = None
    application_id: Optional[str] = None
