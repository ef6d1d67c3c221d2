"""Typed payload and response models."""

from interaction_rest.models.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedMedia,
    EmbedProvider,
)
from interaction_rest.models.file import File
from interaction_rest.models.interaction import (
    AutocompleteChoices,
    Choice,
    ChoiceKind,
    EditInteractionResponseData,
    InteractionResponse,
    InteractionResponseData,
    InteractionResponseType,
    MessageFlags,
)
from interaction_rest.models.mentions import AllowedMentions, AllowedMentionType
from interaction_rest.models.message import Attachment, Message, MessageAuthor
from interaction_rest.models.snowflake import AppID, InteractionID, MessageID, Snowflake

__all__ = [
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedMedia",
    "EmbedProvider",
    "File",
    "AutocompleteChoices",
    "Choice",
    "ChoiceKind",
    "EditInteractionResponseData",
    "InteractionResponse",
    "InteractionResponseData",
    "InteractionResponseType",
    "MessageFlags",
    "AllowedMentions",
    "AllowedMentionType",
    "Attachment",
    "Message",
    "MessageAuthor",
    "AppID",
    "InteractionID",
    "MessageID",
    "Snowflake",
]
