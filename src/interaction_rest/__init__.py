"""
interaction-rest — typed client for Discord interaction endpoints.

Responds to interactions and manages their webhook messages, validating
payloads before anything is sent.
"""

from interaction_rest.client import AsyncInteractionClient, InteractionClient
from interaction_rest.interactions import InteractionsAPI
from interaction_rest.errors import (
    InteractionRestError,
    PayloadError,
    EmptyPayloadError,
    MissingFieldError,
    OverboundError,
    EmbedBudgetExceededError,
    MentionPolicyError,
    EmbedValidationError,
    HTTPError,
)
from interaction_rest.option import UNSET, NULL, Some
from interaction_rest.models import (
    AllowedMentions,
    AppID,
    Attachment,
    AutocompleteChoices,
    EditInteractionResponseData,
    Embed,
    File,
    InteractionID,
    InteractionResponse,
    InteractionResponseData,
    InteractionResponseType,
    Message,
    MessageFlags,
    MessageID,
)

__version__ = "0.1.0"
__all__ = [
    "AsyncInteractionClient",
    "InteractionClient",
    "InteractionsAPI",
    "InteractionRestError",
    "PayloadError",
    "EmptyPayloadError",
    "MissingFieldError",
    "OverboundError",
    "EmbedBudgetExceededError",
    "MentionPolicyError",
    "EmbedValidationError",
    "HTTPError",
    "UNSET",
    "NULL",
    "Some",
    "AllowedMentions",
    "AppID",
    "Attachment",
    "AutocompleteChoices",
    "EditInteractionResponseData",
    "Embed",
    "File",
    "InteractionID",
    "InteractionResponse",
    "InteractionResponseData",
    "InteractionResponseType",
    "Message",
    "MessageFlags",
    "MessageID",
]
