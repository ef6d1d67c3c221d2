"""
Client-side payload validation, run before any request is sent.
"""

from __future__ import annotations

from typing import Optional

from interaction_rest import option
from interaction_rest.errors import (
    EmbedBudgetExceededError,
    EmbedValidationError,
    EmptyPayloadError,
    MentionPolicyError,
    MissingFieldError,
    OverboundError,
)
from interaction_rest.models.embed import Embed
from interaction_rest.models.file import File
from interaction_rest.models.interaction import InteractionResponse, InteractionResponseType
from interaction_rest.models.mentions import AllowedMentions
from interaction_rest.option import Nullable

MAX_EMBEDS_LENGTH = 6000
EMBEDS_LENGTH_LABEL = "sum of all text in embeds"


def _has_content(content: Nullable[str]) -> bool:
    return option.is_set(content) and content.value != ""


def _has_embeds(embeds: Nullable[list[Embed]]) -> bool:
    return option.is_set(embeds) and len(embeds.value) > 0


def _content_cleared(content: Nullable[str]) -> bool:
    return option.is_null(content) or (option.is_set(content) and content.value == "")


def _embeds_cleared(embeds: Nullable[list[Embed]]) -> bool:
    return option.is_null(embeds) or (option.is_set(embeds) and len(embeds.value) == 0)


def check_new_message(content: Nullable[str], embeds: Nullable[list[Embed]], files: list[File]) -> None:
    """A new message needs content, at least one embed, or a file."""
    content, embeds = option.coerce(content), option.coerce(embeds)
    if not _has_content(content) and not _has_embeds(embeds) and not files:
        raise EmptyPayloadError()


def check_update_message(content: Nullable[str], embeds: Nullable[list[Embed]], files: list[File]) -> None:
    """An update may leave fields untouched; only clearing everything fails."""
    content, embeds = option.coerce(content), option.coerce(embeds)
    if _content_cleared(content) and _embeds_cleared(embeds) and not files:
        raise EmptyPayloadError()


def check_response(resp: InteractionResponse) -> None:
    """Emptiness and shape rules for an interaction callback, by response type."""
    data = resp.data
    if data is None:
        return

    if resp.type == InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE:
        check_new_message(data.content, data.embeds, data.files)
    elif resp.type == InteractionResponseType.UPDATE_MESSAGE:
        check_update_message(data.content, data.embeds, data.files)
    elif resp.type == InteractionResponseType.MODAL:
        for name in ("custom_id", "title"):
            if not option.get(option.coerce(getattr(data, name))):
                raise MissingFieldError(name, f"modal response requires {name}")
    elif resp.type == InteractionResponseType.APPLICATION_COMMAND_AUTOCOMPLETE_RESULT:
        if data.choices is None:
            raise MissingFieldError("choices", "autocomplete result requires choices")


def verify_mentions(mentions: Optional[AllowedMentions]) -> None:
    if mentions is None:
        return
    try:
        mentions.verify()
    except ValueError as e:
        raise MentionPolicyError(e) from e


def validate_embeds(embeds: Nullable[list[Embed]]) -> None:
    """Verify each embed in order and enforce the combined length budget.

    Each verified embed replaces the caller's entry at the same index.
    """
    embeds = option.coerce(embeds)
    if not option.is_set(embeds):
        return

    items = embeds.value
    total = 0
    for i, embed in enumerate(items):
        try:
            verified = embed.verify()
        except OverboundError as e:
            raise EmbedValidationError(i, e) from e

        total += verified.length()
        if total > MAX_EMBEDS_LENGTH:
            raise EmbedBudgetExceededError(total, MAX_EMBEDS_LENGTH, EMBEDS_LENGTH_LABEL, index=i)

        items[i] = verified


def validate_message(mentions: Optional[AllowedMentions], embeds: Nullable[list[Embed]]) -> None:
    """Shared checks for every message-bearing payload."""
    verify_mentions(mentions)
    validate_embeds(embeds)

