"""
Interaction response payloads.

Request payloads are plain dataclasses rather than pydantic models: the
embed list handed in by the caller is kept by reference so that embed
normalization is visible to the caller after a call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import Any, Callable, Iterable, Optional, Union

from interaction_rest import option
from interaction_rest.errors import OverboundError
from interaction_rest.models.embed import Embed
from interaction_rest.models.file import File
from interaction_rest.models.mentions import AllowedMentions
from interaction_rest.models.message import Attachment
from interaction_rest.option import UNSET, Nullable

MAX_CHOICES = 25


class InteractionResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8
    MODAL = 9


class MessageFlags(IntFlag):
    NONE = 0
    SUPPRESS_EMBEDS = 1 << 2
    EPHEMERAL = 1 << 6
    SUPPRESS_NOTIFICATIONS = 1 << 12


class ChoiceKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"


@dataclass(frozen=True)
class Choice:
    name: str
    value: Union[str, int, float]


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_CHOICE_CHECKS: dict[ChoiceKind, Callable[[Any], bool]] = {
    ChoiceKind.STRING: _is_string,
    ChoiceKind.INTEGER: _is_integer,
    ChoiceKind.NUMBER: _is_number,
}


@dataclass(frozen=True)
class AutocompleteChoices:
    """Autocomplete results of exactly one kind.

    Build with ``strings()``, ``integers()`` or ``numbers()``; values of the
    wrong type are rejected so kinds never mix.
    """

    kind: ChoiceKind
    choices: tuple[Choice, ...]

    def __post_init__(self) -> None:
        check = _CHOICE_CHECKS[self.kind]
        for c in self.choices:
            if not check(c.value):
                raise TypeError(
                    f"{self.kind.value} choice {c.name!r} has value of type {type(c.value).__name__}"
                )
        if len(self.choices) > MAX_CHOICES:
            raise OverboundError(len(self.choices), MAX_CHOICES, "autocomplete choices")

    @classmethod
    def _build(cls, kind: ChoiceKind, choices: Iterable[Union[Choice, tuple[str, Any]]]) -> AutocompleteChoices:
        built = tuple(c if isinstance(c, Choice) else Choice(*c) for c in choices)
        return cls(kind=kind, choices=built)

    @classmethod
    def strings(cls, choices: Iterable[Union[Choice, tuple[str, str]]]) -> AutocompleteChoices:
        return cls._build(ChoiceKind.STRING, choices)

    @classmethod
    def integers(cls, choices: Iterable[Union[Choice, tuple[str, int]]]) -> AutocompleteChoices:
        return cls._build(ChoiceKind.INTEGER, choices)

    @classmethod
    def numbers(cls, choices: Iterable[Union[Choice, tuple[str, float]]]) -> AutocompleteChoices:
        return cls._build(ChoiceKind.NUMBER, choices)

    def to_payload(self) -> list[dict[str, Any]]:
        return [{"name": c.name, "value": c.value} for c in self.choices]


def _put(out: dict[str, Any], key: str, opt: Nullable[Any], render: Callable[[Any], Any] = lambda v: v) -> None:
    opt = option.coerce(opt)
    if opt is UNSET:
        return
    out[key] = render(opt.value) if option.is_set(opt) else None


def _render_embeds(embeds: list[Embed]) -> list[dict[str, Any]]:
    return [e.to_payload() for e in embeds]


def _render_attachments(attachments: list[Attachment]) -> list[dict[str, Any]]:
    return [a.to_payload() for a in attachments]


@dataclass
class InteractionResponseData:
    """Message, autocomplete or modal data for an interaction callback.

    Nullable fields accept a plain value, ``None`` (sent as null), or are
    left ``UNSET`` (omitted). ``files`` are uploaded as multipart parts and
    never JSON-encoded.
    """

    content: Nullable[str] = UNSET
    tts: bool = False
    embeds: Nullable[list[Embed]] = UNSET
    components: Nullable[list[dict[str, Any]]] = UNSET
    allowed_mentions: Optional[AllowedMentions] = None
    flags: MessageFlags = MessageFlags.NONE
    files: list[File] = field(default_factory=list)
    choices: Optional[AutocompleteChoices] = None
    custom_id: Nullable[str] = UNSET
    title: Nullable[str] = UNSET

    def __post_init__(self) -> None:
        self.content = option.coerce(self.content)
        self.embeds = option.coerce(self.embeds)
        self.components = option.coerce(self.components)
        self.custom_id = option.coerce(self.custom_id)
        self.title = option.coerce(self.title)

    def needs_multipart(self) -> bool:
        return len(self.files) > 0

    def to_payload(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        _put(out, "content", self.content)
        if self.tts:
            out["tts"] = True
        _put(out, "embeds", self.embeds, _render_embeds)
        _put(out, "components", self.components)
        if self.allowed_mentions is not None:
            out["allowed_mentions"] = self.allowed_mentions.to_payload()
        if self.flags:
            out["flags"] = int(self.flags)
        if self.choices is not None:
            out["choices"] = self.choices.to_payload()
        _put(out, "custom_id", self.custom_id)
        _put(out, "title", self.title)
        return out


@dataclass
class InteractionResponse:
    type: InteractionResponseType
    data: Optional[InteractionResponseData] = None

    @property
    def files(self) -> list[File]:
        return self.data.files if self.data is not None else []

    def needs_multipart(self) -> bool:
        return self.data is not None and self.data.needs_multipart()

    def to_payload(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": int(self.type)}
        if self.data is not None:
            out["data"] = self.data.to_payload()
        return out


@dataclass
class EditInteractionResponseData:
    """Partial update of an interaction response or follow-up message.

    ``attachments`` lists existing attachments to keep.
    """

    content: Nullable[str] = UNSET
    embeds: Nullable[list[Embed]] = UNSET
    components: Nullable[list[dict[str, Any]]] = UNSET
    allowed_mentions: Optional[AllowedMentions] = None
    attachments: Nullable[list[Attachment]] = UNSET
    files: list[File] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.content = option.coerce(self.content)
        self.embeds = option.coerce(self.embeds)
        self.components = option.coerce(self.components)
        self.attachments = option.coerce(self.attachments)

    def needs_multipart(self) -> bool:
        return len(self.files) > 0

    def to_payload(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        _put(out, "content", self.content)
        _put(out, "embeds", self.embeds, _render_embeds)
        _put(out, "components", self.components)
        if self.allowed_mentions is not None:
            out["allowed_mentions"] = self.allowed_mentions.to_payload()
        _put(out, "attachments", self.attachments, _render_attachments)
        return out
