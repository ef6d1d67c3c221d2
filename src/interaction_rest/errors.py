"""
interaction-rest error types.

Validation failures derive from PayloadError and are raised before any
request is sent. HTTP failures surface as HTTPError.
"""

from typing import Any, Optional


class InteractionRestError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class PayloadError(InteractionRestError):
    """A request payload failed client-side validation."""


class EmptyPayloadError(PayloadError):
    def __init__(self, message: str = "message is empty"):
        super().__init__("empty_payload", message)


class MissingFieldError(PayloadError):
    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__("missing_field", message or f"{field} is required", {"field": field})
        self.field = field


class OverboundError(PayloadError):
    def __init__(self, count: int, max: int, label: str = ""):
        message = f"Overbound error: {count} > {max}"
        if label:
            message += f" in {label}"
        super().__init__("overbound", message, {"count": count, "max": max, "label": label})
        self.count = count
        self.max = max
        self.label = label


class EmbedBudgetExceededError(OverboundError):
    def __init__(
        self, count: int, max: int = 6000, label: str = "sum of all text in embeds", index: Optional[int] = None,
    ):
        super().__init__(count, max, label)
        self.index = index
        if index is not None:
            self.details = {**(self.details or {}), "index": index}


class MentionPolicyError(PayloadError):
    def __init__(self, cause: Exception):
        super().__init__("mention_policy", f"allowedMentions error: {cause}")
        self.cause = cause


class EmbedValidationError(PayloadError):
    def __init__(self, index: int, cause: Exception):
        super().__init__("embed_invalid", f"embed error at {index}: {cause}", {"index": index})
        self.index = index
        self.cause = cause


class HTTPError(InteractionRestError):
    def __init__(self, status_code: int, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("http_error", message, details)
        self.status_code = status_code
