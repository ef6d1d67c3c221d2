"""
Request body encoding: JSON when there are no files, multipart otherwise.

Multipart bodies carry the JSON payload as a ``payload_json`` part followed
by one ``files[n]`` part per file, in list order.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from interaction_rest.models.file import File

PAYLOAD_JSON_FIELD = "payload_json"


@dataclass
class RequestBody:
    json: Optional[dict[str, Any]] = None
    files: list[tuple[str, tuple[Optional[str], Any, Optional[str]]]] = field(default_factory=list)

    @property
    def multipart(self) -> bool:
        return bool(self.files)

    def httpx_kwargs(self) -> dict[str, Any]:
        if self.multipart:
            return {"files": self.files}
        if self.json is None:
            return {}
        return {"json": self.json}


def needs_multipart(files: Optional[Sequence[File]]) -> bool:
    return bool(files)


def encode_body(payload: Optional[dict[str, Any]], files: Optional[Sequence[File]] = None) -> RequestBody:
    """Pick JSON or multipart encoding for a payload and its files."""
    if not needs_multipart(files):
        return RequestBody(json=payload)

    parts: list[tuple[str, tuple[Optional[str], Any, Optional[str]]]] = [
        (PAYLOAD_JSON_FIELD, (None, json.dumps(payload or {}), "application/json")),
    ]
    for idx, f in enumerate(files or []):
        parts.append((f"files[{idx}]", (f.name, f.reader, f.content_type or "application/octet-stream")))
    return RequestBody(files=parts)
