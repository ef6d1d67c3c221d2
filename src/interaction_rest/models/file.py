"""
Upload files for multipart requests.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union


@dataclass
class File:
    name: str
    reader: Union[bytes, BinaryIO]
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "File":
        p = Path(path)
        return cls(name=p.name, reader=p.read_bytes(), content_type=content_type)
