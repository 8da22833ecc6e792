from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from urllib.parse import quote, unquote, urlsplit


@dataclass(frozen=True)
class Resource:
    """Identity of a file-like resource: ``scheme://authority/path``."""
    scheme: str
    path: str
    authority: str = ""

    @classmethod
    def parse(cls, uri: str) -> "Resource":
        parts = urlsplit(uri)
        if not parts.scheme:
            return cls.from_path(uri)
        return cls(scheme=parts.scheme.lower(), path=unquote(parts.path) or "/", authority=parts.netloc)

    @classmethod
    def from_path(cls, path: str | Path) -> "Resource":
        p = Path(path).expanduser().absolute()
        return cls(scheme="file", path=p.as_posix())

    @property
    def extension(self) -> str:
        """Suffix of the last path segment including the dot, or ''."""
        return PurePosixPath(self.path).suffix

    def is_equal_or_under(self, other: "Resource") -> bool:
        if self.scheme != other.scheme or self.authority != other.authority:
            return False
        if self.path == other.path:
            return True
        prefix = other.path if other.path.endswith("/") else other.path + "/"
        return self.path.startswith(prefix)

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}{quote(self.path)}"
