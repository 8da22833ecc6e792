from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional

from .logging_setup import logger
from .resource import Resource


@dataclass(eq=False)
class EncodingOverride:
    """
    User-declared encoding for resources under ``parent``, with file
    extension ``extension`` (``"py"`` or ``".py"``), or with URI ``scheme``.
    Any one matching criterion is enough.
    """
    encoding: str
    parent: Optional[Resource] = None
    extension: Optional[str] = None
    scheme: Optional[str] = None

    def matches(self, resource: Resource) -> bool:
        if self.parent is not None and resource.is_equal_or_under(self.parent):
            return True
        if self.extension and resource.extension == "." + self.extension.lstrip("."):
            return True
        if self.scheme and self.scheme == resource.scheme:
            return True
        return False


class Disposable:
    """Handle returned by ``OverrideRegistry.register``; disposing twice is a no-op."""

    def __init__(self, registry: "OverrideRegistry", override: EncodingOverride):
        self._registry = registry
        self._override: Optional[EncodingOverride] = override

    @property
    def disposed(self) -> bool:
        return self._override is None

    def dispose(self) -> None:
        override, self._override = self._override, None
        if override is not None:
            self._registry._remove(override)

    def __enter__(self) -> "Disposable":
        return self

    def __exit__(self, *exc) -> None:
        self.dispose()


class OverrideRegistry:
    """Ordered override rules; the first registered rule that matches wins."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._overrides: List[EncodingOverride] = []

    def register(self, override: EncodingOverride) -> Disposable:
        with self._lock:
            self._overrides.append(override)
        logger.debug(
            "encoding_override_registered",
            encoding=override.encoding,
            parent=str(override.parent) if override.parent else None,
            extension=override.extension,
            scheme=override.scheme,
        )
        return Disposable(self, override)

    def _remove(self, override: EncodingOverride) -> None:
        with self._lock:
            for i, existing in enumerate(self._overrides):
                if existing is override:
                    del self._overrides[i]
                    break
            else:
                return
        logger.debug("encoding_override_disposed", encoding=override.encoding)

    def overrides(self) -> List[EncodingOverride]:
        with self._lock:
            return list(self._overrides)

    def __len__(self) -> int:
        with self._lock:
            return len(self._overrides)

    def resolve(self, resource: Resource) -> Optional[str]:
        for override in self.overrides():
            if override.matches(resource):
                return override.encoding
        return None


__all__ = ["EncodingOverride", "Disposable", "OverrideRegistry"]
