from __future__ import annotations

import os
from typing import Dict, Optional

from pydantic import BaseModel, Field

from .resource import Resource
from .rules import AUTO_GUESS_KEY, FILES_ENCODING_KEY, UTF8


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class EncodingSettings(BaseModel):
    files_encoding: str = os.getenv("FILES_ENCODING", UTF8)
    auto_guess_encoding: bool = _env_flag("FILES_AUTO_GUESS_ENCODING")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # resource uri -> {preference key: value}, e.g. {"file:///legacy": {"files.encoding": "windows1252"}}
    scoped: Dict[str, Dict[str, str]] = Field(default_factory=dict)


SETTINGS = EncodingSettings()


class Preferences:
    """
    Read-only preference source. A value scoped to a folder applies to every
    resource under it; the most specific scope wins, then the global default.
    """

    def __init__(self, settings: Optional[EncodingSettings] = None):
        self.settings = settings or SETTINGS
        self._scopes = [(Resource.parse(uri), values) for uri, values in self.settings.scoped.items()]

    def _defaults(self) -> Dict[str, str]:
        return {
            FILES_ENCODING_KEY: self.settings.files_encoding,
            AUTO_GUESS_KEY: "true" if self.settings.auto_guess_encoding else "false",
        }

    def get(self, key: str, scope: Optional[Resource] = None) -> Optional[str]:
        if scope is not None:
            best: Optional[Resource] = None
            value: Optional[str] = None
            for folder, values in self._scopes:
                if key not in values or not scope.is_equal_or_under(folder):
                    continue
                if best is None or len(folder.path) > len(best.path):
                    best, value = folder, values[key]
            if best is not None:
                return value
        return self._defaults().get(key)

    def get_bool(self, key: str, scope: Optional[Resource] = None) -> bool:
        return (self.get(key, scope) or "").strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["EncodingSettings", "SETTINGS", "Preferences"]
