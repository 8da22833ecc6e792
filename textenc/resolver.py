from __future__ import annotations

from typing import Optional

from .codec import CODEC, Codec
from .config import Preferences
from .logging_setup import logger
from .models import ResourceEncoding
from .overrides import OverrideRegistry
from .resource import Resource
from .rules import FILES_ENCODING_KEY, UTF8, UTF8_WITH_BOM


class EncodingResolver:
    """
    Picks the encoding of a resource before it is read or written.

    Precedence: a matching override, then the caller's preferred encoding,
    then the ``files.encoding`` preference for the resource. Anything empty
    or unknown to the codec resolves to utf8.
    """

    def __init__(
        self,
        registry: Optional[OverrideRegistry] = None,
        preferences: Optional[Preferences] = None,
        codec: Optional[Codec] = None,
    ):
        self.registry = registry if registry is not None else OverrideRegistry()
        self.preferences = preferences or Preferences()
        self.codec = codec or CODEC

    def _choose(self, resource: Resource, preferred: Optional[str]) -> Optional[str]:
        override = self.registry.resolve(resource)
        if override:
            return override
        if preferred:
            return preferred
        return self.preferences.get(FILES_ENCODING_KEY, resource)

    def _effective(self, resource: Resource, chosen: Optional[str]) -> str:
        if not chosen or not self.codec.exists(chosen):
            logger.info("encoding_fallback_utf8", resource=str(resource), requested=chosen)
            return UTF8
        return self.codec.canonical_name(self.codec.normalize(chosen))

    def resolve_for_resource(self, resource: Resource, preferred: Optional[str] = None) -> str:
        return self._effective(resource, self._choose(resource, preferred))

    def encoding_for_write(self, resource: Resource, preferred: Optional[str] = None) -> ResourceEncoding:
        chosen = self._choose(resource, preferred)
        encoding = self._effective(resource, chosen)
        has_bom = encoding == UTF8 and chosen == UTF8_WITH_BOM
        return ResourceEncoding(encoding=encoding, has_bom=has_bom)


__all__ = ["EncodingResolver"]
