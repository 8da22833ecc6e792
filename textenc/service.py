from __future__ import annotations

from typing import Optional, Union

from .codec import CODEC, Codec
from .config import Preferences
from .detect import detect_bom, detect_encoding
from .guess import GuessFn, StatisticalGuesser
from .models import DetectionResult, ResourceEncoding
from .overrides import Disposable, EncodingOverride, OverrideRegistry
from .resolver import EncodingResolver
from .resource import Resource
from .rules import AUTO_GUESS_KEY


class EncodingService:
    """Single entry point for detection, resolution and transcoding."""

    def __init__(
        self,
        preferences: Optional[Preferences] = None,
        guess: Optional[GuessFn] = None,
        codec: Optional[Codec] = None,
    ):
        self.codec = codec or CODEC
        self.preferences = preferences or Preferences()
        self.registry = OverrideRegistry()
        self.resolver = EncodingResolver(self.registry, self.preferences, self.codec)
        self.guesser = StatisticalGuesser(guess, self.codec)

    # -- overrides ---------------------------------------------------------
    def register_override(self, override: EncodingOverride) -> Disposable:
        return self.registry.register(override)

    # -- transcoding -------------------------------------------------------
    def encode(self, text: str, options: Union[ResourceEncoding, str, None] = None) -> bytes:
        if isinstance(options, ResourceEncoding):
            return self.codec.encode(text, options.encoding, options.has_bom)
        return self.codec.encode(text, options)

    def decode(self, data: bytes, encoding: Optional[str] = None) -> str:
        return self.codec.decode(data, encoding)

    def exists(self, encoding: Optional[str]) -> bool:
        return self.codec.exists(encoding)

    # -- resolution --------------------------------------------------------
    def get_encoding_for_resource(self, resource: Union[Resource, str], preferred: Optional[str] = None) -> str:
        return self.resolver.resolve_for_resource(_as_resource(resource), preferred)

    def get_write_encoding(self, resource: Union[Resource, str], preferred: Optional[str] = None) -> ResourceEncoding:
        return self.resolver.encoding_for_write(_as_resource(resource), preferred)

    # -- detection ---------------------------------------------------------
    def detect_encoding_by_bom(self, data: bytes, length: Optional[int] = None) -> Optional[str]:
        return detect_bom(data, length)

    async def detect_encoding(
        self,
        data: bytes,
        length: Optional[int] = None,
        auto_guess: Optional[bool] = None,
        resource: Optional[Resource] = None,
    ) -> DetectionResult:
        if auto_guess is None:
            auto_guess = self.preferences.get_bool(AUTO_GUESS_KEY, resource)
        return await detect_encoding(data, length, auto_guess=auto_guess, guesser=self.guesser)


def _as_resource(resource: Union[Resource, str]) -> Resource:
    return resource if isinstance(resource, Resource) else Resource.parse(resource)


__all__ = ["EncodingService"]
