from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class CatalogEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label_long: str
    label_short: str
    sort_order: int
    encode_only: bool = False
    alias: Optional[str] = None


class ResourceEncoding(BaseModel):
    encoding: str
    has_bom: bool = False


class DetectionResult(BaseModel):
    encoding: Optional[str] = Field(default=None, examples=["utf16le"])
    seems_binary: bool = False

    @model_validator(mode="after")
    def _binary_has_no_encoding(self) -> "DetectionResult":
        if self.seems_binary and self.encoding is not None:
            raise ValueError("binary content cannot carry an encoding")
        return self


class EncodingsResponse(BaseModel):
    encodings: List[CatalogEntry]


class TranscodedContent(BaseModel):
    sha256: str
    encoding: str
    has_bom: bool = False
    content_b64: str


class TranscodeResponse(BaseModel):
    source: DetectionResult
    decoded_with: str
    transcoded: TranscodedContent
    report: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    ok: bool = True
