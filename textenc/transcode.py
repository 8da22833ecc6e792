"""
Re-encode uploaded bytes into a chosen target encoding.

Rules:
- Detect the source encoding (BOM, zero-byte scan, optional statistical guess).
- Binary content is refused, never decoded.
- Without a detected encoding, the source is read with the encoding resolved
  for the resource (overrides, then preferences, then utf8).
- Malformed input decodes to U+FFFD and is counted in the report.
- The target encoding must exist; a BOM is written only when asked for.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Any, Dict, Optional

from .errors import BinaryContent, UnsupportedEncoding
from .logging_setup import logger
from .models import ResourceEncoding
from .resource import Resource
from .rules import UTF8_WITH_BOM
from .service import EncodingService


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


async def transcode_bytes(
    service: EncodingService,
    raw: bytes,
    target: ResourceEncoding,
    resource: Optional[Resource] = None,
    auto_guess: Optional[bool] = None,
) -> Dict[str, Any]:
    """Returns a dict matching the API's ``TranscodeResponse`` envelope."""
    if not service.exists(target.encoding):
        raise UnsupportedEncoding(target.encoding)

    detection = await service.detect_encoding(raw, auto_guess=auto_guess, resource=resource)
    if detection.seems_binary:
        logger.info("transcode_refused_binary", resource=str(resource) if resource else None, bytes=len(raw))
        raise BinaryContent("Content looks binary; refusing to decode it as text")

    if detection.encoding:
        decode_used = service.codec.normalize(detection.encoding)
        source_of_encoding = "detected"
    elif resource is not None:
        decode_used = service.get_encoding_for_resource(resource)
        source_of_encoding = "resolved"
    else:
        decode_used = service.codec.normalize(None)
        source_of_encoding = "default"

    has_bom = target.has_bom or target.encoding == UTF8_WITH_BOM
    target_name = service.codec.canonical_name(target.encoding)
    effective = ResourceEncoding(encoding=target_name, has_bom=has_bom)

    text = service.decode(raw, decode_used)
    out = service.encode(text, effective)

    report = {
        "bytes_in": len(raw),
        "bytes_out": len(out),
        "chars": len(text),
        "source_bom": service.detect_encoding_by_bom(raw) is not None,
        "encoding_source": source_of_encoding,
        "replacement_chars": text.count("\ufffd"),
        "lossless": service.decode(out, target_name) == text,
    }
    logger.info(
        "transcoded",
        decoded_with=decode_used,
        target=target_name,
        has_bom=has_bom,
        bytes_in=report["bytes_in"],
        bytes_out=report["bytes_out"],
    )

    return {
        "source": detection.model_dump(),
        "decoded_with": decode_used,
        "transcoded": {
            "sha256": _sha256_hex(out),
            "encoding": target_name,
            "has_bom": has_bom,
            "content_b64": base64.b64encode(out).decode("ascii"),
        },
        "report": report,
    }


__all__ = ["transcode_bytes"]
