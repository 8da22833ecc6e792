from typing import Optional

from fastapi import FastAPI, File, HTTPException, Query, UploadFile

from .catalog import list_encodings
from .errors import BinaryContent, UnsupportedEncoding
from .models import DetectionResult, EncodingsResponse, HealthResponse, ResourceEncoding, TranscodeResponse
from .resource import Resource
from .rules import UTF8
from .service import EncodingService
from .transcode import transcode_bytes

app = FastAPI(
    title="text-encoding-service",
    description="Encoding detection, resolution and transcoding for text files",
    version="0.1.0",
)

service = EncodingService()


def _upload_resource(file: UploadFile) -> Optional[Resource]:
    if not file.filename:
        return None
    return Resource(scheme="untitled", path="/" + file.filename)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/encodings", response_model=EncodingsResponse)
def encodings(decodable: bool = Query(False, description="Hide write-only variants such as utf8bom")):
    return {"encodings": list_encodings(include_encode_only=not decodable)}


@app.post("/detect", response_model=DetectionResult)
async def detect(
    file: UploadFile = File(...),
    auto_guess: Optional[bool] = Query(None),
):
    raw = await file.read()
    return await service.detect_encoding(raw, auto_guess=auto_guess, resource=_upload_resource(file))


@app.post("/transcode", response_model=TranscodeResponse)
async def transcode(
    file: UploadFile = File(...),
    target: str = Query(UTF8),
    bom: bool = Query(False),
    auto_guess: Optional[bool] = Query(None),
):
    raw = await file.read()
    try:
        return await transcode_bytes(
            service,
            raw,
            ResourceEncoding(encoding=target, has_bom=bom),
            resource=_upload_resource(file),
            auto_guess=auto_guess,
        )
    except UnsupportedEncoding as e:
        raise HTTPException(status_code=422, detail=str(e))
    except BinaryContent as e:
        raise HTTPException(status_code=422, detail=str(e))
