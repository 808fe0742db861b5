"""Document upload API"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from semsearch import IngestResult, SearchEngine
from semsearch.errors import IngestFailureReason
from web.core.context import get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ingest", tags=["ingest"])

SERVER_FAULTS = {IngestFailureReason.EMBEDDING_FAILED, IngestFailureReason.INTERNAL}


@router.post("", response_model=IngestResult)
async def ingest_document(
    file: UploadFile | None = File(None),
    engine: SearchEngine = Depends(get_engine)
):
    """Upload one document and index it."""
    filename = file.filename if file else None
    data = await file.read() if file else None

    logger.info(f"Ingest request: {filename} ({len(data) if data is not None else 0} bytes)")
    result = await run_in_threadpool(engine.ingest_file, filename, data)

    if result.success:
        status_code = 200
    elif result.reason in SERVER_FAULTS:
        status_code = 500
    else:
        status_code = 400

    return JSONResponse(
        status_code=status_code,
        content=result.model_dump(by_alias=True, mode="json"),
    )
