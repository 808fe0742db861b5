"""Document management API"""

from fastapi import APIRouter, Depends, HTTPException

from semsearch import DocumentRecord, SearchEngine, StoreStats
from web.core.context import get_engine

router = APIRouter(prefix="/api", tags=["documents"])


@router.get("/documents", response_model=list[DocumentRecord])
def list_documents(engine: SearchEngine = Depends(get_engine)):
    """List uploaded documents in upload order."""
    return engine.list_documents()


@router.delete("/documents/{name}", response_model=StoreStats)
def remove_document(name: str, engine: SearchEngine = Depends(get_engine)):
    """Remove a document and all of its chunks."""
    if not engine.remove_document(name):
        raise HTTPException(status_code=404, detail=f"Document '{name}' not found")
    return engine.stats()


@router.delete("/documents", response_model=StoreStats)
def clear_documents(engine: SearchEngine = Depends(get_engine)):
    """Remove every document."""
    engine.clear()
    return engine.stats()


@router.get("/stats", response_model=StoreStats)
def get_stats(engine: SearchEngine = Depends(get_engine)):
    """Document and chunk counts plus remaining capacity."""
    return engine.stats()
