"""Search API"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from semsearch import SearchEngine, SearchResponse
from semsearch.errors import EmptyQueryError
from web.core.context import get_engine

router = APIRouter(prefix="/api/search", tags=["search"])


class SearchRequest(BaseModel):
    query: str = ""
    include_answer: bool = False
    top_k: int | None = Field(default=None, gt=0)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


@router.post("", response_model=SearchResponse, response_model_exclude_none=True)
def search(
    req: SearchRequest,
    engine: SearchEngine = Depends(get_engine)
):
    """Rank stored chunks against the query, optionally with an extractive answer."""
    try:
        engine.validate_query(req.query)
    except EmptyQueryError as e:
        return JSONResponse(
            status_code=400,
            content=SearchResponse(message=e.message).model_dump(mode="json", exclude_none=True),
        )

    return engine.search(
        query=req.query,
        include_answer=req.include_answer,
        top_k=req.top_k
    )
