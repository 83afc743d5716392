"""Random routes: one video, or a sample without repeats."""

from typing import Optional

from fastapi import APIRouter, Request, Query
from fastapi.responses import JSONResponse

from web.shared import limiter, READ_LIMIT
from web.deps import get_engine, get_catalog_config
from web.helpers import video_list
from utils import parse_int

router = APIRouter()


@router.get("/random")
@limiter.limit(READ_LIMIT)
async def random_video(request: Request):
    """One uniformly chosen video. EmptyCatalog becomes a 500."""
    return JSONResponse(get_engine(request).random_one().to_dict())


@router.get("/random/sample")
@limiter.limit(READ_LIMIT)
async def random_sample(request: Request, n: Optional[str] = Query(None)):
    """Up to n distinct random videos; n defaults to the page size, capped at max_page_size."""
    engine = get_engine(request)
    count = parse_int(n)
    if count is None:
        count = engine.default_page_size
    count = min(count, get_catalog_config(request).max_page_size)
    return JSONResponse(video_list(engine.random_sample(count)))
