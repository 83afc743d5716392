"""Search route: title substring match with exact-id short-circuit."""

from fastapi import APIRouter, Request, Query
from fastapi.responses import JSONResponse

from web.shared import limiter, SEARCH_LIMIT
from web.deps import get_engine
from web.helpers import video_list

router = APIRouter()


@router.get("/search")
@limiter.limit(SEARCH_LIMIT)
async def search_videos(
    request: Request,
    q: str = Query(""),
    exact_id: str = Query("", alias="id"),
):
    """Videos whose title contains q; an exact id match ends the scan.

    Both parameters empty returns an empty list.
    """
    results = get_engine(request).search(query=q, exact_id=exact_id)
    return JSONResponse(video_list(results))
