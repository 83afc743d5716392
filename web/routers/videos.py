"""Video routes: single lookup + randomized paginated listing."""

from typing import Optional

from fastapi import APIRouter, Request, Query
from fastapi.responses import JSONResponse

from web.shared import limiter, READ_LIMIT
from web.deps import get_engine, get_catalog_config
from web.helpers import video_list
from utils import parse_int

router = APIRouter()


@router.get("/video/{video_id}")
@limiter.limit(READ_LIMIT)
async def get_video(request: Request, video_id: str):
    """One video by id (case-insensitive). VideoNotFound becomes a 404."""
    record = get_engine(request).get_by_id(video_id)
    return JSONResponse(record.to_dict())


@router.get("/videos")
@limiter.limit(READ_LIMIT)
async def list_videos(
    request: Request,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
):
    """A page of a freshly shuffled catalog. Malformed page/limit fall back to defaults."""
    engine = get_engine(request)
    page_n = parse_int(page, 0)
    limit_n = parse_int(limit)
    max_size = get_catalog_config(request).max_page_size
    if limit_n is not None and limit_n > max_size:
        limit_n = max_size
    return JSONResponse(video_list(engine.paginate(page_n, limit_n)))
