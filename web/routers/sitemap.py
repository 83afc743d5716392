"""Sitemap route."""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from web.shared import limiter, SITEMAP_LIMIT
from web.deps import get_engine, get_web_config
from web.helpers import build_sitemap

router = APIRouter()


@router.get("/sitemap.xml")
@limiter.limit(SITEMAP_LIMIT)
async def sitemap(request: Request):
    """One <url> per video in catalog order."""
    base_url = get_web_config(request).base_url
    xml = build_sitemap(get_engine(request).catalog, base_url)
    return Response(content=xml, media_type="application/xml; charset=utf-8")
