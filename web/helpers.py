"""Shared constants and helper functions used across web routers."""

from typing import Iterable
from urllib.parse import quote
from xml.etree import ElementTree as ET

from data.catalog_store import VideoRecord

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
SITEMAP_CHANGEFREQ = "daily"
SITEMAP_PRIORITY = "0.8"

_ERROR_MESSAGES = {
    "not_found": "Video not found",
    "empty": "No videos available",
    "rate_limited": "Too many requests",
}


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def video_list(records: Iterable[VideoRecord]) -> list[dict]:
    """Serialize records with public field names, preserving order."""
    return [r.to_dict() for r in records]


# ---------------------------------------------------------------------------
# Sitemap
# ---------------------------------------------------------------------------

def video_url(base_url: str, video_id: str) -> str:
    """Public page URL for a video: <base>/video/<quoted id>."""
    return f"{base_url.rstrip('/')}/video/{quote(video_id, safe='')}"


def build_sitemap(records: Iterable[VideoRecord], base_url: str) -> str:
    """Sitemap XML with one <url> per record, in the given order."""
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
    for record in records:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = video_url(base_url, record.id)
        ET.SubElement(url, "changefreq").text = SITEMAP_CHANGEFREQ
        ET.SubElement(url, "priority").text = SITEMAP_PRIORITY
    ET.indent(urlset, space="  ")
    body = ET.tostring(urlset, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
