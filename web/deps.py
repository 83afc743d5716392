"""FastAPI dependency providers: read from app.state, set by create_app()."""

from fastapi import Request

from data.query_engine import CatalogQueryEngine


def get_engine(request: Request) -> CatalogQueryEngine:
    """CatalogQueryEngine shared by every request."""
    return request.app.state.engine


def get_web_config(request: Request):
    """WebConfig instance."""
    return request.app.state.web_config


def get_catalog_config(request: Request):
    """CatalogConfig instance."""
    return request.app.state.catalog_config
