"""
Soundshelf API Dependencies
Request-scoped accessors for the injected catalog, settings and stamped version
"""

import json
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from ..core.catalog import CatalogRegistry
from ..core.config import Settings
from ..core.envelope import error_envelope
from ..core.pagination import parse_int_param, parse_int_text


def get_catalog(request: Request) -> CatalogRegistry:
    return request.app.state.catalog


def get_config(request: Request) -> Settings:
    return request.app.state.config


def get_api_version(request: Request) -> str:
    """Version stamped by ApiVersionMiddleware, falling back to configuration"""
    version = getattr(request.state, "api_version", None)
    if version:
        return version
    return request.app.state.config.API_VERSION


def parse_id(raw: str) -> Optional[int]:
    """Path id parsing; anything that is not an integer matches nothing"""
    return parse_int_text(raw)


def page_params(request: Request, page: Optional[str], limit: Optional[str]):
    """(page, limit) with configured defaults for missing/non-numeric values"""
    config = get_config(request)
    return (
        parse_int_param(page, config.DEFAULT_PAGE),
        parse_int_param(limit, config.DEFAULT_LIMIT),
    )


def error_response(message: str, version: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_envelope(message, version))


class PrettyJSONResponse(JSONResponse):
    """Indented JSON body for ?pretty requests"""

    def render(self, content) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def wants_pretty(request: Request) -> bool:
    """?pretty, with or without a value"""
    return "pretty" in request.query_params
