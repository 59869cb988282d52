"""Sites Route — the single JSON endpoint for the site list.

Invariants:
    - One path (settings.sites_path) accepts every listed method; verbs without a
      handler reach the service and fail there with "method not implemented"
    - Success: 200 with the JSON-encoded Site or list of Sites
    - Every response carries Access-Control-Allow-Origin: *

Design Decisions:
    - Router built by a function, path passed in: no module-level registration
    - Raw Request instead of a body model: decoding errors must be 500, not 422
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.cors import ALLOW_ALL_ORIGINS
from app.api.dependencies import get_site_store
from app.core.repository_protocols import SiteRepository
from app.schemas.site import Site
from app.services.handle_sites import handle_sites

SITE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def build_sites_router(path: str = "/sites") -> APIRouter:
    """Router serving the sites endpoint at ``path``."""
    router = APIRouter(tags=["sites"])

    @router.api_route(path, methods=SITE_METHODS)
    async def sites(
        request: Request, store: SiteRepository = Depends(get_site_store),
    ):
        result = await handle_sites(request, store)
        return JSONResponse(content=encode(result), headers=ALLOW_ALL_ORIGINS)

    return router


def encode(result: Site | list[Site]) -> dict | list[dict]:
    if isinstance(result, list):
        return [site.to_document() for site in result]
    return result.to_document()
