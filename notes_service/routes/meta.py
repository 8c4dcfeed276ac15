"""
Notes Service — Route Table
=============================

What:  Exposes the app's routes as plain data (method, path, summary).
Why:   Documentation renderers other than the built-in /docs page can consume
       the table without depending on FastAPI internals.
"""

from typing import List

from fastapi import APIRouter, FastAPI, Request
from fastapi.routing import APIRoute

from notes_service.schemas.note import RouteInfo

router = APIRouter(tags=["Meta"])


def describe_routes(app: FastAPI) -> List[RouteInfo]:
    """
    Build the route table for every documented API route of `app`.

    One row per (method, path). HEAD and OPTIONS are left out.
    """
    rows: List[RouteInfo] = []
    for route in app.routes:
        if not isinstance(route, APIRoute) or not route.include_in_schema:
            continue
        for method in sorted(route.methods - {"HEAD", "OPTIONS"}):
            rows.append(
                RouteInfo(method=method, path=route.path, summary=route.summary or "")
            )
    return rows


@router.get(
    "/routes",
    response_model=List[RouteInfo],
    summary="List the HTTP routes this service exposes",
)
async def list_routes(request: Request) -> List[RouteInfo]:
    return describe_routes(request.app)
