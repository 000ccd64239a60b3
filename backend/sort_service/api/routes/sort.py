"""Sort Route: POST /sort.

Invariants:
    - Body read raw: validation happens in the pipeline, not in FastAPI's body parsing
    - Bodies over settings.max_body_bytes raise PayloadTooLargeError (413) before decoding
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from sort_service.config import Settings
from sort_service.core.errors import ErrorContext, PayloadTooLargeError
from sort_service.services.handle_sort import handle_sort

router = APIRouter(tags=["sort"])


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (see create_app)."""
    return request.app.state.settings


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Read the request body, aborting once it grows past limit bytes."""
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(
            int(declared), limit, ErrorContext(path=request.url.path),
        )
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(
                len(body), limit, ErrorContext(path=request.url.path),
            )
    return bytes(body)


@router.post("/sort", response_class=Response)
async def sort_numbers(
    request: Request, settings: Settings = Depends(get_app_settings),
) -> Response:
    """Sort a JSON array of numbers ascending. 400 with empty body on invalid input."""
    raw = await read_limited_body(request, settings.max_body_bytes)
    return handle_sort(
        raw, request.headers.get("content-type"), request.url.path,
    )
