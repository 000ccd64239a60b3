"""Sort Handler: raw request body → 200 sorted JSON array or 400 empty body.

Invariants:
    - Decode → validate → sort, in that order, with no side effects besides logging
    - Rejected input always yields 400 with an empty body (no error detail leaked)
    - The sort produces a new list; decoded input is never mutated
    - Faults raised while sorting are NOT caught here (global handler → 500)
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse, Response

from sort_service.core.decode_body import decode_json_body
from sort_service.core.errors import NumberArrayError
from sort_service.core.sort_numbers import sort_ascending
from sort_service.core.validate_number_array import (
    Accepted,
    validate_number_array,
)

logger = logging.getLogger(__name__)


def handle_sort(
    raw_body: bytes, content_type: str | None, path: str | None = None,
) -> Response:
    """Run the validated-sort pipeline for a single request."""
    result = validate_number_array(decode_json_body(raw_body, content_type))

    if isinstance(result, Accepted):
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=sort_ascending(result.values),
        )
    return _reject(result.error, path)


def _reject(error: NumberArrayError, path: str | None) -> Response:
    """Log the diagnostic, answer 400 with no body."""
    error.context.path = path
    logger.warning(
        f"Rejected sort request: {error.message}", extra=error.to_log_extra(),
    )
    return Response(status_code=status.HTTP_400_BAD_REQUEST)
