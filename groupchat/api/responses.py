"""Response & Body Helpers — the one JSON writer every handler shares.

Invariants:
    - Every response body is JSON with Content-Type application/json
    - read_json_body never raises: malformed, empty, over-nested or non-object bodies become {}
"""

import json
import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def json_response(status_code: int, payload: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=payload)


async def read_json_body(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object, falling back to {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError):
        logger.debug("Malformed JSON body treated as empty", extra={"path": request.url.path})
        return {}
    if not isinstance(data, dict):
        return {}
    return data
