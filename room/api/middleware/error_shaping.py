from __future__ import annotations

import logging
import traceback
import uuid
from typing import Callable, Optional, Tuple, Type

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from room.api.middleware.request_context import REQUEST_ID_HEADER
from room.core.errors import (
    ActionRejected,
    AmbiguousReferent,
    NoReferent,
    RoomError,
    ScenarioError,
    TermDecodeError,
)

log = logging.getLogger("room.errors")

# First match wins; subclasses before their bases.
ROOM_ERROR_STATUS: Tuple[Tuple[Type[RoomError], int], ...] = (
    (TermDecodeError, 400),
    (NoReferent, 404),
    (AmbiguousReferent, 409),
    (ActionRejected, 409),
    (ScenarioError, 422),
    (RoomError, 422),
)


def status_for(exc: RoomError) -> int:
    for cls, status in ROOM_ERROR_STATUS:
        if isinstance(exc, cls):
            return status
    return 422


def _request_id(request: Request) -> str:
    rid: Optional[str] = getattr(request.state, "request_id", None) or request.headers.get(REQUEST_ID_HEADER)
    return rid or str(uuid.uuid4())


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Outermost guard for errors an endpoint did not turn into an HTTPException.

    - RoomError becomes a 4xx with the error kind and message
    - anything else becomes a bare 500; the traceback is only logged
    - both carry the request id in the body and the X-Request-Id header
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except RoomError as e:
            rid = _request_id(request)
            status = status_for(e)
            log.warning("%s rid=%s path=%s status=%d: %s", type(e).__name__, rid, request.url.path, status, e)
            payload = {"detail": str(e), "error": type(e).__name__, "request_id": rid}
            return JSONResponse(status_code=status, content=payload, headers={REQUEST_ID_HEADER: rid})
        except Exception as e:
            rid = _request_id(request)
            log.error(
                "Unhandled error: %s rid=%s path=%s\n%s",
                str(e),
                rid,
                request.url.path,
                traceback.format_exc(),
            )
            payload = {"detail": "Internal Server Error", "request_id": rid}
            return JSONResponse(status_code=500, content=payload, headers={REQUEST_ID_HEADER: rid})
