from __future__ import annotations

from fastapi import FastAPI

from room import __version__
from room.api.endpoints import health, metrics, rooms, scenarios, speech_acts
from room.api.middleware.error_shaping import SafeErrorMiddleware
from room.api.middleware.request_context import RequestContextMiddleware

app = FastAPI(
    title="Room Hypothesis API",
    version=__version__,
)

# ------------------------------------------------------------
# Middleware stack
# Starlette reverses add_middleware order: the LAST call is the OUTERMOST wrapper.
#   SafeErrorMiddleware -> RequestContext -> handler
# ------------------------------------------------------------
app.add_middleware(RequestContextMiddleware)
app.add_middleware(SafeErrorMiddleware)

app.include_router(rooms.router)
app.include_router(speech_acts.router)
app.include_router(scenarios.router)
app.include_router(health.router)
app.include_router(metrics.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
