from __future__ import annotations

import logging
from datetime import datetime, timezone
from time import perf_counter
from typing import Any

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from pydantic import BaseModel, Field

from gsapforge.config.runtime_config import configure_logging, load_settings
from gsapforge.gateway.app.security import enforce_http_auth
from gsapforge.tools.dispatcher import call_tool, list_tools
from gsapforge.versioning import project_version

logger = logging.getLogger("gsapforge.gateway")

ERROR_STATUS = {
    "validation_error": 422,
    "unknown_tool": 404,
    "internal_error": 500,
}

REQUEST_COUNTER = Counter(
    "gsapforge_gateway_http_requests_total",
    "Total gateway HTTP requests",
    ["method", "path", "status"],
)
REQUEST_LATENCY = Histogram(
    "gsapforge_gateway_http_latency_seconds",
    "Gateway request latency",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)
TOOL_CALLS = Counter(
    "gsapforge_tool_calls_total",
    "Tool calls by outcome",
    ["tool", "outcome"],
)


class ToolCallRequest(BaseModel):
    arguments: dict[str, Any] = Field(default_factory=dict)


configure_logging()

app = FastAPI(title="GSAP Forge Gateway", version=project_version())

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def security_and_metrics(request: Request, call_next):  # type: ignore[override]
    started = perf_counter()
    status_code = 500
    try:
        enforce_http_auth(request)
        response = await call_next(request)
        status_code = response.status_code
        return response
    except HTTPException as exc:
        status_code = exc.status_code
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
    finally:
        duration_s = perf_counter() - started
        REQUEST_COUNTER.labels(method=request.method, path=request.url.path, status=str(status_code)).inc()
        REQUEST_LATENCY.labels(method=request.method, path=request.url.path).observe(duration_s)


def _enforce_argument_size(arguments: dict[str, Any]) -> None:
    max_chars = load_settings().max_request_chars
    for key, value in arguments.items():
        if isinstance(value, str) and len(value) > max_chars:
            raise HTTPException(
                status_code=422,
                detail={"error": "argument_too_long", "field": key, "max_chars": max_chars},
            )


@app.get("/health")
def health() -> dict:
    return {
        "status": "ok",
        "service": "gsapforge",
        "version": project_version(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/metrics")
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/v1/tools")
def tools() -> dict:
    return {"tools": list_tools()}


@app.post("/v1/tools/{name}")
def invoke_tool(name: str, req: ToolCallRequest) -> dict:
    _enforce_argument_size(req.arguments)
    result = call_tool(name, req.arguments)
    if result.is_error:
        code = result.error_code or "internal_error"
        TOOL_CALLS.labels(tool=name, outcome=code).inc()
        raise HTTPException(
            status_code=ERROR_STATUS.get(code, 500),
            detail={"error": code, "tool": name, "message": result.text},
        )
    TOOL_CALLS.labels(tool=name, outcome="ok").inc()
    return result.to_payload(name)
