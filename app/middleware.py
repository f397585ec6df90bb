# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HTTP middleware for request IDs, security headers, the deploy rate limit and metrics."""
import json
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings
from app.metrics import DEPLOY_RATE_LIMITED, HTTP_ERRORS, REQUEST_COUNT, REQUEST_LATENCY
from app.services.rate_limiter import SlidingWindowRateLimiter

SKIP_PATHS = ("/health", "/metrics", "/openapi.json", "/docs", "/redoc")
RATE_LIMITED_PATHS = ("/deploy",)
RATE_LIMIT_MESSAGE = "Terlalu banyak percobaan, coba lagi nanti"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
}

_rate_limiter = SlidingWindowRateLimiter(settings.DEPLOY_RATE_LIMIT, settings.DEPLOY_RATE_WINDOW)


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


class DeployRateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if (
            not settings.rate_limit_enabled
            or request.method != "POST"
            or request.url.path not in RATE_LIMITED_PATHS
        ):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        allowed, remaining, retry_after = _rate_limiter.is_allowed(client_ip)

        if not allowed:
            DEPLOY_RATE_LIMITED.labels(client_ip=client_ip).inc()
            return Response(
                content=json.dumps({"error": RATE_LIMIT_MESSAGE}),
                status_code=429, media_type="application/json",
                headers={
                    "Retry-After": str(retry_after),
                    "X-RateLimit-Limit": str(settings.DEPLOY_RATE_LIMIT),
                    "X-RateLimit-Remaining": "0",
                },
            )
        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(settings.DEPLOY_RATE_LIMIT)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration = time.time() - start
        path = request.url.path
        if path not in SKIP_PATHS:
            endpoint = "/projects/{name}" if path.startswith("/projects/") else path
            REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status=str(response.status_code)).inc()
            REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(duration)
            if response.status_code >= 400:
                HTTP_ERRORS.labels(method=request.method, endpoint=endpoint, status=str(response.status_code)).inc()
        return response
