"""Security Headers — response hardening applied to every route.

Invariants:
    - Every response carries the headers in SECURITY_HEADERS
    - Existing headers set by a route are never overwritten
"""

from fastapi import FastAPI, Request

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self'; script-src 'self'; style-src 'self' 'unsafe-inline'; "
        "frame-ancestors 'none'; upgrade-insecure-requests"
    ),
    "X-Content-Type-Options": "nosniff",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=(), payment=()",
    "Strict-Transport-Security": "max-age=63072000; includeSubDomains; preload",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def register_security_headers(app: FastAPI) -> None:
    """Attach the header-setting HTTP middleware to the app."""

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response
