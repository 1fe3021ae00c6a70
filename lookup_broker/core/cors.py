from typing import Callable
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type"

def cors_headers(origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
    }

class SingleOriginCorsMiddleware(BaseHTTPMiddleware):
    """
    Stamps the same three CORS headers on every response, whether or not the
    browser sent an Origin, and answers OPTIONS on any path with headers only.
    """
    def __init__(self, app, allow_origin: str):
        super().__init__(app)
        self.headers = cors_headers(allow_origin)

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.headers)
        response: Response = await call_next(request)
        response.headers.update(self.headers)
        return response
