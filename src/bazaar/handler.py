"""Adapter between FastAPI endpoints and (request, response) controllers.

Controllers speak a small Express-like surface: ``req.params``,
``req.body``, ``req.query`` and ``res.status/send/set/json``. The objects
here implement that surface for real requests; the test harness provides
recording doubles with the same shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping

from fastapi import Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

Handler = Callable[[Any, Any], Awaitable[Any]]


@dataclass(frozen=True)
class HandlerRequest:
    params: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)


class HandlerResponse:
    """Collects what a controller sends, then renders it once."""

    def __init__(self) -> None:
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self.body: Any = None

    def status(self, code: int) -> HandlerResponse:
        self.status_code = code
        return self

    def set(self, header: str, value: str) -> HandlerResponse:
        self.headers[header] = value
        return self

    def send(self, body: Any) -> HandlerResponse:
        self.body = body
        return self

    def json(self, body: Any) -> HandlerResponse:
        self.body = body
        return self

    def render(self) -> Response:
        if isinstance(self.body, (bytes, str)):
            media_type = self.headers.pop("Content-Type", None)
            return Response(
                content=self.body,
                status_code=self.status_code,
                headers=self.headers,
                media_type=media_type or "text/html",
            )
        return JSONResponse(
            content=jsonable_encoder(self.body),
            status_code=self.status_code,
            headers=self.headers,
        )


async def dispatch(handler: Handler, request: Request) -> Response:
    """Run a controller against a FastAPI request and render its response."""
    req = HandlerRequest(
        params=dict(request.path_params),
        query=dict(request.query_params),
    )
    res = HandlerResponse()
    await handler(req, res)
    return res.render()
