"""Per-request id propagation and access logging."""

import time
import uuid

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from registrar.core.logging import get_logger, set_request_id

REQUEST_ID_HEADER = b"x-request-id"


class RequestIDMiddleware:
    """
    Tag each HTTP request with an id and echo it back as ``X-Request-ID``.

    A caller-supplied id is reused so a trace can span the enrollment service
    and the student and course services it calls.
    """

    def __init__(self, app: ASGIApp):
        self.app = app
        self.logger = get_logger(__name__)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers", [])).get(REQUEST_ID_HEADER)
        request_id = incoming.decode("latin1") if incoming else str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        set_request_id(request_id)

        started = time.perf_counter()
        self.logger.info("request.start", method=scope["method"], path=scope["path"])

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (REQUEST_ID_HEADER, request_id.encode("latin1")),
                ]
                self.logger.info(
                    "request.complete",
                    status_code=message.get("status"),
                    duration_ms=int((time.perf_counter() - started) * 1000),
                )
            await send(message)

        await self.app(scope, receive, send_with_request_id)
