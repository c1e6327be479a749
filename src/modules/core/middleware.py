import uuid
from contextvars import ContextVar
from typing import Awaitable, Callable, Union

import structlog
from asgiref.sync import iscoroutinefunction, markcoroutinefunction
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

GetResponse = Callable[[HttpRequest], Union[HttpResponse, Awaitable[HttpResponse]]]


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line, and is returned to the
    client via the X-Request-ID response header.

    Works under both WSGI and ASGI: when the next handler is a coroutine
    the middleware marks itself as one and awaits it.
    """

    sync_capable = True
    async_capable = True

    def __init__(self, get_response: GetResponse) -> None:
        self.get_response = get_response
        self._is_async = iscoroutinefunction(get_response)
        if self._is_async:
            markcoroutinefunction(self)

    def __call__(self, request: HttpRequest):
        if self._is_async:
            return self.__acall__(request)
        cid = self._bind(request)
        response = self.get_response(request)
        return self._finish(request, response, cid)

    async def __acall__(self, request: HttpRequest) -> HttpResponse:
        cid = self._bind(request)
        response = await self.get_response(request)
        return self._finish(request, response, cid)

    def _bind(self, request: HttpRequest) -> str:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )
        return cid

    def _finish(
        self, request: HttpRequest, response: HttpResponse, cid: str
    ) -> HttpResponse:
        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
        )
        response["X-Request-ID"] = cid
        return response
