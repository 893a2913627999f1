import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from concessionaria.utils.response import error_response

logger = logging.getLogger(__name__)

KNOWN_ROUTES = [
    "GET /api/veiculos",
    "GET /api/veiculos/:id",
    "POST /api/veiculos",
    "PUT /api/veiculos/:id",
    "DELETE /api/veiculos/:id",
]


class AppException(Exception):
    def __init__(
        self,
        message: str | None = None,
        status_code: int = 400,
        error: str | None = None,
        **extra: Any,
    ):
        super().__init__(message or error)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.extra = extra


def route_not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=error_response("Rota não encontrada", routes=list(KNOWN_ROUTES)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, exc.error, **exc.extra),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Unreadable body on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content=error_response("Corpo da requisição inválido"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods both fall through to the route list
        if exc.status_code in (404, 405):
            return route_not_found_response()
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Erro interno do servidor"),
        )
