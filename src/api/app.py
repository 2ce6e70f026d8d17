import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.libs.validation import validation_error_details

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    error_dict = {"code": code, "message": message}
    if details is not None:
        error_dict["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error_dict})


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} {request.method} {request.url.path}")
    return _error_response(
        exc.status_code, exc.base_error.code, exc.base_error.message, exc.base_error.details
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error: {request.method} {request.url.path}")
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Request validation failed",
        validation_error_details(exc.errors()),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error_response(exc.status_code, "NOT_FOUND", "Route not found")
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return _error_response(exc.status_code, "METHOD_NOT_ALLOWED", "Method not allowed")
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


def create_app(ApplicationConfig) -> FastAPI:
    production = ApplicationConfig.ENVIRONMENT == "production"

    async def handle_server_error(request: Request, exc: ServerError):
        logger.error(f"Server error: {exc.base_error.code}")
        message = "Internal server error" if production else exc.base_error.message
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, exc.base_error.code, message
        )

    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        message = "An unexpected error occurred" if production else str(exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", message)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_SCHEMA:
            from src.depends import create_schema

            await create_schema()
        yield

    app = FastAPI(title="Data Brain API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
            request.state.request_id = request_id
            started = time.perf_counter()
            response = await call_next(request)
            duration_ms = (time.perf_counter() - started) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                f"{request.method} {request.url.path} {response.status_code} "
                f"{duration_ms:.1f}ms request_id={request_id}"
            )
            return response

    from src.api.routes import (
        admin,
        batch,
        columns,
        file_refs,
        health_check,
        relations,
        rows,
        select_options,
        tables,
        tenant,
        views,
        workspaces,
    )

    prefix = ApplicationConfig.API_PREFIX

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])
    app.include_router(tenant.router, prefix=prefix, tags=["Tenant"])
    app.include_router(workspaces.router, prefix=prefix, tags=["Workspaces"])
    app.include_router(tables.router, prefix=prefix, tags=["Tables"])
    app.include_router(columns.router, prefix=prefix, tags=["Columns"])
    app.include_router(rows.router, prefix=prefix, tags=["Rows"])
    app.include_router(views.router, prefix=prefix, tags=["Views"])
    app.include_router(select_options.router, prefix=prefix, tags=["Select Options"])
    app.include_router(relations.router, prefix=prefix, tags=["Relations"])
    app.include_router(file_refs.router, prefix=prefix, tags=["File References"])
    app.include_router(batch.router, prefix=prefix, tags=["Batch"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
