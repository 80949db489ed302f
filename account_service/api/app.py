from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from account_service.domain.errors import ValidationError
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str, fields=None) -> dict:
    error_dict = {"code": code, "message": message}
    if fields:
        error_dict["fields"] = fields
    return {"error": error_dict}


async def handle_client_error(request: Request, exc: ClientError):
    fields = None
    if isinstance(exc.base_error, ValidationError):
        fields = [{"field": e.field, "message": e.message} for e in exc.base_error.errors]
    body = _error_body(exc.base_error.code, exc.base_error.message, fields)
    logger.warning(f"Client error: {exc.base_error.code} on {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}: {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.base_error.code, "Internal server error"),
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Malformed bodies get the same 400 shape as rule violations
    fields = [
        {"field": str(e["loc"][-1]) if e.get("loc") else "body", "message": e["msg"]}
        for e in exc.errors()
    ]
    logger.warning(f"Client error: VALIDATION_ERROR on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("VALIDATION_ERROR", "Invalid request body", fields),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", "Internal server error"),
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not (
            ApplicationConfig.MAILGUN_API_KEY
            and ApplicationConfig.MAILGUN_DOMAIN
            and ApplicationConfig.MAILGUN_FROM_EMAIL
        ):
            logger.warning("Mailgun is not configured. Email sending will not work.")

        if ApplicationConfig.STORAGE_BACKEND == "database" and ApplicationConfig.DB_AUTO_CREATE:
            from account_service.depends import init_db

            await init_db()
        yield

    app = FastAPI(title="Account Service", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=ApplicationConfig.SESSION_SECRET,
        max_age=ApplicationConfig.SESSION_MAX_AGE,
        same_site="lax",
        https_only=ApplicationConfig.SESSION_HTTPS_ONLY,
    )

    from account_service.api.routes import auth, health_check, user

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])
    app.include_router(user.router, prefix=ApplicationConfig.API_PREFIX, tags=["User"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
