# File: app/core/middleware.py

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


# ---------- MIDDLEWARE ----------

async def enable_cors(request: Request, call_next):
    """
    Add CORS headers to every response.

    Preflight (OPTIONS) requests are answered here with an empty 200 and
    never reach the inner layers or the router. Errors no exception
    handler dealt with become a JSON 500 here, so they carry the CORS
    headers too.
    """
    settings = request.app.state.settings

    if request.method == "OPTIONS":
        response = Response(status_code=status.HTTP_200_OK)
    else:
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=True)
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error"},
            )

    response.headers["Access-Control-Allow-Origin"] = settings.cors_allow_origin
    response.headers["Access-Control-Allow-Methods"] = ", ".join(settings.cors_allow_methods)
    response.headers["Access-Control-Allow-Headers"] = ", ".join(settings.cors_allow_headers)
    return response


async def json_content_type(request: Request, call_next):
    response = await call_next(request)
    response.headers["Content-Type"] = JSON_MEDIA_TYPE
    return response


def setup_middleware(app: FastAPI) -> None:
    """
    Install the middleware chain.

    Starlette runs the most recently added middleware first, so CORS ends
    up wrapping the content-type layer, which wraps the router.
    """
    app.middleware("http")(json_content_type)
    app.middleware("http")(enable_cors)


# ---------- EXCEPTION HANDLERS ----------

def _malformed_request(request: Request, errors: list) -> JSONResponse:
    logger.warning(f"Malformed request {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


def setup_exception_handlers(app: FastAPI) -> None:

    # path parameters (and anything else FastAPI validates itself)
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _malformed_request(request, exc.errors())

    # request bodies, decoded by app.api.deps.read_user_payload
    @app.exception_handler(ValidationError)
    async def body_validation_handler(request: Request, exc: ValidationError):
        return _malformed_request(request, exc.errors(include_url=False))

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Database error"},
        )
