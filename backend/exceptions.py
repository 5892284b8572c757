import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from utils.config import MissingCredentialError
from utils.constant import MISSING_API_KEY_ERROR

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        message = f"Method {request.method} Not Allowed"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"⚠️ Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body", "details": jsonable_errors(exc)},
    )


async def missing_credential_exception_handler(request: Request, exc: MissingCredentialError):
    logger.error(f"❌ {request.url.path} requested but AZURE_OPENAI_API_KEY is not set")
    return JSONResponse(status_code=500, content={"error": MISSING_API_KEY_ERROR})


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
