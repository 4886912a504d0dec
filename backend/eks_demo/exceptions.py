from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import traceback
import uuid
from eks_demo.core.logging import get_logger


def error_payload(code: str, message: str, details=None, error_id: str | None = None):
    """Error body used for 400/500 responses.

    404s keep the framework's ``{"detail": "Not Found"}`` shape instead.
    """
    out = {
        "error": {
            "code": code,
            "message": message,
            "details": details,
        }
    }
    if error_id:
        out["error"]["error_id"] = error_id
    return out


def install_exception_handlers(app):
    log = get_logger("eks_demo.exceptions")

    @app.exception_handler(StarletteHTTPException)
    async def http_exc_handler(request: Request, exc: StarletteHTTPException):
        # A known path with the wrong method is just another unknown route
        if exc.status_code in (404, 405):
            log.debug("Not found: %s %s", request.method, request.url.path)
            return JSONResponse({"detail": "Not Found"}, status_code=404)
        log.warning(
            "HTTPException %s %s -> %s: %s",
            request.method, request.url.path, exc.status_code, exc.detail,
        )
        return JSONResponse(
            {"detail": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        log.info("ValidationError %s %s", request.method, request.url.path)
        return JSONResponse(
            error_payload("validation_error", "Validation failed", jsonable_errors(exc)),
            status_code=400,
        )

    @app.exception_handler(Exception)
    async def unhandled_exc_handler(request: Request, exc: Exception):
        err_id = uuid.uuid4().hex
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        log.error(
            "Unhandled exception [%s] %s %s\nTraceback:\n%s",
            err_id, request.method, request.url.path, tb,
        )
        return JSONResponse(
            error_payload("internal_error", "Internal Server Error", None, error_id=err_id),
            status_code=500,
        )


def jsonable_errors(exc: RequestValidationError):
    from fastapi.encoders import jsonable_encoder
    return jsonable_encoder(exc.errors())
