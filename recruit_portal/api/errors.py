"""Application-wide error handlers: every error body is {"detail": "..."}."""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def describe_validation_error(errors: list) -> str:
    """One readable sentence for the first failing field."""
    if not errors:
        return "Invalid input data"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    message = first.get("msg", "Invalid value")
    # Custom validators report "Value error, <message>"
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{'.'.join(loc)}: {message}" if loc else message


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exc_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        payload = {"detail": describe_validation_error(errors), "errors": jsonable_encoder(errors)}
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=payload)
