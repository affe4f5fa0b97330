import logging
from typing import Any, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# path parameters that fail to parse as an id
PATH_PARAM_MESSAGES = {
    "task_id": "Valid task ID is required",
    "item_id": "Valid item ID is required",
}


def validation_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = tuple(error.get("loc", ()))
    if len(loc) >= 2 and loc[0] == "path" and loc[1] in PATH_PARAM_MESSAGES:
        return PATH_PARAM_MESSAGES[loc[1]]

    # messages raised by our own validators
    ctx_error = error.get("ctx", {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)

    field = ".".join(str(part) for part in loc[1:])
    return f"{field}: {error['msg']}" if field else error["msg"]


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # malformed input is a 400 here, not FastAPI's default 422
    message = validation_error_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"detail": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)


def validate_body(model: type[ModelT], payload: Any) -> ModelT:
    """
    Validate a request body that the endpoint read as raw JSON.

    Used where a lookup has to happen before the body is checked. Failures
    are re-raised as RequestValidationError so they reach the same 400
    handler as FastAPI's own body validation.
    """
    try:
        return model.model_validate({} if payload is None else payload)
    except ValidationError as exc:
        errors = [
            {**error, "loc": ("body", *error["loc"])} for error in exc.errors()
        ]
        raise RequestValidationError(errors) from exc
