import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shop_common.exceptions import APIException, InvalidInputError, NotFoundError

HTTP_422 = 422


def validation_error_body(exc: RequestValidationError) -> dict:
    """Build the error envelope for a request that failed schema validation."""
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return {
        "error": {
            "code": "validation_error",
            "message": "Request validation error",
            "status_code": HTTP_422,
            "context": {"errors": errors}
        }
    }


def register_exception_handlers(app: FastAPI, logger: logging.Logger) -> None:
    """
    Configure global exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
        logger: Service logger the handlers report through
    """

    async def handle_api_exception(request: Request, exc: APIException) -> JSONResponse:
        if isinstance(exc, NotFoundError):
            logger.info(f"Resource not found: {exc.detail}")
        elif isinstance(exc, InvalidInputError):
            logger.warning(f"Invalid input: {exc.detail}")
        else:
            logger.error(f"API Exception: {exc.detail}")

        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    async def handle_validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=HTTP_422, content=validation_error_body(exc))

    async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "internal_server_error",
                    "message": "An unexpected error occurred",
                    "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                    "context": {}
                }
            }
        )

    app.add_exception_handler(APIException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)
