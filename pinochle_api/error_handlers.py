import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pinochle_api.domain.errors import (
    GameHandError,
    GamePhaseError,
    HandError,
    NoCurrentHandError,
    PinochleError,
)
from pinochle_api.domain.repository import GameRepositoryError
from pinochle_api.models.response_models import ErrorDetailModel, ErrorResponse
from pinochle_api.services.game_service import CurrentHandNotFoundError, GameNotFoundError

# checked in order; the first matching class wins
ERROR_STATUS = [
    (GameNotFoundError, status.HTTP_404_NOT_FOUND),
    (CurrentHandNotFoundError, status.HTTP_404_NOT_FOUND),
    (NoCurrentHandError, status.HTTP_404_NOT_FOUND),
    (GamePhaseError, status.HTTP_400_BAD_REQUEST),
    (GameHandError, status.HTTP_400_BAD_REQUEST),
    (HandError, status.HTTP_400_BAD_REQUEST),
    (GameRepositoryError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def error_status(error: PinochleError) -> int:
    """Map a service error to its HTTP status code"""
    for error_class, status_code in ERROR_STATUS:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def pinochle_error_handler(request: Request, error: PinochleError) -> JSONResponse:
    status_code = error_status(error)
    if status_code >= 500:
        logging.error(f"{request.method} {request.url.path}: {error}")
    else:
        logging.info(f"{request.method} {request.url.path} rejected: {error}")
    body = ErrorResponse(error=ErrorDetailModel(code=status_code, message=str(error)))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PinochleError, pinochle_error_handler)
