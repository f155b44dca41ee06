# app/core/errors.py
import logging

from fastapi import FastAPI, Request, Response, status

logger = logging.getLogger(__name__)


class KitchenError(Exception):
    """Base error of the kitchen service.

    Every error is answered with its ``status_code`` and an empty body.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidTicketID(KitchenError):
    pass


class InvalidTicket(KitchenError):
    pass


class TicketNotFound(KitchenError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, ticket_id: int) -> None:
        self.ticket_id = ticket_id
        super().__init__(f"no ticket with ID = {ticket_id}")


class StorageError(KitchenError):
    # not told apart from a bad request on the wire
    status_code = status.HTTP_400_BAD_REQUEST


async def kitchen_error_handler(request: Request, exc: KitchenError) -> Response:
    logger.info(
        "request rejected",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "reason": str(exc),
        },
    )
    return Response(status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(KitchenError, kitchen_error_handler)
