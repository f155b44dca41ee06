# app/ticket/routes.py
from fastapi import APIRouter, Depends, Request, Response, status

from app.core.config import Settings
from app.core.errors import InvalidTicketID
from app.ticket import services as ticket_service
from app.ticket.schemas import CreateTicketResponse, Ticket
from app.ticket.store import KitchenStore

router = APIRouter(prefix="/ticket", tags=["Tickets"])

UNSUPPORTED_METHODS = ["HEAD", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def get_store(request: Request) -> KitchenStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def request_body(request: Request) -> bytes:
    return await request.body()


@router.get("/{ticket_id:path}", response_model=Ticket)
def get(ticket_id: str, store: KitchenStore = Depends(get_store)):
    return ticket_service.get_ticket(store, ticket_service.parse_ticket_id(ticket_id))


@router.get("", include_in_schema=False)
def get_without_id():
    raise InvalidTicketID("missing ticket ID")


# The method alone picks the handler, so POST is taken on every /ticket path.
@router.post("/", response_model=CreateTicketResponse, status_code=status.HTTP_202_ACCEPTED)
@router.post("", response_model=CreateTicketResponse, status_code=status.HTTP_202_ACCEPTED, include_in_schema=False)
@router.post(
    "/{path:path}",
    response_model=CreateTicketResponse,
    status_code=status.HTTP_202_ACCEPTED,
    include_in_schema=False,
)
def create(body: bytes = Depends(request_body), store: KitchenStore = Depends(get_store)):
    payload = ticket_service.ticket_from_request_body(body)
    return CreateTicketResponse(id=ticket_service.create_ticket(store, payload))


@router.api_route("", methods=UNSUPPORTED_METHODS, include_in_schema=False)
@router.api_route("/{path:path}", methods=UNSUPPORTED_METHODS, include_in_schema=False)
def unsupported(settings: Settings = Depends(get_app_settings)):
    # Nothing is written for other methods unless asked to be strict about it.
    if settings.REJECT_UNSUPPORTED_METHODS:
        return Response(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": "GET, POST"},
        )
    return Response(status_code=status.HTTP_200_OK)
