# app/ticket/services.py
import logging
import re

from pydantic import ValidationError

from app.core.errors import InvalidTicket, InvalidTicketID
from app.ticket.schemas import Ticket, TicketCreate, TicketStatus
from app.ticket.store import KitchenStore

logger = logging.getLogger(__name__)

_TICKET_ID = re.compile(r"[+-]?[0-9]+")
_MIN_ID, _MAX_ID = -(2**63), 2**63 - 1


def parse_ticket_id(raw: str) -> int:
    """Parse the path segment after ``/ticket/`` as a signed 64-bit integer."""
    if not _TICKET_ID.fullmatch(raw):
        raise InvalidTicketID(f"invalid ticket ID {raw!r}")
    ticket_id = int(raw)
    if not _MIN_ID <= ticket_id <= _MAX_ID:
        raise InvalidTicketID(f"ticket ID {raw!r} out of range")
    return ticket_id


def ticket_from_request_body(body: bytes) -> TicketCreate:
    try:
        payload = TicketCreate.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidTicket(f"unable to unmarshal ticket JSON, {exc.error_count()} error(s)") from exc

    if payload.items is None:
        raise InvalidTicket("some fields of ticket JSON are empty, cannot persist")
    return payload


def get_ticket(store: KitchenStore, ticket_id: int) -> Ticket:
    return store.get_ticket_by_id(ticket_id)


def create_ticket(store: KitchenStore, payload: TicketCreate) -> int:
    ticket = Ticket(status=TicketStatus.PENDING, items=payload.items)
    ticket_id = store.store_ticket(ticket)
    logger.info("ticket stored", extra={"ticket_id": ticket_id, "items": len(ticket.items)})
    return ticket_id
