# app/ticket/schemas.py
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TicketStatus(IntEnum):
    PENDING = 0
    ACCEPTED = 1
    COMPLETED = 2


class Ticket(BaseModel):
    id: int = Field(default=0, alias="ID")
    status: TicketStatus = Field(default=TicketStatus.PENDING, alias="Status")
    items: list[str] = Field(default_factory=list, alias="Items")

    model_config = ConfigDict(populate_by_name=True)


_WIRE_NAMES = {"id": "ID", "status": "Status", "items": "Items"}


class TicketCreate(BaseModel):
    """Body of a create request.

    ID and Status are allowed so a full ticket can be posted back, but they are
    never used. Field names match in any casing; anything else in the body is
    rejected.
    """

    id: int | None = Field(default=None, alias="ID")
    status: int | None = Field(default=None, alias="Status")
    items: list[str] | None = Field(default=None, alias="Items")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", strict=True)

    @model_validator(mode="before")
    @classmethod
    def fold_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # later keys win when two spellings of a field are sent
        return {_WIRE_NAMES.get(key.lower(), key): value for key, value in data.items()}


class CreateTicketResponse(BaseModel):
    id: int = Field(alias="ID")

    model_config = ConfigDict(populate_by_name=True)
