# app/ticket/models.py
from sqlalchemy import JSON, Column, Integer

from app.core.database import Base


class TicketRecord(Base):
    __tablename__ = "tickets"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    status = Column(Integer, nullable=False, default=0)
    items = Column(JSON, nullable=False, default=list)
