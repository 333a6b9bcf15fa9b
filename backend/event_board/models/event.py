"""Event ORM model."""
from sqlalchemy import Column, BigInteger, String, Text, DateTime, JSON

from event_board.database import Base


class Event(Base):
    __tablename__ = "events"

    # Assigned from IdCounter, never by the database.
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    owner = Column(String(255), nullable=False)
    event_title = Column(Text, nullable=False, default="")
    event_description = Column(Text, nullable=False, default="")
    event_card_imgurl = Column(Text, nullable=False, default="")
    event_location = Column(Text, nullable=False, default="")
    attendees = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)
