"""Single-row table holding the next event id to hand out."""
from sqlalchemy import Column, Integer, BigInteger

from event_board.database import Base

COUNTER_ROW = 1


class IdCounter(Base):
    __tablename__ = "id_counter"

    counter_id = Column(Integer, primary_key=True, default=COUNTER_ROW)
    next_value = Column(BigInteger, nullable=False, default=0)
