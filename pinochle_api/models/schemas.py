from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.schema import Column
from sqlalchemy.types import JSON, DateTime, String, Uuid
from uuid6 import uuid7
from datetime import datetime


class Base(DeclarativeBase):
    pass


class GameData(Base):
    __tablename__ = "game_data"
    game_id = Column(Uuid, primary_key=True, default=uuid7)
    game_state = Column(String)
    current_dealer = Column(String)
    # GameSchema dumped in JSON mode: completed hands and current hand included
    game_data = Column(JSON)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)
