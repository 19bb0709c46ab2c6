"""Game storage backends.

- Only this module (and crud.py) touches DB sessions.
- Each backend stores the whole Game value; find_by_id returns an equal value.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from pinochle_api.converter import DataConverter
from pinochle_api.crud import ReadData, UpdateData
from pinochle_api.db import create_engine, create_session_factory
from pinochle_api.domain.game import Game
from pinochle_api.domain.repository import GameRepository, GameRepositoryError
from pinochle_api.models.schemas import Base


class InMemoryGameRepository(GameRepository):
    """Keeps games in a dict for the lifetime of the process."""

    def __init__(self):
        self.games: Dict[UUID, Game] = {}

    async def find_all(self) -> List[Game]:
        return list(self.games.values())

    async def find_by_id(self, game_id: UUID) -> Optional[Game]:
        return self.games.get(game_id)

    async def save(self, game: Game) -> None:
        self.games[game.id] = game


class SqlGameRepository(GameRepository):
    """Stores one row per game through the SQLAlchemy async ORM."""

    def __init__(self, database_url: str, engine: AsyncEngine | None = None):
        self.engine: AsyncEngine = engine or create_engine(database_url)
        self.Session = create_session_factory(self.engine)
        self.data_converter = DataConverter()

    async def create_tables(self) -> None:
        async with self.engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()

    async def find_all(self) -> List[Game]:
        async with self.Session() as session:
            games = await ReadData.read_all_game_data(session)
        return [self.data_converter.convert_gameschema_to_game(game) for game in games]

    async def find_by_id(self, game_id: UUID) -> Optional[Game]:
        async with self.Session() as session:
            game_data = await ReadData.read_game_data(game_id, session)
        if game_data is None:
            return None
        return self.data_converter.convert_gameschema_to_game(game_data)

    async def save(self, game: Game) -> None:
        """Insert or overwrite the game in one transaction."""
        game_data = self.data_converter.convert_game_to_gameschema(game)
        try:
            async with self.Session() as session:
                async with session.begin():
                    await UpdateData.upsert_game_data_no_commit(game_data, session)
        except SQLAlchemyError as e:
            logging.error(f"Failed to save game data: {e}")
            raise GameRepositoryError(f"Failed to save game {game.id}") from e
