from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import List
from uuid import UUID
import logging

from pinochle_api.domain.repository import GameRepositoryError
from pinochle_api.models.schema_models import GameSchema
from pinochle_api.models.schemas import GameData


class ReadData:
    @staticmethod
    async def read_game_data(game_id: UUID, session: AsyncSession) -> GameSchema | None:
        """Read game data from database

        Args:
            game_id (UUID): To identify the game

        Returns:
            GameSchema | None: Stored game, or None if the game does not exist
        """
        try:
            stmt = select(GameData).where(GameData.game_id == game_id)
            result = await session.execute(stmt)
            result = result.scalars().first()

            if result is None:
                return None

            return GameSchema.model_validate(result.game_data)
        except (SQLAlchemyError, ValidationError) as e:
            logging.error(f"Failed to read game data: {e}")
            raise GameRepositoryError(f"Failed to read game {game_id}") from e

    @staticmethod
    async def read_all_game_data(session: AsyncSession) -> List[GameSchema]:
        """Read every stored game, oldest first"""
        try:
            stmt = select(GameData).order_by(GameData.created_at)
            result = await session.execute(stmt)
            return [
                GameSchema.model_validate(row.game_data)
                for row in result.scalars().all()
            ]
        except (SQLAlchemyError, ValidationError) as e:
            logging.error(f"Failed to read game data: {e}")
            raise GameRepositoryError("Failed to read games") from e


class CreateData:
    @staticmethod
    async def add_game_data(game: GameSchema, session: AsyncSession) -> None:
        """Add a new game row to the session. The caller owns the transaction.

        Args:
            game (GameSchema): Game to store
        """
        session.add(
            GameData(
                game_id=game.game_id,
                game_state=game.game_state.value,
                current_dealer=game.current_dealer.value,
                game_data=game.model_dump(mode="json"),
            )
        )


class UpdateData:
    @staticmethod
    async def upsert_game_data_no_commit(game: GameSchema, session: AsyncSession) -> None:
        """Insert the game, or overwrite the stored row if it already exists.

        NOTE: Does not commit; call inside session.begin().

        Args:
            game (GameSchema): Whole game value to store
        """
        stmt = select(GameData).where(GameData.game_id == game.game_id)
        result = await session.execute(stmt)
        result = result.scalars().first()

        if result is None:
            await CreateData.add_game_data(game, session)
            return

        result.game_state = game.game_state.value
        result.current_dealer = game.current_dealer.value
        result.game_data = game.model_dump(mode="json")
