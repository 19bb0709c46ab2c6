from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from pinochle_api.domain.errors import PinochleError
from pinochle_api.domain.game import Game


class GameRepositoryError(PinochleError):
    """The game store could not be read or written."""


class GameRepository(ABC):
    """Storage for Game values keyed by game id.

    Implementations translate games into their own durable form; callers
    serialize writers per game id.
    """

    @abstractmethod
    async def find_all(self) -> List[Game]:
        ...

    @abstractmethod
    async def find_by_id(self, game_id: UUID) -> Optional[Game]:
        ...

    @abstractmethod
    async def save(self, game: Game) -> None:
        ...
