"""Use cases for running Pinochle games.

- Routers call this module; they never touch the repository directly.
- Every mutating use case holds the game's lock across find -> transform -> save.
- A failed transition raises before save, so the stored game is unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple
from uuid import UUID

from pinochle_api.domain.errors import PinochleError
from pinochle_api.domain.game import Game
from pinochle_api.domain.hand import Hand
from pinochle_api.domain.repository import GameRepository
from pinochle_api.domain.value import Player, Suit
from pinochle_api.services.game_lock_manager import GameLockManager


class GameNotFoundError(PinochleError):
    def __init__(self, game_id: UUID):
        self.game_id = game_id
        super().__init__(f"Game not found: {game_id}")


class CurrentHandNotFoundError(PinochleError):
    def __init__(self, game_id: UUID):
        self.game_id = game_id
        super().__init__(f"No current hand for game: {game_id}")


@dataclass(frozen=True)
class RunningTotal:
    us: int
    them: int


class GameService:
    def __init__(self, repository: GameRepository, lock_manager: GameLockManager | None = None):
        self.repository = repository
        self.lock_manager = lock_manager or GameLockManager()

    async def start_new_game(self, dealer: Player) -> Game:
        game = Game(current_dealer=dealer)
        await self.repository.save(game)
        logging.info(f"Started game {game.id} with dealer {dealer.value}")
        return game

    async def start_new_hand(self, game_id: UUID) -> Game:
        _, game = await self._update(game_id, lambda game: game.start_new_hand())
        logging.info(f"Game {game_id}: dealt first hand, dealer {game.current_dealer.value}")
        return game

    async def record_bid(self, game_id: UUID, player: Player, bid: int) -> Game:
        _, game = await self._update(game_id, lambda game: game.record_bid(player, bid))
        logging.info(f"Game {game_id}: {player.value} bid {bid}")
        return game

    async def declare_trump(self, game_id: UUID, trump: Suit) -> Game:
        _, game = await self._update(game_id, lambda game: game.declare_trump(trump))
        logging.info(f"Game {game_id}: trump declared {trump.value}")
        return game

    async def record_meld(self, game_id: UUID, us_meld: int, them_meld: int) -> Game:
        previous, game = await self._update(
            game_id, lambda game: game.record_meld(us_meld, them_meld)
        )
        logging.info(f"Game {game_id}: meld recorded us={us_meld} them={them_meld}")
        if len(game.completed_hands) > len(previous.completed_hands):
            # the hand was lost at meld and the next one dealt
            self._log_hand_completion(game)
        return game

    async def record_tricks(self, game_id: UUID, us_tricks: int, them_tricks: int) -> Game:
        _, game = await self._update(
            game_id, lambda game: game.record_tricks(us_tricks, them_tricks)
        )
        logging.info(f"Game {game_id}: tricks recorded us={us_tricks} them={them_tricks}")
        self._log_hand_completion(game)
        return game

    async def get_game(self, game_id: UUID) -> Game:
        """Return the game; warns when it is over but no winner can be named."""
        game = await self._find(game_id)
        if game.is_game_complete() and game.winner() is None:
            us_total, them_total = game.running_totals()
            logging.warning(
                f"Game {game_id} is complete with an unresolved tie: {us_total} - {them_total}"
            )
        return game

    async def list_games(self) -> List[Game]:
        return await self.repository.find_all()

    async def get_completed_hands(self, game_id: UUID) -> Tuple[Hand, ...]:
        game = await self._find(game_id)
        return game.completed_hands

    async def get_current_hand(self, game_id: UUID) -> Hand:
        game = await self._find(game_id)
        if game.current_hand is None:
            raise CurrentHandNotFoundError(game_id)
        return game.current_hand

    async def get_running_total(self, game_id: UUID) -> RunningTotal:
        game = await self._find(game_id)
        us_total, them_total = game.running_totals()
        return RunningTotal(us=us_total, them=them_total)

    async def _find(self, game_id: UUID) -> Game:
        game = await self.repository.find_by_id(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    async def _update(
        self, game_id: UUID, transition: Callable[[Game], Game]
    ) -> Tuple[Game, Game]:
        """Apply transition under the game's lock and return (previous, updated)."""
        lock = await self.lock_manager.get_lock(game_id)
        try:
            async with lock:
                game = await self._find(game_id)
                new_game = transition(game)
                await self.repository.save(new_game)
        finally:
            await self.lock_manager.cleanup(game_id)
        return game, new_game

    def _log_hand_completion(self, game: Game) -> None:
        if not game.completed_hands:
            return
        hand = game.completed_hands[-1]
        us_total, them_total = game.running_totals()
        logging.info(
            f"Game {game.id}: hand {hand.id} scored {hand.us_total}/{hand.them_total}, "
            f"running total {us_total}/{them_total}"
        )
        if game.is_game_complete():
            winner = game.winner()
            logging.info(
                f"Game {game.id} complete, winner: {winner.value if winner else 'unresolved'}"
            )
