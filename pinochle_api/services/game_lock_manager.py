from asyncio import Lock
from typing import Dict
from uuid import UUID


class GameLockManager:
    def __init__(self):
        self.locks: Dict[UUID, Lock] = {}  # one Lock per game_id
        self.users: Dict[UUID, int] = {}  # callers between get_lock and cleanup
        self.lock = Lock()  # protects self.locks and self.users

    async def get_lock(self, game_id: UUID) -> Lock:
        """Get the Lock that serializes writers of the specified game_id

        Every call must be paired with cleanup once the caller is done.

        Args:
            game_id (UUID): ID to identify this game

        Returns:
            Lock: Lock of the specified game_id
        """
        async with self.lock:
            if game_id not in self.locks:
                self.locks[game_id] = Lock()
            self.users[game_id] = self.users.get(game_id, 0) + 1
            return self.locks[game_id]

    async def cleanup(self, game_id: UUID):
        """Release one use of the Lock; it is deleted when nobody holds or awaits it

        Args:
            game_id (UUID): ID to identify this game
        """
        async with self.lock:
            if game_id not in self.locks:
                return
            users = self.users.get(game_id, 0) - 1
            if users > 0:
                self.users[game_id] = users
                return
            self.users.pop(game_id, None)
            if not self.locks[game_id].locked():
                del self.locks[game_id]
