import asyncio
from uuid import UUID

import pytest

from pinochle_api.load_settings import Environment
from pinochle_api.main import create_app
from pinochle_api.services.game_lock_manager import GameLockManager

GAME_ID = UUID("00000000-0000-7000-8000-000000000001")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("dev", Environment.development),
        ("development", Environment.development),
        ("test", Environment.testing),
        ("production", Environment.production),
        (None, Environment.production),
        ("staging", Environment.production),
    ],
)
def test_environment_from_value(value, expected):
    assert Environment.from_value(value) == expected


def test_environment_ports_and_cors():
    assert Environment.development.default_port() == 3000
    assert Environment.testing.default_port() == 3001
    assert Environment.production.default_port() == 8080
    assert Environment.development.needs_cors()
    assert not Environment.production.needs_cors()
    assert Environment.production.cors_origins() == []


def test_unknown_storage_backend():
    with pytest.raises(ValueError):
        create_app(storage_backend="redis")


def test_lock_is_shared_per_game():
    async def run():
        lock_manager = GameLockManager()
        first = await lock_manager.get_lock(GAME_ID)
        second = await lock_manager.get_lock(GAME_ID)
        assert first is second
        await lock_manager.cleanup(GAME_ID)
        assert GAME_ID in lock_manager.locks
        await lock_manager.cleanup(GAME_ID)
        assert GAME_ID not in lock_manager.locks

    asyncio.run(run())


def test_held_lock_is_not_cleaned_up():
    async def run():
        lock_manager = GameLockManager()
        lock = await lock_manager.get_lock(GAME_ID)
        async with lock:
            await lock_manager.cleanup(GAME_ID)
            assert GAME_ID in lock_manager.locks

    asyncio.run(run())
