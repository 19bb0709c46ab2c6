import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pinochle_api import load_settings
from pinochle_api.error_handlers import register_error_handlers
from pinochle_api.load_settings import Environment
from pinochle_api.routers import game
from pinochle_api.services.game_lock_manager import GameLockManager
from pinochle_api.services.game_repository import (
    InMemoryGameRepository,
    SqlGameRepository,
)
from pinochle_api.services.game_service import GameService

logging.basicConfig(level=load_settings.log_level)


def create_app(
    storage_backend: str = load_settings.storage_backend,
    database_url: str = load_settings.database_url,
    environment: Environment = load_settings.environment,
) -> FastAPI:
    """Build the API with the chosen storage backend ("memory" or "sql")."""
    if storage_backend not in ("memory", "sql"):
        raise ValueError(f"Unknown storage backend: {storage_backend}")

    @asynccontextmanager
    async def lifespan(app):
        """Create the repository and service; the schema is created for sql storage."""
        if storage_backend == "sql":
            repository = SqlGameRepository(database_url)
            await repository.create_tables()
        else:
            repository = InMemoryGameRepository()
        app.state.game_service = GameService(repository, GameLockManager())
        logging.info(
            f"Start Server: environment={environment.value}, storage={storage_backend}"
        )
        try:
            yield
        finally:
            if storage_backend == "sql":
                await repository.dispose()
            logging.info("Stop Server")

    app = FastAPI(title="Pinochle Scorekeeper", lifespan=lifespan)
    if environment.needs_cors():
        app.add_middleware(
            CORSMiddleware,
            allow_origins=environment.cors_origins(),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    register_error_handlers(app)
    app.include_router(game.game_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=load_settings.host, port=load_settings.port)
