import os
import pathlib
from enum import Enum
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Environment(str, Enum):
    development = "development"
    testing = "testing"
    production = "production"

    @classmethod
    def from_value(cls, value: str | None) -> "Environment":
        """Read PINOCHLE_ENV; anything unrecognised is treated as production."""
        if value in ("development", "dev"):
            return cls.development
        if value in ("testing", "test"):
            return cls.testing
        return cls.production

    def needs_cors(self) -> bool:
        return self in (Environment.development, Environment.testing)

    def cors_origins(self) -> List[str]:
        if self == Environment.development:
            return ["http://localhost:3000", "http://localhost:5173"]
        if self == Environment.testing:
            return ["http://localhost:3001"]
        return []

    def default_port(self) -> int:
        if self == Environment.development:
            return 3000
        if self == Environment.testing:
            return 3001
        return 8080


file_path = pathlib.Path(__file__).parents[1]
file_path /= "./pinochle_games.sqlite3"
default_database_url = f"sqlite+aiosqlite:///{file_path}"

environment = Environment.from_value(os.getenv("PINOCHLE_ENV"))
storage_backend = os.getenv("PINOCHLE_STORAGE", "memory")  # "memory" or "sql"
database_url = os.getenv("DATABASE_URL", default_database_url)
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
host = os.getenv("HOST", "0.0.0.0")
port = int(os.getenv("PORT") or environment.default_port())

if __name__ == "__main__":
    print(environment, storage_backend, database_url, log_level, host, port)
