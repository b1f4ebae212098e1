import logging
import os
import secrets
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    dataset_path: str = "db.json"
    jwt_secret: str = field(default_factory=lambda: secrets.token_urlsafe(32))
    token_ttl_seconds: int = 3600
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    graphql_ide: str = "graphiql"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (and a .env file if present)"""
        load_dotenv()

        secret = os.environ.get("JWT_SECRET")
        if not secret:
            logger.warning("JWT_SECRET is not set, tokens will not survive a restart")
            secret = secrets.token_urlsafe(32)

        return cls(
            dataset_path=os.environ.get("DATASET_PATH", "db.json"),
            jwt_secret=secret,
            token_ttl_seconds=int(os.environ.get("TOKEN_TTL_SECONDS", "3600")),
            cors_origins=_split_origins(os.environ.get("CORS_ORIGINS", "*")),
            graphql_ide=os.environ.get("GRAPHQL_IDE", "graphiql"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )
