import os

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///threadboard.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tokens are issued by the identity service; we only verify them.
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-change-me-in-production")

    COMMENT_BODY_MAX_LENGTH = _env_int("COMMENT_BODY_MAX_LENGTH", 2000)
    POST_TITLE_MAX_LENGTH = _env_int("POST_TITLE_MAX_LENGTH", 200)

    GRAPHIQL_ENABLED = _env_bool("GRAPHIQL_ENABLED", False)
