import logging
import os
from pathlib import Path

from dotenv import load_dotenv


def load_environment() -> None:
    """
    Load environment variables by profile.
    - development (default): .env
    - production: .env.production
    """
    root_dir = Path(__file__).resolve().parents[1]
    environment = os.getenv("ENVIRONMENT", "development").strip().lower()
    env_filename = ".env.production" if environment == "production" else ".env"
    env_path = root_dir / env_filename

    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    else:
        load_dotenv(override=False)


def _str_to_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


load_environment()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/campus_booking.db")

# Hosting providers may hand out postgres://, SQLAlchemy expects postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql").strip().lower()
DEMO_USERNAME = os.getenv("DEMO_USERNAME", "sarah.chen")
SEED_ON_STARTUP = _str_to_bool(os.getenv("SEED_ON_STARTUP"), default=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
