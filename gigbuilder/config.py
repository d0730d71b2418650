"""Runtime settings loaded from the environment and an optional .env file."""

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

DEFAULT_CATALOG_FILES = ["songs.json", "songs_extra_200_real_titles.json"]


class ConfigError(Exception):
    """Raised when settings from the environment are invalid."""


class Settings(BaseModel):
    catalog_dir: str = "."
    catalog_files: list[str] = DEFAULT_CATALOG_FILES
    database_path: str = "data/gigbuilder.sqlite"
    set_size: int = 15

    def db_path(self) -> Path:
        return Path(self.database_path).expanduser()

    def catalog_paths(self) -> list[Path]:
        base = Path(self.catalog_dir).expanduser()
        return [base / name for name in self.catalog_files]


def _split_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


@lru_cache
def get_settings() -> Settings:
    load_dotenv()

    values: dict = {}
    if os.getenv("CATALOG_DIR"):
        values["catalog_dir"] = os.environ["CATALOG_DIR"]
    if os.getenv("CATALOG_FILES"):
        values["catalog_files"] = _split_list(os.environ["CATALOG_FILES"])
    if os.getenv("DATABASE_PATH"):
        values["database_path"] = os.environ["DATABASE_PATH"]
    if os.getenv("SET_SIZE"):
        values["set_size"] = os.environ["SET_SIZE"]
    try:
        return Settings(**values)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]).upper() for err in e.errors())
        raise ConfigError(f"Invalid settings: {fields}") from e
