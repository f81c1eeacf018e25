import logging
import os

from dotenv import load_dotenv

load_dotenv()

SETTINGS_PATH = os.getenv("OGMETA_SETTINGS", "settings.toml")

# Storage backend: "memory", "sqlite" or "yaml". Overrides [storage] in settings.toml when set.
STORAGE_BACKEND = os.getenv("OGMETA_STORAGE", "")
DB_PATH = os.getenv("OGMETA_DB_PATH", "./data/post_meta.sqlite3")
YAML_PATH = os.getenv("OGMETA_YAML_PATH", "./data/post_meta.yaml")

# Non-empty secret enables nonce checks on save
NONCE_SECRET = os.getenv("OGMETA_NONCE_SECRET", "")

LOG_LEVEL = os.getenv("OGMETA_LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
