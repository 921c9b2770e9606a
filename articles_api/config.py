import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings:
    """Runtime settings read from the environment (and an optional ``.env``)."""

    def __init__(self, host: str, port: int, log_level: str, seed_demo: bool):
        self.host = host
        self.port = port
        self.log_level = log_level
        self.seed_demo = seed_demo


def _env_flag(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


def get_settings() -> Settings:
    return Settings(
        host=os.getenv("ARTICLES_API_HOST", DEFAULT_HOST),
        port=int(os.getenv("ARTICLES_API_PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("ARTICLES_API_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        seed_demo=_env_flag("ARTICLES_API_SEED_DEMO", True),
    )
