import os
from typing import Mapping, Optional

from dotenv import load_dotenv

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsError(ValueError):
    pass


def _env_bool(raw: Optional[str], default: bool = False) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self, env: Optional[Mapping[str, str]] = None):
        if env is None:
            load_dotenv()
            env = os.environ
        self.LOCALE = env.get("FAKER_LOCALE", "en_US")
        seed = env.get("FAKER_SEED", "").strip()
        try:
            self.SEED = int(seed) if seed else None
        except ValueError as e:
            raise SettingsError(f"FAKER_SEED must be an integer, got {seed!r}") from e
        self.LENIENT_TYPES = _env_bool(env.get("FAKER_LENIENT_TYPES"))
        # the server's stderr is the client's terminal, so stay quiet by default
        self.LOG_LEVEL = env.get("LOG_LEVEL", "WARNING").strip().upper()
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise SettingsError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got {self.LOG_LEVEL!r}")
        self.LOG_FORMAT = env.get("LOG_FORMAT", "json")
