import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

PROVIDERS = ("anthropic", "openai")

DEFAULT_MODELS = {
    "anthropic": "claude-3-5-sonnet-20241022",
    "openai": "gpt-4o-mini",
}

API_KEY_VARS = {
    "anthropic": "ANTHROPIC_API_KEY",
    "openai": "OPENAI_API_KEY",
}


# ---------- LLM ----------
@dataclass
class LLMConfig:
    api_key: str
    provider: str = "anthropic"
    model: str = DEFAULT_MODELS["anthropic"]
    max_tokens: int = 1000
    max_retries: int = 0


# ---------- MCP ----------
@dataclass
class MCPConfig:
    client_name: str = "mcp-client-cli"
    client_version: str = "1.0.0"
    # forward the parent environment so FAKER_* settings reach the server
    inherit_env: bool = True


# ---------- Logging ----------
@dataclass
class LogConfig:
    level: str = "WARNING"
    fmt: str = "console"


# ---------- AppConfig ----------
@dataclass
class AppConfig:
    llm: LLMConfig
    mcp: MCPConfig = field(default_factory=MCPConfig)
    log: LogConfig = field(default_factory=LogConfig)


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from e


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build the application config from the environment (and ``.env``).

    Raises ConfigurationError when the selected provider has no API key.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    provider = env.get("LLM_PROVIDER", "anthropic").strip().lower()
    if provider not in PROVIDERS:
        raise ConfigurationError(f"LLM_PROVIDER must be one of {PROVIDERS}, got {provider!r}")

    key_var = API_KEY_VARS[provider]
    api_key = env.get(key_var)
    if not api_key:
        raise ConfigurationError(f"{key_var} is not set. Please set it in .env or environment variables.")

    llm = LLMConfig(
        api_key=api_key,
        provider=provider,
        model=env.get("MODEL_NAME") or DEFAULT_MODELS[provider],
        max_tokens=_int(env, "MAX_TOKENS", 1000),
        max_retries=_int(env, "LLM_MAX_RETRIES", 0),
    )
    log = LogConfig(
        level=env.get("LOG_LEVEL", "WARNING"),
        fmt=env.get("LOG_FORMAT", "console"),
    )
    return AppConfig(llm=llm, log=log)
