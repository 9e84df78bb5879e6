"""Configuration loading from YAML and environment.

Secrets (GitHub token, OpenAI API key) are taken from environment variables
or from files (Docker secrets). Never put real tokens in config files
committed to the repo.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so secret resolution can read env/file
_current_env: dict[str, str] = {}


def is_placeholder(value: str) -> bool:
    """True for unfilled template values such as ${VAR} or your-token."""
    return value.startswith("${") or value.startswith("your-")


class GitHubConfig(BaseSettings):
    """GitHub REST API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    timeout: float = Field(default=30, gt=0, description="Per-request timeout in seconds")


class OpenAIConfig(BaseSettings):
    """Chat-completion API settings."""

    model_config = SettingsConfigDict(env_prefix="OPENAI_", extra="ignore")

    api_key: str | None = Field(default=None, description="API key; use env or secret file")
    base_url: str | None = Field(default=None, description="Override for OpenAI-compatible endpoints")
    model: str = Field(default="gpt-3.5-turbo", description="Chat model name")
    max_tokens: int = Field(default=1000, ge=1, description="Maximum output tokens")
    temperature: float = Field(default=0.7, ge=0, le=2, description="Sampling temperature")
    timeout: float = Field(default=60, gt=0, description="Request timeout in seconds")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not is_placeholder(t):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    @property
    def openai_api_key_resolved(self) -> str | None:
        """Resolve OpenAI API key from config, env or Docker secret file."""
        k = self.openai.api_key
        if k and not is_placeholder(k):
            return k
        return _read_secret("OPENAI_API_KEY", "OPENAI_API_KEY_FILE")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE, OPENAI_API_KEY or
    OPENAI_API_KEY_FILE.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    return AppConfig(
        github=GitHubConfig(**(raw.get("github") or {})),
        openai=OpenAIConfig(**(raw.get("openai") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
