"""Logging from config and env.

Levels (inclusive):
- ERROR: generation failures
- WARNING: degraded upstream data (synthetic or partial PR records) and ERROR
- INFO: service messages, WARNING, and ERROR
- DEBUG: debugging, HTTP client chatter and all levels above

Configure via config.yaml (logging.level, logging.format) or env (LOGGING_LEVEL, LOGGING_FORMAT).
"""

import logging

from prtoolbox.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request logs of the GitHub and OpenAI HTTP clients
HTTP_CLIENT_LOGGERS = ("urllib3", "httpx", "openai")


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class PRToolboxLogging:
    """Root logger setup for the CLI and the description service.

    HTTP client loggers are held at WARNING unless the level is DEBUG, so
    INFO output shows one line per degraded fetch rather than every request.
    """

    def __init__(self, config: LoggingConfig) -> None:
        """Resolve level and format from LoggingConfig (YAML + env LOGGING_*)."""
        self.level = _resolve_level(config.level)
        self.format = config.format or DEFAULT_FORMAT

    @property
    def client_level(self) -> int:
        """Level applied to HTTP_CLIENT_LOGGERS."""
        return logging.DEBUG if self.level == logging.DEBUG else logging.WARNING

    def setup(self) -> None:
        """Replace root handlers and quiet the HTTP client loggers."""
        logging.basicConfig(level=self.level, format=self.format, force=True)
        for name in HTTP_CLIENT_LOGGERS:
            logging.getLogger(name).setLevel(self.client_level)
