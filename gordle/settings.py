import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from .corpus import default_corpus_path
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 6


@dataclass(frozen=True)
class GameSettings:
    corpus_path: Path = field(default_factory=default_corpus_path)
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.seed is not None and self.seed < 0:
            raise ConfigurationError(f"seed must be a non-negative integer, got {self.seed}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ=None):
        """Settings from the GORDLE_* environment variables, defaults for the rest"""
        environ = os.environ if environ is None else environ
        kwargs = {}
        if environ.get("GORDLE_CORPUS"):
            kwargs["corpus_path"] = Path(environ["GORDLE_CORPUS"])
        if environ.get("GORDLE_MAX_ATTEMPTS"):
            kwargs["max_attempts"] = _parse_int("GORDLE_MAX_ATTEMPTS", environ["GORDLE_MAX_ATTEMPTS"])
        if environ.get("GORDLE_SEED"):
            kwargs["seed"] = _parse_int("GORDLE_SEED", environ["GORDLE_SEED"])
        if environ.get("GORDLE_LOG_LEVEL"):
            kwargs["log_level"] = environ["GORDLE_LOG_LEVEL"].upper()
        logger.debug(f"settings from environment: {kwargs}")
        return cls(**kwargs)

    def merge(self, **overrides):
        """Copy with every override that isn't None applied"""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @property
    def level(self):
        return logging.getLevelName(self.log_level.upper())


def _parse_int(name, value):
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None
