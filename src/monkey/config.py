"""
Monkey Configuration
====================

Settings for the command-line tools and the REPL. Configuration can
come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of this)

The lexer itself has no settings; it only needs its source text.
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os

from monkey.errors import ConfigError


OUTPUT_FORMATS = ("text", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class MonkeyConfig:
    """
    Configuration for the Monkey tools.

    Attributes:
        prompt: Prompt written by the REPL before each line (default: ">> ")
        output_format: Token listing format for ``monkey lex`` (text, json)
        strict: Treat illegal characters as fatal errors (default: False)
        log_level: Logging level name used by the CLI (default: WARNING)
    """

    prompt: str = ">> "
    output_format: str = "text"
    strict: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "MonkeyConfig":
        """
        Create MonkeyConfig from environment variables.

        Environment variables (all optional):
            MONKEY_PROMPT: REPL prompt
            MONKEY_OUTPUT_FORMAT: "text" or "json"
            MONKEY_STRICT: Boolean (1/0, true/false, yes/no, on/off)
            MONKEY_LOG_LEVEL: Logging level name (e.g., "DEBUG")

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        config = cls()

        if (prompt := os.environ.get("MONKEY_PROMPT")) is not None:
            config.prompt = prompt

        if output_format := os.environ.get("MONKEY_OUTPUT_FORMAT"):
            output_format = output_format.lower()
            if output_format not in OUTPUT_FORMATS:
                raise ConfigError(
                    "MONKEY_OUTPUT_FORMAT", output_format, " or ".join(OUTPUT_FORMATS)
                )
            config.output_format = output_format

        if strict := os.environ.get("MONKEY_STRICT"):
            config.strict = _parse_bool("MONKEY_STRICT", strict)

        if log_level := os.environ.get("MONKEY_LOG_LEVEL"):
            log_level = log_level.upper()
            if not isinstance(logging.getLevelName(log_level), int):
                raise ConfigError("MONKEY_LOG_LEVEL", log_level, "a logging level name")
            config.log_level = log_level

        return config

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.log_level)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(name, value, "a boolean (1/0, true/false, yes/no, on/off)")


# Global default configuration (can be overridden in tests)
_default_config: Optional[MonkeyConfig] = None


def get_default_config() -> MonkeyConfig:
    """
    Get the default configuration.

    Creates from environment variables on first access.
    Can be overridden by calling set_default_config().
    """
    global _default_config
    if _default_config is None:
        _default_config = MonkeyConfig.from_env()
    return _default_config


def set_default_config(config: Optional[MonkeyConfig]) -> None:
    """
    Set the default configuration.

    Passing None discards the current default so the next call to
    get_default_config() reads the environment again.
    """
    global _default_config
    _default_config = config
