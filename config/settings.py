"""
Configuration management for Crypto Ticker.
Handles loading/creating the token list file.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_TOKENS = ["bitcoin", "ethereum", "solana"]

# Key written to new files; the lowercase form is accepted when reading.
TOKENS_KEY = "Tokens"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid configuration file {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class TickerConfig:
    """Application configuration."""
    tokens: List[str] = field(default_factory=lambda: list(DEFAULT_TOKENS))

    def to_dict(self) -> dict:
        return {TOKENS_KEY: list(self.tokens)}

    @classmethod
    def from_dict(cls, data: Any, path: Path) -> "TickerConfig":
        """
        Decode a parsed JSON document.

        Args:
            data: Parsed JSON value
            path: File the value came from, used in error messages

        Returns:
            Decoded configuration

        Raises:
            ConfigError: If the document does not match {"Tokens": [str, ...]}
        """
        if not isinstance(data, dict):
            raise ConfigError(path, "expected a JSON object")

        if TOKENS_KEY in data:
            raw_tokens = data[TOKENS_KEY]
        elif TOKENS_KEY.lower() in data:
            raw_tokens = data[TOKENS_KEY.lower()]
        else:
            raise ConfigError(path, f"missing '{TOKENS_KEY}' field")

        if not isinstance(raw_tokens, list):
            raise ConfigError(path, f"'{TOKENS_KEY}' must be a list")

        tokens = []
        for index, token in enumerate(raw_tokens):
            if not isinstance(token, str) or not token.strip():
                raise ConfigError(path, f"token #{index} must be a non-empty string")
            tokens.append(token.strip())

        return cls(tokens=tokens)


def default_app_dir() -> Path:
    """Per-user directory holding the config file and logs."""
    if os.name == 'nt':  # Windows
        return Path(os.environ.get('APPDATA', '')) / 'crypto-ticker'
    return Path.home() / '.config' / 'crypto-ticker'


class ConfigLoader:
    """Reads the token list, creating the file with defaults if it is missing."""

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is None:
            config_file = default_app_dir() / 'config.json'

        self.config_file = Path(config_file)

    def load(self) -> TickerConfig:
        """
        Load configuration from file.

        Returns:
            Loaded configuration, or the defaults if the file was just created

        Raises:
            ConfigError: If the file exists but is unreadable or malformed
        """
        if not self.config_file.exists():
            logger.info(f"Config file not found, creating defaults: {self.config_file}")
            config = TickerConfig()
            self.save(config)
            return config

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(self.config_file, f"malformed JSON ({e})") from e
        except OSError as e:
            raise ConfigError(self.config_file, f"cannot read file ({e})") from e

        config = TickerConfig.from_dict(data, self.config_file)
        logger.info(f"Loaded {len(config.tokens)} tokens from {self.config_file}")
        return config

    def save(self, config: TickerConfig) -> None:
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)


def load_tokens(path: Optional[Path] = None) -> List[str]:
    """Load the ordered token list from ``path`` (or the default location)."""
    return ConfigLoader(path).load().tokens
