import logging
import math
import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_TIMEOUT = 5.0  # seconds

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)\s*(ms|s|m|h)")
_UNIT_SECONDS = {"ms": 0.001, "s": 1.0, "m": 60.0, "h": 3600.0}


class ConfigError(Exception):
    pass


def parse_duration(value) -> float:
    """
    Converts a timeout value to seconds.

    Accepts plain numbers (already seconds) or human strings such as
    "15s", "100ms", "2m" and "1m 30s".
    """
    if isinstance(value, bool):
        raise ValueError("duration must be a number or a string like '15s'")
    if isinstance(value, (int, float)):
        seconds = float(value)
    elif isinstance(value, str):
        text = value.strip().lower()
        try:
            seconds = float(text)
        except ValueError:
            parts = _DURATION_PART.findall(text)
            if not parts or _DURATION_PART.sub("", text).strip():
                raise ValueError(f"invalid duration: {value!r}")
            seconds = sum(float(amount) * _UNIT_SECONDS[unit] for amount, unit in parts)
    else:
        raise ValueError("duration must be a number or a string like '15s'")

    if not math.isfinite(seconds) or seconds <= 0:
        raise ValueError("duration must be a positive, finite number of seconds")
    return seconds


class UpstreamSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value

    @field_validator("timeout", mode="before")
    @classmethod
    def _parse_timeout(cls, value):
        return parse_duration(value)


class PokeApiSettings(UpstreamSettings):
    base_url: str = "https://pokeapi.co"


class TranslationSettings(UpstreamSettings):
    base_url: str = "https://api.funtranslations.com"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    poke_api: PokeApiSettings = PokeApiSettings()
    translation_api: TranslationSettings = TranslationSettings()
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        # getLevelName maps known names to their numeric level
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level: {value!r}")
        return value


# Environment variable -> (section, key); section None means top level
ENV_OVERRIDES = {
    "POKEAPI_BASE_URL": ("poke_api", "base_url"),
    "POKEAPI_TIMEOUT": ("poke_api", "timeout"),
    "TRANSLATION_API_BASE_URL": ("translation_api", "base_url"),
    "TRANSLATION_API_TIMEOUT": ("translation_api", "timeout"),
    "LOG_LEVEL": (None, "log_level"),
}


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Unable to read config file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file '{path}' is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping at the top level")
    return data


def load_settings(path: str | Path | None = None, environ=None) -> Settings:
    """Builds Settings from an optional YAML file, then applies environment overrides."""
    environ = os.environ if environ is None else environ
    data = _read_yaml(Path(path)) if path is not None else {}

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value is None:
            continue
        if section is None:
            data[key] = value
        else:
            section_data = data.get(section) or {}
            if not isinstance(section_data, dict):
                raise ConfigError(f"'{section}' must be a mapping")
            data[section] = {**section_data, key: value}

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
