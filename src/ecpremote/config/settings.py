"""Configuration management for ecpremote.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/ecpremote.yaml")
ECP_PORT: int = 8060


class DeviceConfig(BaseModel):
    host: str = Field(default="", description="Device address; must be set before sending")
    port: int = Field(default=ECP_PORT, ge=1, le=65535)
    timeout_ms: int = Field(default=5000, gt=0)


class ParsingConfig(BaseModel):
    limit: int = Field(default=3, gt=0, description="Maximum integers accepted per parse")


class SequencerConfig(BaseModel):
    pacing_ms: int = Field(default=120, ge=0, description="Delay between sequential keypresses")
    press_select_after_each: bool = Field(default=False)


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for ecpremote.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "ECPREMOTE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    device: DeviceConfig = Field(default_factory=DeviceConfig)
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    sequencer: SequencerConfig = Field(default_factory=SequencerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Values present in the YAML file win over ECPREMOTE_* variables, which
    win over .env entries and defaults. ROKU_IP fills ``device.host`` when
    the YAML leaves it unset.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data: dict = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _apply_env_overrides(yaml_data: dict) -> None:
    """Apply overrides from non-prefixed environment variables."""
    roku_ip = os.environ.get("ROKU_IP", "").strip()
    if not roku_ip:
        return

    device = yaml_data.get("device") or {}
    if not device.get("host"):
        device["host"] = roku_ip
    yaml_data["device"] = device
