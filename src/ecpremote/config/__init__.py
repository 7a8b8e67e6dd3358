"""Configuration management for ecpremote.

Loads and validates YAML-based configuration with Pydantic models.
Supports environment variable overrides for the device address.
"""

from ecpremote.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
