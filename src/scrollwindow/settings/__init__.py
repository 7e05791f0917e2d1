"""Configuration schema and validation helpers."""

from .schema import CONFIG_SCHEMA, config_payload, validate_config

__all__ = ["CONFIG_SCHEMA", "config_payload", "validate_config"]
