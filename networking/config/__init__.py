"""Configuration module for loading and accessing networking settings."""

from networking.exceptions import ConfigurationError

from .loader import Config, config

__all__ = ["Config", "ConfigurationError", "config"]
