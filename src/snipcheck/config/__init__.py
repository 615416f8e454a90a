"""Configuration management."""

from snipcheck.config.loader import load_config
from snipcheck.config.settings import CustomRule, Settings

__all__ = ["CustomRule", "Settings", "load_config"]
