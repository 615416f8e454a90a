"""Configuration file loading."""

import logging
from pathlib import Path

import yaml

from snipcheck.config.settings import Settings
from snipcheck.languages import parse_language
from snipcheck.models import Category

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".snipcheck.yaml", ".snipcheck.yml", "snipcheck.yaml", "snipcheck.yml"]


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  if not path.exists():
    raise FileNotFoundError(f"Config file not found: {path}")

  logger.debug("Loading config from %s", path)
  with open(path) as f:
    data = yaml.safe_load(f) or {}

  return _parse_config(data)


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings."""
  if "language" in data:
    data["language"] = parse_language(str(data["language"]))

  # "skip: [security]" is shorthand for disabling categories
  if "skip" in data:
    categories = dict(data.get("categories") or {})
    for name in data.pop("skip") or []:
      categories[Category(name).value] = False
    data["categories"] = categories

  return Settings(**data)
