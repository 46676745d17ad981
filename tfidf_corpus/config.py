"""YAML configuration with built-in defaults."""

import copy
import logging
from pathlib import Path

import yaml

from tfidf_corpus.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "logging": {
        "level": "INFO",
    },
    "storage": {
        "database": ":memory:",
    },
    "corpus": {
        "seed_documents": [],
    },
}


def deep_merge(base, override):
    """Recursively merge override into a copy of base."""
    if isinstance(base, dict) and isinstance(override, dict):
        result = dict(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value
        return result
    return override


def load_config(path=None, overrides=None):
    """Load configuration from a YAML file and apply overrides.

    Args:
        path: Optional YAML file. It must exist when given.
        overrides: Optional dict merged last.

    Returns:
        Configuration dict, always containing every default key.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError("Config file not found at: %s" % config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError("Error parsing YAML file %s: %s" % (config_path, e)) from e
        if not isinstance(loaded, dict):
            raise ConfigurationError("Config file %s must contain a mapping" % config_path)
        config = deep_merge(config, loaded)
        logger.info("Loaded configuration from %s", config_path)

    if overrides:
        config = deep_merge(config, overrides)

    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            raise ConfigurationError("Config section %r must be a mapping" % section)
    seeds = config["corpus"].get("seed_documents") or []
    if not isinstance(seeds, list) or not all(isinstance(s, str) for s in seeds):
        raise ConfigurationError("corpus.seed_documents must be a list of strings")
    config["corpus"]["seed_documents"] = seeds
    return config
