# Defaults and YAML configuration loading

import logging

import yaml

from dnamatch.errors import ConfigError

logger = logging.getLogger(__name__)

# Upper bound on the number of nucleotides read from a single source
MAX_SEQUENCE_LENGTH = 512000

# Karp-Rabin modulus: the largest signed 32-bit integer (2^31 - 1)
MOD = 2147483647

DEFAULT_CONFIG = {
    "max_length": MAX_SEQUENCE_LENGTH,
    "modulus": MOD,
    "log_level": "INFO",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(path=None) -> dict:
    """
    Returns the default configuration, overridden by the YAML file at `path`.
    :param path: Optional path to a YAML mapping, e.g.

        max_length: 100000
        modulus: 1000003
        log_level: DEBUG
    """
    conf = dict(DEFAULT_CONFIG)
    if path is None:
        return conf

    try:
        with open(path, 'r') as f:
            user_conf = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Could not read config file {path}. {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file {path} is not valid YAML. {e}") from e

    if user_conf is None:
        return conf
    if not isinstance(user_conf, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(user_conf).__name__}")

    conf.update(user_conf)
    validate_config(conf)
    logger.debug("Loaded configuration from %s: %s", path, conf)
    return conf


def validate_config(conf: dict):
    unknown = set(conf) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}. Available: {list(DEFAULT_CONFIG.keys())}")

    for key in ("max_length", "modulus"):
        value = conf[key]
        # bool is an int subclass, but `max_length: yes` is never intended
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")

    if conf["modulus"] < 2:
        raise ConfigError(f"'modulus' must be greater than 1, got {conf['modulus']!r}")

    level = str(conf["log_level"]).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"'log_level' must be one of {list(_LOG_LEVELS)}, got {conf['log_level']!r}")
    conf["log_level"] = level
