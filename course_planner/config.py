# === config.py ===
import json
import logging

DEFAULT_CONFIG = {
    "bucket_count": 20,
    "delimiter": ",",
    "request_timeout": 10,
    "log_level": "WARNING",
}


def load_config(path=None):
    """Defaults, overlaid with the JSON object in ``path`` if one is given."""
    config = dict(DEFAULT_CONFIG)
    if path:
        with open(path) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")
        for key in DEFAULT_CONFIG:
            if key in data:
                config[key] = data[key]
    validate_config(config)
    return config


def validate_config(config):
    bucket_count = config["bucket_count"]
    if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count < 1:
        raise ValueError(f"bucket_count must be a positive integer, got {bucket_count!r}")
    if not isinstance(config["delimiter"], str) or not config["delimiter"]:
        raise ValueError("delimiter must be a non-empty string")
    if not isinstance(config["request_timeout"], (int, float)) or config["request_timeout"] <= 0:
        raise ValueError(f"request_timeout must be positive, got {config['request_timeout']!r}")
    if not isinstance(config["log_level"], str) or not isinstance(log_level_number(config["log_level"]), int):
        raise ValueError(f"log_level must be a logging level name, got {config['log_level']!r}")


def log_level_number(name):
    return logging.getLevelName(name.upper())
