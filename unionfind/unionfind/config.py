import os
import logging
from pathlib import Path

import yaml

from .errors import ConfigError

config_path = Path(__file__).parent / "config.yaml"
ENV_VAR = "UNIONFIND_CONFIG"


def _merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def _check_level(level, path):
    if level is None:
        return None
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    name = str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ConfigError(f"Unknown LOGGING level {level!r}", path=str(path))
    return name


def load_config(path=None) -> dict:
    """Load the bundled defaults, overlaid with an optional YAML file.

    Args:
        path: Override file. Falls back to ``$UNIONFIND_CONFIG`` when omitted.

    Returns:
        dict: Configuration with ``EDGES`` and ``LOGGING`` sections.
            ``LOGGING.level`` is a level name, a numeric level or None.

    Raises:
        ConfigError: The override names an unknown logging level.
    """
    with open(config_path, "r") as f:
        cfg = yaml.safe_load(f)

    path = path or os.environ.get(ENV_VAR)
    if path:
        with open(path, "r") as f:
            cfg = _merge(cfg, yaml.safe_load(f) or {})

    cfg["LOGGING"]["level"] = _check_level(cfg["LOGGING"].get("level"), path or config_path)
    return cfg


config = load_config()

edge_source = config["EDGES"]["source"]
edge_target = config["EDGES"]["target"]

logger = logging.getLogger("unionfind")
logger.addHandler(logging.NullHandler())
if config["LOGGING"]["level"] is not None:
    logger.setLevel(config["LOGGING"]["level"])
