"""Logic for loading and merging formatter configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from docformat.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "format": "html",
    "html": {
        "css": None,
        "breadcrumb_separator": "&nbsp;/&nbsp;",
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    if not p.exists():
        logger.warning("Config file %s not found. Using defaults.", p)
        return config

    user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    logger.info("Loaded configuration from %s", p)
    return deep_merge(config, user_config)
