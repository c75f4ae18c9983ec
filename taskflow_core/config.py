"""Runtime configuration read from ``TASKFLOW_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKFLOW_"


@dataclass(frozen=True)
class CatalogConfig:
    """Configuration for the catalog app"""

    page_title: str = "TaskFlow - Projects"
    brand_name: str = "TaskFlow"
    filter_debounce_ms: int = 250
    grid_columns: int = 4
    static_dir: str = "static"
    log_level: str = "INFO"

    @property
    def filter_debounce_seconds(self) -> float:
        return self.filter_debounce_ms / 1000.0


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s%s=%r: not an integer", ENV_PREFIX, name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s%s=%r: must be >= %d", ENV_PREFIX, name, raw, minimum)
        return default
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> CatalogConfig:
    """Build a config from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ
    defaults = CatalogConfig()
    return CatalogConfig(
        page_title=env.get(ENV_PREFIX + "PAGE_TITLE", defaults.page_title),
        brand_name=env.get(ENV_PREFIX + "BRAND_NAME", defaults.brand_name),
        filter_debounce_ms=_int_setting(env, "FILTER_DEBOUNCE_MS", defaults.filter_debounce_ms, 0),
        grid_columns=_int_setting(env, "GRID_COLUMNS", defaults.grid_columns, 1),
        static_dir=env.get(ENV_PREFIX + "STATIC_DIR", defaults.static_dir),
        log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
    )
