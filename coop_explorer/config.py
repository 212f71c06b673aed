from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .buyers import BuyerDirectory
from .data_io import DEFAULT_DATA_PATH

logger = logging.getLogger(__name__)

# -----------------------
# Config
# -----------------------
DATA_PATH_ENV = "COOP_EXPLORER_DATA_PATH"
BUYER_COUNTRIES_ENV = "COOP_EXPLORER_BUYER_COUNTRIES"  # optional JSON file
LOG_LEVEL_ENV = "COOP_EXPLORER_LOG_LEVEL"
SHOW_GRAPH_ENV = "COOP_EXPLORER_SHOW_GRAPH"  # "true"/"false"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SHOW_GRAPH = True

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    buyer_countries_path: Optional[Path] = None
    log_level: str = DEFAULT_LOG_LEVEL
    show_graph: bool = DEFAULT_SHOW_GRAPH


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    level = (env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{LOG_LEVEL_ENV}: unknown log level '{level}'")

    data_path = env.get(DATA_PATH_ENV)
    buyers_path = env.get(BUYER_COUNTRIES_ENV)

    return Settings(
        data_path=Path(data_path) if data_path else DEFAULT_DATA_PATH,
        buyer_countries_path=Path(buyers_path) if buyers_path else None,
        log_level=level,
        show_graph=_as_bool(env.get(SHOW_GRAPH_ENV), DEFAULT_SHOW_GRAPH),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure the package logger once; later calls only change the level."""
    pkg_logger = logging.getLogger("coop_explorer")
    pkg_logger.setLevel(level)
    if not any(getattr(h, "_coop_explorer", False) for h in pkg_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._coop_explorer = True  # type: ignore[attr-defined]
        pkg_logger.addHandler(handler)


def load_buyer_directory(settings: Settings) -> BuyerDirectory:
    """Buyer -> country mapping, from the override file when one is configured."""
    path = settings.buyer_countries_path
    if path is None:
        return BuyerDirectory()
    if not path.exists():
        logger.warning("%s=%s not found; using the built-in buyer countries", BUYER_COUNTRIES_ENV, path)
        return BuyerDirectory()
    return BuyerDirectory.from_path(path)
