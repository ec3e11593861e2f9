"""Configuration for pi-mdtable. Read from ~/.pi/mdtable.json when present."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pi.mdtable.layout import MIN_COLUMN_WIDTH

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "mdtable.json"


@dataclass
class Config:
    """Formatter options."""

    debug: bool = False
    min_column_width: int = MIN_COLUMN_WIDTH

    def __post_init__(self) -> None:
        if self.min_column_width < 1:
            raise ValueError(
                f"min_column_width must be >= 1, got {self.min_column_width}"
            )


def config_from_dict(data: dict) -> Config:
    """Deserialize a Config from a JSON-compatible dict."""
    return Config(
        debug=bool(data.get("debug", False)),
        min_column_width=int(data.get("minColumnWidth", MIN_COLUMN_WIDTH)),
    )


def config_to_dict(config: Config) -> dict:
    """Serialize a Config to a JSON-compatible dict."""
    return {
        "debug": config.debug,
        "minColumnWidth": config.min_column_width,
    }


def get_config_path() -> Path:
    config_dir = Path(os.environ.get("PI_CONFIG_DIR", Path.home() / ".pi"))
    return config_dir / CONFIG_FILE_NAME


def load_config(path: str | Path | None = None) -> Config:
    """Load the config file, falling back to defaults if it is missing or bad."""
    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.exists():
        return Config()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        return config_from_dict(data)
    except (OSError, ValueError, TypeError, AttributeError) as e:
        logger.warning("Error reading config %s: %s", config_path, e)
        return Config()


def save_config(config: Config, path: str | Path | None = None) -> None:
    config_path = Path(path) if path is not None else get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config_to_dict(config), indent=2), encoding="utf-8")
