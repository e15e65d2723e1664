from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/bid_tracker.yaml"

# eBid monthly sales export: title, id, amount and fund column positions.
DEFAULT_COLUMNS = {"title": 0, "bid_id": 1, "amount": 4, "fund": 8}


class ConfigError(Exception):
    """Raised when a config file exists but cannot be parsed."""


def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {p}")
    return data


@dataclass(frozen=True)
class LoadedConfig:
    csv_file: str = "eBid_Monthly_Sales.csv"
    search_dirs: List[str] = field(default_factory=lambda: ["", "data", "../data", "../../data"])
    default_bid_key: str = "98109"
    columns: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_COLUMNS))
    strip_char: str = "$"
    theme: str = "auto"
    min_width: int = 50
    default_width: int = 100
    log_level: str = "WARNING"


def _non_negative_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
    try:
        n = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be a non-negative integer, got {value!r}") from e
    if n < 0 or (isinstance(value, float) and value != n):
        raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")
    return n


def load_all(path: str | Path = DEFAULT_CONFIG_PATH) -> LoadedConfig:
    """Load the tracker config, falling back to defaults if the file is absent."""
    try:
        raw = load_yaml(path)
    except FileNotFoundError:
        logger.debug("Config %s not found, using defaults", path)
        raw = {}

    defaults = LoadedConfig()
    data = raw.get("data") or {}
    display = raw.get("display") or {}
    log = raw.get("logging") or {}

    columns = dict(DEFAULT_COLUMNS)
    for name, pos in (data.get("columns") or {}).items():
        if name not in DEFAULT_COLUMNS:
            raise ConfigError(f"Unknown column '{name}' (expected one of {sorted(DEFAULT_COLUMNS)})")
        columns[name] = _non_negative_int(pos, f"data.columns.{name}")

    return LoadedConfig(
        csv_file=str(data.get("csv_file", defaults.csv_file)),
        search_dirs=[str(d or "") for d in data.get("search_dirs", defaults.search_dirs)],
        default_bid_key=str(data.get("default_bid_key", defaults.default_bid_key)),
        columns=columns,
        strip_char=str(data.get("strip_char", defaults.strip_char)),
        theme=str(display.get("theme", defaults.theme)),
        min_width=_non_negative_int(display.get("min_width", defaults.min_width), "display.min_width"),
        default_width=_non_negative_int(display.get("default_width", defaults.default_width), "display.default_width"),
        log_level=str(log.get("level", defaults.log_level)).upper(),
    )


def find_data_file(filename: str, search_dirs: List[str]) -> str:
    """Return the first existing candidate for ``filename``, else ``filename`` itself."""
    for d in search_dirs:
        candidate = Path(d) / filename if d else Path(filename)
        if candidate.is_file():
            return str(candidate)
    return filename
