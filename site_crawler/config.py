# === FILE: site_crawler/config.py ===
"""
Crawl settings: a frozen pydantic model read from YAML or JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError

DEFAULT_USER_AGENT = "BootCrawler/1.0"


class CrawlerConfig(BaseModel):
    """Settings for a single crawl run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(..., description="Root URL the crawl starts from.")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")
    timeout: Optional[float] = Field(None, gt=0, description="Per-request timeout in seconds, none by default.")
    collect_pages: bool = Field(True, description="Keep extracted data for every fetched page.")


_DEFAULT_CFG = Path("configs/default.yaml")

# suffix -> (format name, parser, parse error)
_LOADERS: Dict[str, Tuple[str, Callable[[str], Any], Type[Exception]]] = {
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".json": ("JSON", json.loads, json.JSONDecodeError),
}


def _read_mapping(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix not in _LOADERS:
        raise ValueError(f"Unsupported config format: {suffix}")
    fmt, parse, error = _LOADERS[suffix]
    try:
        data = parse(path.read_text(encoding="utf-8")) or {}
    except error as exc:
        raise ValueError(f"Invalid {fmt} in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of {fmt} must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """Validate the YAML or JSON file at *path* (``configs/default.yaml`` when None)."""
    path_obj = _DEFAULT_CFG if path is None else Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))
    return CrawlerConfig(**_read_mapping(path_obj))


__all__ = ["CrawlerConfig", "DEFAULT_USER_AGENT", "ValidationError", "load_config"]
