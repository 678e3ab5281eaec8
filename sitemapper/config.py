# === FILE: sitemapper/config.py ===
"""
Loading and validation of the SiteMapper crawl configuration.
Pydantic describes the schema; YAML or JSON files may provide the values.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitemapper.crawler.normalizer import strip_trailing_slash


class CrawlerConfig(BaseModel):
    """Settings of one crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    domain: str = Field(..., min_length=1, description="Bare host (optionally host:port) to crawl.")
    scheme: Literal["https", "http"] = Field("https", description="Scheme used for every request.")
    start_path: str = Field("/", description="Path the crawl starts from.")
    concurrency: int = Field(8, ge=1, description="Number of pages fetched at the same time.")
    timeout: float = Field(10.0, gt=0, description="Timeout of one request (seconds).")
    retry_times: int = Field(2, ge=0, description="Retries on 5xx/429 and network errors.")
    backoff: float = Field(1.0, ge=0, description="Base delay of the exponential backoff (seconds).")
    user_agent: str = Field("SiteMapper/0.1", min_length=1, description="User-Agent header.")
    frontier: Literal["fifo", "lifo"] = Field("fifo", description="fifo: breadth-first, lifo: depth-first.")
    fail_fast: bool = Field(False, description="Abort the crawl on the first page that cannot be fetched.")
    crawl_timeout: Optional[float] = Field(None, gt=0, description="Abort the whole crawl after this many seconds.")

    @field_validator("domain", mode="before")
    def _check_domain(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
            if "://" in v:
                raise ValueError("domain must be given without a scheme, e.g. 'example.com'")
            if any(ch in v for ch in "/?#@ \t"):
                raise ValueError(f"not a bare domain: {v!r}")
        return v

    @field_validator("start_path")
    def _check_start_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("start_path must start with '/'")
        return strip_trailing_slash(v)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Raw settings from a YAML or JSON file, not yet validated."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Build a CrawlerConfig from an optional YAML/JSON file.

    Keyword overrides that are not None win over the file's values.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**data)
