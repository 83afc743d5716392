"""Configuration management for the Video Catalog service."""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_PAGE_SIZE = 10
_DEFAULT_MAX_PAGE_SIZE = 100
DEFAULT_BASE_URL = "https://viewdiful.vercel.app"


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in strings, dicts, and lists.

    Supports both ${VAR} and $VAR patterns.
    """
    if isinstance(value, str):
        # Expand ${VAR} pattern
        pattern = re.compile(r'\$\{([^}]+)\}')
        result = pattern.sub(lambda m: os.environ.get(m.group(1), ''), value)
        # Expand $VAR pattern
        pattern = re.compile(r'\$([A-Za-z_][A-Za-z0-9_]*)')
        result = pattern.sub(lambda m: os.environ.get(m.group(1), ''), result)
        return result
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    else:
        return value


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def _optional_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


@dataclass
class WebConfig:
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 8080
    base_url: str = ""  # prefix for sitemap links; env VCAT_BASE_URL, then DEFAULT_BASE_URL
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def __post_init__(self):
        if not self.base_url:
            self.base_url = os.environ.get("VCAT_BASE_URL", "") or DEFAULT_BASE_URL
        if isinstance(self.cors_origins, str):
            self.cors_origins = _split_origins(self.cors_origins)


@dataclass
class CatalogConfig:
    """Catalog source and query defaults."""
    path: str = "videos.json"
    default_page_size: int = _DEFAULT_PAGE_SIZE  # used when limit is missing or invalid
    max_page_size: int = _DEFAULT_MAX_PAGE_SIZE
    seed: Optional[int] = None  # fixed seed for reproducible shuffles; None = OS entropy

    def __post_init__(self):
        # YAML env expansion yields strings, e.g. "" for an unset ${VCAT_SEED}
        if isinstance(self.seed, str):
            self.seed = _optional_int(self.seed)


@dataclass
class Config:
    """Main configuration container."""
    web: WebConfig = field(default_factory=WebConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from YAML file with environment variable expansion."""
        path = Path(path)
        with open(path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        # Expand environment variables
        expanded_config = expand_env_vars(raw_config)

        web_data = expanded_config.get("web") or {}
        catalog_data = expanded_config.get("catalog") or {}

        return cls(
            web=WebConfig(**web_data),
            catalog=CatalogConfig(**catalog_data),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration directly from environment variables."""
        return cls(
            web=WebConfig(
                host=os.environ.get("VCAT_WEB_HOST", "0.0.0.0"),
                port=int(os.environ.get("VCAT_WEB_PORT", "8080")),
                base_url=os.environ.get("VCAT_BASE_URL", "") or DEFAULT_BASE_URL,
                cors_origins=_split_origins(os.environ.get("VCAT_CORS_ORIGINS", "*")),
            ),
            catalog=CatalogConfig(
                path=os.environ.get("VCAT_CATALOG_PATH", "videos.json"),
                default_page_size=int(os.environ.get("VCAT_DEFAULT_PAGE_SIZE", str(_DEFAULT_PAGE_SIZE))),
                max_page_size=int(os.environ.get("VCAT_MAX_PAGE_SIZE", str(_DEFAULT_MAX_PAGE_SIZE))),
                seed=_optional_int(os.environ.get("VCAT_SEED")),
            ),
        )


def load_config(config_path: str | None = None) -> Config:
    """Load configuration from file or environment.

    Tries in order:
    1. Provided config_path
    2. Default paths: config.yaml, config.yml
    3. Environment variables (fallback)
    """
    config: Config | None = None

    if config_path:
        path = Path(config_path)
        if path.exists():
            config = Config.from_yaml(path)
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        # Try default paths
        for default_path in ["config.yaml", "config.yml"]:
            path = Path(default_path)
            if path.exists():
                config = Config.from_yaml(path)
                break

    if config is None:
        # Fallback to environment variables
        config = Config.from_env()

    cat = config.catalog
    if cat.default_page_size <= 0:
        logger.warning("catalog.default_page_size %r is not positive, using %d",
                       cat.default_page_size, _DEFAULT_PAGE_SIZE)
        cat.default_page_size = _DEFAULT_PAGE_SIZE
    if cat.max_page_size < cat.default_page_size:
        logger.warning("catalog.max_page_size %r is below default_page_size, raising to %d",
                       cat.max_page_size, cat.default_page_size)
        cat.max_page_size = cat.default_page_size

    return config
