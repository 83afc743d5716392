"""Shared pytest fixtures for Video Catalog tests."""

import json
import random

import pytest

from config import Config, WebConfig, CatalogConfig
from data.catalog_store import Catalog
from data.query_engine import CatalogQueryEngine


SAMPLE_VIDEOS = [
    {
        "id": "a1",
        "title": "Cats",
        "totalDurationSeconds": 300,
        "segments": [
            {"part": 1, "startSeconds": 0, "durationSeconds": 120},
            {"part": 2, "startSeconds": 120, "durationSeconds": 180},
        ],
        "thumbnailURL": "https://img.example.com/a1.jpg",
    },
    {
        "id": "a2",
        "title": "Dogs",
        "totalDurationSeconds": 90,
        "segments": [],
        "thumbnailURL": "",
    },
    {
        "id": "a3",
        "title": "cat video",
        "totalDurationSeconds": 45,
        "segments": [{"part": 1, "startSeconds": 0, "durationSeconds": 45}],
        "thumbnailURL": "https://img.example.com/a3.jpg",
    },
]


@pytest.fixture
def sample_videos():
    """Raw dicts for the three-video scenario catalog."""
    return [dict(v) for v in SAMPLE_VIDEOS]


@pytest.fixture
def catalog(sample_videos):
    """Catalog of a1 "Cats", a2 "Dogs", a3 "cat video"."""
    return Catalog.from_records(sample_videos)


@pytest.fixture
def engine(catalog):
    """Query engine over the scenario catalog with a fixed seed."""
    return CatalogQueryEngine(catalog, rng=random.Random(1234))


@pytest.fixture
def big_catalog():
    """Catalog of 25 videos, v00..v24."""
    return Catalog.from_records(
        {"id": f"v{i:02d}", "title": f"Video {i}"} for i in range(25)
    )


@pytest.fixture
def catalog_file(tmp_path, sample_videos):
    """Write the scenario catalog to a JSON file and return its path."""
    path = tmp_path / "videos.json"
    path.write_text(json.dumps(sample_videos), encoding="utf-8")
    return path


@pytest.fixture
def sample_config(tmp_path, catalog_file):
    """Minimal Config with safe defaults for testing."""
    return Config(
        web=WebConfig(host="127.0.0.1", port=9999, base_url="https://videos.example.com"),
        catalog=CatalogConfig(path=str(catalog_file), default_page_size=10, max_page_size=50, seed=7),
    )


@pytest.fixture
def config_yaml(tmp_path):
    """Write a minimal config.yaml and return its path."""
    cfg = tmp_path / "config.yaml"
    cfg.write_text("""\
web:
  host: 0.0.0.0
  port: 8080
  base_url: "https://videos.example.com"
  cors_origins: ["https://app.example.com"]
catalog:
  path: "{catalog_path}"
  default_page_size: 20
  max_page_size: 60
  seed: 42
""".format(catalog_path=str(tmp_path / "cfg_videos.json")))
    return cfg
