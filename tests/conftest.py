"""Shared test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from webflow_cli.config.manager import ConfigManager
from webflow_cli.config.models import WebflowProfile


def pytest_addoption(parser):
    parser.addoption("--webflow-token", action="store", default=None)
    parser.addoption("--webflow-collection", action="store", default=None)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep the user's real config file and WEBFLOW_* variables out of tests."""
    for var in ("WEBFLOW_API_TOKEN", "WEBFLOW_BASE_URL", "WEBFLOW_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    manager = ConfigManager(config_path=tmp_path / "isolated" / "config.toml")
    with patch("webflow_cli.commands._common.get_manager", return_value=manager), patch(
        "webflow_cli.commands.config_cmd.get_manager", return_value=manager,
    ):
        yield
    # Every CLI invocation installs a handler; undo it so caplog keeps working
    logger = logging.getLogger("webflow_cli")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> WebflowProfile:
    """Return a sample connection profile for testing."""
    return WebflowProfile(name="test-site", token="testtoken-1234567890")


@pytest.fixture
def mock_sites() -> list[dict]:
    """Sample /sites response."""
    return [
        {
            "_id": "580e63e98c9a982ac9b8b741",
            "createdOn": "2016-10-24T19:41:29.156Z",
            "name": "api_docs_sample_json",
            "shortName": "api-docs-sample-json",
            "lastPublished": "2016-10-24T19:43:17.271Z",
            "previewUrl": "https://d1otoma47x30pg.cloudfront.net/580e63e98c9a982ac9b8b741/201610241943.png",
            "timezone": "America/Los_Angeles",
            "database": "580e63fc8c9a982ac9b8b744",
        },
        {
            "_id": "5c7e0f3b2a0e0a7f3d1e1a11",
            "name": "Company Blog",
            "shortName": "company-blog",
        },
    ]


@pytest.fixture
def mock_collections() -> list[dict]:
    """Sample /sites/{id}/collections response."""
    return [
        {
            "_id": "580e63fc8c9a982ac9b8b745",
            "lastUpdated": "2016-10-24T19:42:38.929Z",
            "createdOn": "2016-10-24T19:41:48.349Z",
            "name": "Blog Posts",
            "slug": "post",
            "singularName": "Blog Post",
        },
        {
            "_id": "580e63fc8c9a982ac9b8b746",
            "name": "Authors",
            "slug": "author",
            "singularName": "Author",
        },
    ]


def _make_items(start: int, count: int) -> list[dict]:
    """Build *count* item dicts numbered from *start*."""
    return [
        {
            "_id": f"item-{n}",
            "_cid": "580e63fc8c9a982ac9b8b745",
            "_archived": False,
            "_draft": n % 2 == 1,
            "name": f"Post {n}",
            "slug": f"post-{n}",
            "author": "580e640c8c9a982ac9b8b77a",
        }
        for n in range(start, start + count)
    ]


def _items_page(offset: int, count: int, total: int) -> dict:
    return {
        "items": _make_items(offset, count),
        "offset": offset,
        "count": count,
        "total": total,
    }


@pytest.fixture
def items_page():
    """Factory building a page envelope as returned by the items endpoint."""
    return _items_page
