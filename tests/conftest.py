"""Shared pytest configuration and fixtures for all tests."""

import json
import os
import tempfile
from pathlib import Path

# Log file goes to a throwaway home, never the user's ~/.afflink
os.environ["AFFLINK_HOME"] = tempfile.mkdtemp(prefix="afflink-test-home-")

import pytest  # noqa: E402

from afflink.api.config.AfflinkConfig import AfflinkConfig  # noqa: E402


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    config.addinivalue_line("markers", "store: tests touching a store backend")


# =============================================================================
# Content Helpers
# =============================================================================

SKILLET_URL = (
    "https://www.amazon.com/gp/product/B000A6PPOK/ref=as_li_ss_tl"
    "?camp=1789&creative=390957&tag=donkitchencom-20"
)
SECOND_SKILLET_URL = "https://www.amazon.com/dp/B000TESTXX"
DOCS_URL = "https://docs.python.org/3/library/re.html"

POST_A = f"""# Gear

Buy the [Cast Iron Skillet]({SKILLET_URL}) today.
Read [the docs]({DOCS_URL}) and [about us](/about).
"""

POST_B = f"""Also see [Cast Iron Skillet]({SECOND_SKILLET_URL}) for a second one.
And [the docs]({DOCS_URL}) again, or [mail](mailto:hi@example.com).
"""


def write_content(root: Path) -> Path:
    """Write a small two-post corpus plus an excluded build copy; return the content root."""
    content = root / "content"
    (content / "posts").mkdir(parents=True, exist_ok=True)
    (content / "posts" / "a.md").write_text(POST_A, encoding="utf-8")
    (content / "posts" / "b.md").write_text(POST_B, encoding="utf-8")
    (content / "dist").mkdir(exist_ok=True)
    (content / "dist" / "a.md").write_text(POST_A, encoding="utf-8")
    return content


def minimal_config_dict(content_root: Path | str = ".") -> dict:
    """Minimal valid afflink configuration dict for testing."""
    return {
        "content": {
            "root": str(content_root),
            "include": ["**/*.md", "**/*.mdx"],
            "exclude": ["**/node_modules/**", "**/dist/**", "**/.git/**"],
        },
        "site_url": "https://example.com",
        "tracking": {"base_path": "/link/"},
        "networks": {"amazon": {"enabled": True, "tag": "mytag-20", "clean_params": True}},
        "store": None,
    }


def minimal_afflink_config(content_root: Path | str = ".") -> AfflinkConfig:
    return AfflinkConfig(**minimal_config_dict(content_root))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run every test in its own directory with an empty AFFLINK_HOME.

    Keeps ./afflink.json and $AFFLINK_HOME/config.json lookups hermetic.
    """
    work = tmp_path / "work"
    home = tmp_path / "home"
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("AFFLINK_HOME", str(home))
    return work


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    return write_content(tmp_path)


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(content_root: Path) -> dict:
    """Pytest fixture returning the minimal config dict pointed at the sample corpus."""
    return minimal_config_dict(content_root)


@pytest.fixture
def afflink_config(minimal_config_dict: dict) -> AfflinkConfig:
    return AfflinkConfig(**minimal_config_dict)


@pytest.fixture
def config_file(tmp_path: Path, minimal_config_dict: dict) -> Path:
    """Write the minimal config to a file and return its path."""
    path = tmp_path / "afflink.json"
    path.write_text(json.dumps(minimal_config_dict, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def json_store_config_file(tmp_path: Path, minimal_config_dict: dict) -> Path:
    """Config file with a JSON file store under tmp_path."""
    config = dict(minimal_config_dict)
    config["store"] = {"type": "json", "data": {"path": str(tmp_path / "links.json")}}
    path = tmp_path / "afflink-json-store.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
